# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/bench_config.py

"""Validated bench run configuration.

A BenchModel gathers every knob a bench reads into one pydantic model. It is
resolved once per test (settings first, then code overrides), validated, and
then published as one object into pyuvm's ConfigDB by BaseTest. The setting
name for a field is its upper case form (``count`` is read from ``COUNT``,
``DFFB_COUNT`` or ``+COUNT=``).
"""

from __future__ import annotations

import json
from typing import Any, Callable, Self

from pydantic import (
    BaseModel,
    NonNegativeInt,
    PositiveInt,
    field_validator,
    model_validator,
)

from . import settings

_GETTERS: dict[type, Callable[[str, Any], Any]] = {
    bool: settings.get_bool_setting,
    int: settings.get_int_setting,
    float: settings.get_float_setting,
    str: settings.get_str_setting,
}


class BenchModel(BaseModel):
    """Run configuration shared by every bench.

    Example:
        >>> cfg = BenchModel.from_settings(count=5)
        >>> cfg.count
        5
        >>> cfg.monitor_delay_ps < cfg.clock_period_ps
        True
    """

    # Transactions handled by every agent in one run
    count: PositiveInt = 1

    clock_name: str = "clk"
    clock_period_ps: PositiveInt = 1_000
    clock_start_high: bool = False
    clock_init_delay_ps: NonNegativeInt = 0

    # Drive point, as a fraction of the period after the rising edge
    drive_frac_after: float = 0.20
    # Extra wait before the monitor's sampling edge
    monitor_delay_ps: NonNegativeInt = 300

    reset_cycles: NonNegativeInt = 2
    reset_settle_cycles: NonNegativeInt = 0
    reset_hold: bool = False

    check_en: bool = True
    coverage_en: bool = True
    sb_fail_on_error: bool = True
    drain_time_ps: NonNegativeInt = 2_000

    @field_validator("drive_frac_after")
    @classmethod
    def _check_frac(cls, v: float) -> float:
        if not 0.0 <= v < 1.0:
            raise ValueError(f"drive_frac_after must be in [0.0, 1.0), got {v}")
        return v

    @model_validator(mode="after")
    def _check_timing(self) -> Self:
        if self.monitor_delay_ps >= self.clock_period_ps:
            raise ValueError(
                f"monitor_delay_ps ({self.monitor_delay_ps}) must be less than "
                f"clock_period_ps ({self.clock_period_ps})"
            )
        return self

    @classmethod
    def from_settings(cls, **overrides: Any) -> Self:
        """Resolve every field from settings, then apply code overrides.

        Settings that are not present leave the field default in place.
        Overrides win over settings so directed tests stay directed.
        """
        data: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            getter = _GETTERS.get(field.annotation)  # type: ignore[arg-type]
            key = name.upper()
            if getter is None or settings.get_raw_setting(key) is None:
                continue
            data[name] = getter(key, field.get_default())
        data.update(overrides)
        return cls.model_validate(data)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}:\n" + json.dumps(self.model_dump(), indent=2)
