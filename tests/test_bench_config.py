# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_bench_config.py

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dffbench.dff.dv.dff_config import RANDOM_D, DffBenchModel
from dffbench.shared.bench_config import BenchModel


def test_defaults(clean_settings: pytest.MonkeyPatch) -> None:
    cfg = BenchModel.from_settings()
    assert cfg.count == 1
    assert cfg.clock_period_ps == 1000
    assert cfg.drive_frac_after == pytest.approx(0.20)
    assert cfg.monitor_delay_ps == 300
    assert cfg.reset_cycles == 2
    assert not cfg.reset_hold
    assert cfg.sb_fail_on_error


@pytest.mark.parametrize(
    "kwargs",
    [
        {"count": 0},
        {"clock_period_ps": 0},
        {"drive_frac_after": 1.0},
        {"drive_frac_after": -0.1},
        {"monitor_delay_ps": 1000},
        {"reset_cycles": -1},
    ],
)
def test_rejects_bad_values(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        BenchModel(**kwargs)


def test_monitor_delay_scales_with_period() -> None:
    cfg = BenchModel(clock_period_ps=5000, monitor_delay_ps=1000)
    assert cfg.monitor_delay_ps == 1000


def test_from_settings_reads_present_settings(clean_settings: pytest.MonkeyPatch) -> None:
    clean_settings.setenv("COCOTB_PLUSARGS", "+COUNT=25 +RESET_HOLD +CLOCK_PERIOD_PS=2000")
    cfg = BenchModel.from_settings()
    assert cfg.count == 25
    assert cfg.reset_hold is True
    assert cfg.clock_period_ps == 2000


def test_overrides_win(clean_settings: pytest.MonkeyPatch) -> None:
    clean_settings.setenv("COUNT", "25")
    cfg = BenchModel.from_settings(count=3)
    assert cfg.count == 3


def test_invalid_setting_is_reported(clean_settings: pytest.MonkeyPatch) -> None:
    clean_settings.setenv("COUNT", "0")
    with pytest.raises(ValidationError):
        BenchModel.from_settings()


def test_dff_fields(clean_settings: pytest.MonkeyPatch) -> None:
    cfg = DffBenchModel.from_settings()
    assert cfg.fixed_d == RANDOM_D
    assert cfg.preset is False
    clean_settings.setenv("COCOTB_PLUSARGS", "+FIXED_D=1 +PRESET")
    cfg = DffBenchModel.from_settings()
    assert cfg.fixed_d == 1
    assert cfg.preset is True


def test_dff_fixed_d_range() -> None:
    with pytest.raises(ValidationError):
        DffBenchModel(fixed_d=2)


def test_dump_has_every_field() -> None:
    dumped = DffBenchModel().model_dump()
    assert set(dumped) == set(DffBenchModel.model_fields)
    assert "count" in str(DffBenchModel())
