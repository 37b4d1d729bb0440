# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_config.py

"""Run configuration for the 1-bit register bench."""

from __future__ import annotations

from pydantic import field_validator

from dffbench.shared.bench_config import BenchModel

RANDOM_D = -1


class DffBenchModel(BenchModel):
    """BenchModel plus the register's control levels and directed stimulus.

    Fields:
        preset: Hold preset asserted for the whole run
        fixed_d: -1 for uniformly random d, or 0/1 to drive that value on
                 every transaction

    Settings: PRESET, FIXED_D (plus every BenchModel setting).
    """

    preset: bool = False
    fixed_d: int = RANDOM_D

    @field_validator("fixed_d")
    @classmethod
    def _check_fixed_d(cls, v: int) -> int:
        if v not in (RANDOM_D, 0, 1):
            raise ValueError(f"fixed_d must be -1 (random), 0 or 1, got {v}")
        return v
