# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_clock_mixin.py

"""Clock timing shared by every clocked bench component."""

from __future__ import annotations

from typing import cast

import pyuvm
from cocotb.handle import SimHandleBase
from cocotb.triggers import ReadWrite, Timer

from ..bench_config import BenchModel
from . import utils_dv


class BaseClockMixin:
    """One clock, one drive point, for every component that waits on edges.

    clock_setup() binds the bench clock net and derives the drive skew from
    the published BenchModel; call it from end_of_elaboration_phase. The
    waits are only valid after that.

    Timing:
        clock_rising_edge(): the next rising edge of the bench clock
        clock_drive_edge(): the next rising edge plus
            clock_period_ps * drive_frac_after. A zero skew resumes in the
            ReadWrite step of the edge instead, after everything the edge
            itself triggered has run.

    Reference:
        C.E. Cummings, "Applying Stimulus & Sampling Outputs - UVM Verification
        Testing Techniques," SNUG 2016 (Austin)
    """

    cfg: BenchModel
    _clk: SimHandleBase | None = None
    _skew_ps: int = 0

    def clock_setup(self) -> None:
        comp = cast(pyuvm.uvm_component, self)
        self.cfg = utils_dv.bench_cfg(comp)
        dut = utils_dv.require(comp, utils_dv.DUT_KEY)
        self._clk = utils_dv.clock_signal(dut, self.cfg.clock_name)
        self._skew_ps = int(self.cfg.clock_period_ps * self.cfg.drive_frac_after)
        comp.logger.debug(
            "clock %s: period=%d ps, drive skew=%d ps",
            self.cfg.clock_name,
            self.cfg.clock_period_ps,
            self._skew_ps,
        )

    @property
    def clock_period_ps(self) -> int:
        return self.cfg.clock_period_ps

    async def clock_rising_edge(self) -> None:
        assert self._clk is not None, "clock_setup() has not run"
        await self._clk.rising_edge

    async def clock_drive_edge(self) -> None:
        await self.clock_rising_edge()
        if self._skew_ps:
            await Timer(self._skew_ps, unit="ps")
        else:
            await ReadWrite()
