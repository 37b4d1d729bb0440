# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_clock_driver.py

"""Free-running bench clock."""

from __future__ import annotations

import cocotb
import pyuvm
from cocotb.clock import Clock
from cocotb.task import Task
from cocotb.triggers import Timer

from . import utils_dv
from .base_clock_mixin import BaseClockMixin


class BaseClockDriver(BaseClockMixin, pyuvm.uvm_component):
    """Toggle the bench clock net for the whole simulation.

    The clock is the only thing the agents synchronize on. It starts in
    start_of_simulation_phase, before any run_phase code, so every clocked
    component sees the same first edge. With the default low start the
    rising edges fall at clock_init_delay_ps + (k + 1/2) * clock_period_ps.

    BenchModel fields used: clock_name, clock_period_ps, clock_start_high,
    clock_init_delay_ps.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.apply_log_level(self)
        self.clock: Clock | None = None
        self._delayed: Task | None = None

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        self.clock_setup()

    def start_of_simulation_phase(self) -> None:
        super().start_of_simulation_phase()
        self.clock = Clock(self._clk, self.clock_period_ps, unit="ps")
        if self.cfg.clock_init_delay_ps:
            self._delayed = cocotb.start_soon(self._start_after_delay())
        else:
            self._start()

    async def _start_after_delay(self) -> None:
        await Timer(self.cfg.clock_init_delay_ps, unit="ps")
        self._start()

    def _start(self) -> None:
        assert self.clock is not None
        self.clock.start(start_high=self.cfg.clock_start_high)
        self.logger.debug(
            "clock %s running @ %d ps", self.cfg.clock_name, utils_dv.sim_time_ps()
        )

    def final_phase(self) -> None:
        if self._delayed is not None and not self._delayed.done():
            self._delayed.cancel()
        elif self.clock is not None:
            self.clock.stop()
        self.clock = None
        super().final_phase()
