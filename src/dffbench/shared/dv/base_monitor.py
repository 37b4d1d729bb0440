# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_monitor.py

"""Base monitor with delayed rising-edge sampling."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import pyuvm
from cocotb.triggers import ReadOnly, Timer

from . import utils_dv
from .base_agent import BaseAgent
from .base_clock_mixin import BaseClockMixin
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseMonitor(BaseClockMixin, BaseAgent, Generic[T]):
    """Sample the device `count` times into the observation mailbox.

    The monitor first aligns to one rising edge, the edge the driver's first
    drive point follows. Then, per observation, it waits monitor_delay_ps
    (BenchModel default 300 ps), the next rising edge and the ReadOnly step,
    and calls sample_dut(). BenchModel keeps monitor_delay_ps below one clock
    period, so observation k is taken on the edge right after item k was
    applied, before item k+1 is. It never writes to the device.

    Subclasses must implement:
        sample_dut(model, index): Build one observation from device state
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.put_port: pyuvm.uvm_blocking_put_port

    def build_phase(self) -> None:
        super().build_phase()
        self.put_port = pyuvm.uvm_blocking_put_port("put_port", self)

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        self.clock_setup()

    async def _sampling_point(self) -> None:
        if self.cfg.monitor_delay_ps:
            await Timer(self.cfg.monitor_delay_ps, unit="ps")
        await self.clock_rising_edge()
        await ReadOnly()

    async def main(self, count: int | None = None) -> None:
        n = self._resolve_count(count)
        self.logger.debug("main begin: count=%d", n)
        await self.clock_rising_edge()
        for i in range(n):
            await self._sampling_point()
            tr: T = self.sample_dut(self.model, i)
            self.logger.debug("mon[%d] %s @ %d ps", i, tr, utils_dv.sim_time_ps())
            await self.put_port.put(tr)
            self.handled += 1
        self.logger.debug("main end")

    def sample_dut(self, model: Any, index: int) -> T:
        """Return the observation for this sampling point."""
        raise NotImplementedError("Implement sample_dut here")
