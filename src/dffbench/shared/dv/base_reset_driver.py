# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_reset_driver.py

"""Base reset driver."""

from __future__ import annotations

from typing import Any

import pyuvm
from cocotb.triggers import ReadWrite

from . import utils_dv
from .base_clock_mixin import BaseClockMixin


class BaseResetDriver(BaseClockMixin, pyuvm.uvm_component):
    """Run the reset sequence on the same drive points the driver uses.

    pulse_reset() asserts reset at time 0, holds it for reset_cycles drive
    edges, releases it on the last of them (unless reset_hold) and then lets
    reset_settle_cycles more drive edges pass. The environment awaits it
    before starting the agents, so the first item is applied one drive edge
    after the release. With the defaults (1000 ps period, 2 cycles) reset
    covers the rising edges at 500 and 1500 ps and is released at 1700 ps.

    Subclasses must implement:
        set_reset(active): Apply the reset level to the device handle `model`

    Reference:
        https://github.com/advanced-uvm/second_edition/blob/master/recipes/3.rst_drv.sv
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.apply_log_level(self)
        self.model: Any = None
        self.reset_active: bool = False

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        self.clock_setup()

    def set_reset(self, active: bool) -> None:
        raise NotImplementedError("Implement set_reset here")

    def _level(self, active: bool) -> None:
        self.set_reset(active)
        self.reset_active = active
        self.logger.debug(
            "reset %s @ %d ps", "on" if active else "off", utils_dv.sim_time_ps()
        )

    async def _edges(self, n: int) -> None:
        for _ in range(n):
            await self.clock_drive_edge()

    async def pulse_reset(self) -> None:
        self._level(True)
        await ReadWrite()
        await self._edges(self.cfg.reset_cycles)
        if self.cfg.reset_hold:
            self.logger.info("reset held for the whole run")
        else:
            self._level(False)
        await self._edges(self.cfg.reset_settle_cycles)
