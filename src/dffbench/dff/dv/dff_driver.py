# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_driver.py

"""Driver for the 1-bit register."""

from __future__ import annotations

import pyuvm

from dffbench.shared.dv import BaseDriver, utils_dv

from .dff_item import DffItem
from .dff_model import DffModel


class DffDriver(BaseDriver[DffItem]):
    """Apply d at the drive point, then read q back into the item.

    The read-back happens in the same step as apply(), after the edge has
    already been processed, so it always returns the value latched from the
    previous input. It is kept as a diagnostic only; the monitor's sample one
    edge later is the authoritative observation.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.applied: list[int] = []

    async def drive_item(self, model: DffModel, tr: DffItem) -> None:
        await self.clock_drive_edge()
        model.apply(tr.d)
        tr.q = model.read()
        self.applied.append(tr.d)
        self.logger.debug(
            "drv[%d] %s d=%d q(readback)=%d @ %d ps",
            self.handled,
            tr.get_name(),
            tr.d,
            tr.q,
            utils_dv.sim_time_ps(),
        )
