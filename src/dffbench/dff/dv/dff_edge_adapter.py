# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_edge_adapter.py

"""Clocks the register model from the bench clock net."""

from __future__ import annotations

import pyuvm

from dffbench.shared.dv import BaseClockMixin, utils_dv

from .dff_model import DffModel


class DffEdgeAdapter(BaseClockMixin, pyuvm.uvm_component):
    """Device side of the bench: calls model.on_rising_edge() on every rising edge.

    The update happens in the edge callback itself, so anything that resumes
    later in the same time step (the driver's drive point, the monitor's
    ReadOnly sample) sees the value latched at that edge. It runs for the
    whole run_phase and is not one of the bounded agents.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.apply_log_level(self)
        self.model: DffModel | None = None

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        self.clock_setup()
        if self.model is None:
            raise RuntimeError(f"{self.get_full_name()}: no model injected")

    async def run_phase(self) -> None:
        assert self.model is not None
        model = self.model
        while True:
            await self.clock_rising_edge()
            model.on_rising_edge()
