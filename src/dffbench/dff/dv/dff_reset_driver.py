# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_reset_driver.py

"""Reset and preset control for the register model."""

from __future__ import annotations

import pyuvm

from dffbench.shared.dv import BaseResetDriver

from .dff_model import DffModel


class DffResetDriver(BaseResetDriver):
    """Drive the model's reset level and, when configured, its preset level.

    Preset is a static level: it is applied once before the reset sequence
    and stays asserted for the rest of the run. With reset released the
    register then stores 1 on every edge regardless of d.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.model: DffModel | None = None

    def set_reset(self, active: bool) -> None:
        assert self.model is not None, "no model injected"
        if active:
            self.model.assert_reset()
        else:
            self.model.deassert_reset()

    async def pulse_reset(self) -> None:
        assert self.model is not None, "no model injected"
        if getattr(self.cfg, "preset", False):
            self.model.assert_preset()
            self.logger.info("preset asserted for the whole run")
        await super().pulse_reset()
