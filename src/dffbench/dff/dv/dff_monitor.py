# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_monitor.py

"""Monitor for the 1-bit register."""

from __future__ import annotations

from dffbench.shared.dv import BaseMonitor

from .dff_item import DffItem
from .dff_model import DffModel


class DffMonitor(BaseMonitor[DffItem]):
    """Sample the pending input and the stored bit into a fresh observation."""

    def sample_dut(self, model: DffModel, index: int) -> DffItem:
        item = DffItem(f"obs{index}")
        item.d = model.d
        item.q = model.read()
        return item
