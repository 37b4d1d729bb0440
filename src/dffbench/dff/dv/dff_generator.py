# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_generator.py

"""Random or directed d stimulus."""

from __future__ import annotations

import random

import pyuvm

from dffbench.shared.dv import BaseGenerator

from .dff_config import RANDOM_D
from .dff_item import DffItem


class DffGenerator(BaseGenerator[DffItem]):
    """Draw each d independently and uniformly from {0, 1}.

    Python's random module is seeded by cocotb from COCOTB_RANDOM_SEED, so
    the same seed reproduces the same stimulus. With fixed_d set to 0 or 1
    every item carries that value instead.
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.generated: list[int] = []

    def set_item_inputs(self, item: DffItem, index: int) -> None:
        fixed = getattr(self.cfg, "fixed_d", RANDOM_D)
        d = random.randint(0, 1) if fixed == RANDOM_D else fixed
        item.d = d
        self.generated.append(d)
