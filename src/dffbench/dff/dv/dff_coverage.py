# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_coverage.py

"""Driver-fed functional coverage for the 1-bit register."""

from __future__ import annotations

import pyuvm
from cocotb_coverage.coverage import CoverCross, CoverPoint, coverage_section

from dffbench.shared.dv import BaseCoverage

from .dff_item import DffItem

DffSample = coverage_section(
    CoverPoint("top.dff.d", xf=lambda self, tt: tt.d, bins=[0, 1]),
    CoverPoint("top.dff.q_prev", xf=lambda self, tt: tt.q, bins=[0, 1]),
    CoverCross("top.dff.d_x_q_prev", items=["top.dff.d", "top.dff.q_prev"]),
)


class DffCoverage(BaseCoverage[DffItem]):
    """Cover d against the stored bit it replaces.

    Fed by the driver, so q here is the read-back taken just after d was
    applied (the value d is about to overwrite). The d x q_prev cross closes
    once all four 0/1 transitions have been driven. `ones` backs the input
    distribution check in the random test.
    """

    prefix = "top.dff"

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.ones: int = 0

    @property
    def total(self) -> int:
        return self.sampled

    @property
    def zeros(self) -> int:
        return self.sampled - self.ones

    @DffSample
    def sample(self, tt: DffItem) -> None:
        if tt.d == 1:
            self.ones += 1

    def report_phase(self) -> None:
        super().report_phase()
        self.logger.info("d: %d zero(s), %d one(s)", self.zeros, self.ones)
