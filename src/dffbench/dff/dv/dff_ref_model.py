# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_ref_model.py

"""Expected output for a register observation."""

from __future__ import annotations

from dffbench.shared.dv import BaseRefModel

from .dff_item import DffItem


class DffRefModel(BaseRefModel[DffItem]):
    """Expect the sampled q to equal the sampled d.

    The expectation ignores reset and preset: an observation taken while
    either is asserted and disagreeing with d is reported as a mismatch.
    """

    def calc_exp(self, observed: DffItem) -> DffItem:
        self.require_inputs(observed)
        exp = DffItem(f"exp_{observed.get_name()}")
        exp.d = observed.d
        exp.q = observed.d
        return exp
