# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_ref_model.py

"""Expectation model used by the scoreboard."""

import logging
from typing import Generic, TypeVar

import pyuvm

from . import utils_dv
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseRefModel(pyuvm.uvm_object, Generic[T]):
    """Independent expectation for one observation.

    calc_exp() builds the expected item from the observation's inputs only;
    it never looks at the device. Subclasses call require_inputs() first so
    an observation with unset inputs is refused instead of guessed at.

    Subclasses must implement:
        calc_exp(observed): Return a new item holding the expected outputs

    Reference:
        C.E. Cummings, "OVM/UVM Scoreboards - Fundamental Architectures,"
        SNUG 2013
    """

    def __init__(self, name: str = "ref_model") -> None:
        super().__init__(name)
        self.logger = logging.getLogger(f"dffbench.ref_model.{name}")
        utils_dv.apply_log_level(self.logger)

    def require_inputs(self, observed: T) -> None:
        missing = observed.unset_fields(observed.in_fields())
        if missing:
            raise ValueError(f"{observed.get_name()}: no value for {missing}")

    def calc_exp(self, observed: T) -> T:
        """Return the expected item for `observed`."""
        raise NotImplementedError
