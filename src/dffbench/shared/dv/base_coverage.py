# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_coverage.py

"""Driver-fed functional coverage (cocotb-coverage + pyuvm)."""

from __future__ import annotations

import os
from typing import Generic, TypeVar

import pyuvm
from cocotb_coverage.coverage import coverage_db

from . import utils_dv
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseCoverage(pyuvm.uvm_subscriber, Generic[T]):
    """Side collaborator that sees every item the driver applied.

    The environment builds it only when coverage_en is set and connects the
    driver's analysis port to analysis_export. Each write() counts the item
    and calls sample(), which subclasses decorate with cocotb-coverage
    CoverPoint/CoverCross sections. Nothing flows back into driving or
    checking.

    At report_phase the hit percentage of every cover item under `prefix`
    is logged and, when COV_YAML names a file, the whole coverage database
    is exported there.
    """

    prefix = "top"

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.apply_log_level(self)
        self.sampled: int = 0

    def write(self, tt: T) -> None:
        self.sampled += 1
        self.sample(tt)

    def sample(self, tt: T) -> None:
        raise NotImplementedError("Decorate sample() with cover points in a subclass")

    def coverage_by_name(self) -> dict[str, float]:
        """Percent covered for each cover item under `prefix`."""
        return {
            name: float(item.cover_percentage)
            for name, item in coverage_db.items()
            if name.startswith(f"{self.prefix}.")
        }

    def report_phase(self) -> None:
        super().report_phase()
        self.logger.info("coverage over %d applied item(s):", self.sampled)
        for name, pct in sorted(self.coverage_by_name().items()):
            self.logger.info("  %-32s %6.2f%%", name, pct)
        path = os.getenv("COV_YAML")
        if path:
            coverage_db.export_to_yaml(path)
            self.logger.debug("coverage YAML written to %s", path)
