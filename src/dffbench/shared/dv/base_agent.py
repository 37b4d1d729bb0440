# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_agent.py

"""Common base for the bounded bench agents."""

from __future__ import annotations

from typing import Any

import pyuvm

from ..bench_config import BenchModel
from . import utils_dv


class BaseAgent(pyuvm.uvm_component):
    """A bench agent: one bounded main() procedure run by the environment.

    Agents (generator, driver, monitor, scoreboard) each handle exactly
    `count` transactions and then return. They are not started by pyuvm's
    run_phase; the environment starts their main() coroutines together and
    joins on all of them. A count disagreement between agents would leave one
    of them suspended forever on an empty mailbox, so the environment checks
    the counts before it starts anything.

    Attributes:
        cfg: The published BenchModel (set in end_of_elaboration_phase)
        count: Transactions handled per run, cfg.count unless changed later
        handled: Transactions handled so far
        model: Device handle injected by the environment (driver/monitor only)
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.apply_log_level(self)
        self.cfg: BenchModel
        self.count: int = 1
        self.handled: int = 0
        self.model: Any = None

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        self.cfg = utils_dv.bench_cfg(self)
        self.count = self.cfg.count

    def _resolve_count(self, count: int | None) -> int:
        n = self.count if count is None else count
        if n < 1:
            raise ValueError(f"{self.get_name()}: count must be >= 1, got {n}")
        return n

    async def main(self, count: int | None = None) -> None:
        """Handle `count` transactions (default: the configured count), then return."""
        raise NotImplementedError("Implement main here")
