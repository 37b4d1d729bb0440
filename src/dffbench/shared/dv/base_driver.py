# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_driver.py

"""Base driver pulling stimulus from the stimulus mailbox."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import pyuvm

from .base_agent import BaseAgent
from .base_clock_mixin import BaseClockMixin
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseDriver(BaseClockMixin, BaseAgent, Generic[T]):
    """Apply `count` stimulus items to the device, one per drive edge.

    Per item: get from the stimulus mailbox (suspending while it is empty),
    refuse it unless every input field is set, drive_item(), then publish it
    on `ap` for coverage. The driver is the only writer of the device handle.

    Subclasses must implement:
        drive_item(model, tr): Drive one transaction, starting from
                               clock_drive_edge()

    Example:
        >>> class MyDriver(BaseDriver[MyItem]):
        ...     async def drive_item(self, model, tr):
        ...         await self.clock_drive_edge()
        ...         model.apply(tr.data)
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.get_port: pyuvm.uvm_blocking_get_port
        self.ap: pyuvm.uvm_analysis_port

    def build_phase(self) -> None:
        super().build_phase()
        self.get_port = pyuvm.uvm_blocking_get_port("get_port", self)
        self.ap = pyuvm.uvm_analysis_port("ap", self)

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        self.clock_setup()

    async def main(self, count: int | None = None) -> None:
        n = self._resolve_count(count)
        self.logger.debug("main begin: count=%d", n)
        for _ in range(n):
            tr: T = await self.get_port.get()
            missing = tr.unset_fields(tr.in_fields())
            if missing:
                raise ValueError(f"{tr.get_name()}: input(s) {missing} never set")
            await self.drive_item(self.model, tr)
            self.handled += 1
            self.ap.write(tr)
        self.logger.debug("main end")

    async def drive_item(self, model: Any, tr: T) -> None:
        """Drive the device for one transaction."""
        raise NotImplementedError("Implement device driving here")
