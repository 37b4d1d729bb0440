# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_generator.py

"""Base stimulus generator feeding the stimulus mailbox."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar, cast

import pyuvm

from .base_agent import BaseAgent
from .base_item import BaseItem

T = TypeVar("T", bound=BaseItem)


class BaseGenerator(BaseAgent, Generic[T]):
    """Produce `count` stimulus items into the stimulus mailbox.

    The item class is whatever the factory resolves BaseItem to, looked up
    once per run. Each item is named stim<index>, gets its inputs from
    set_item_inputs(), and is put on put_port. The mailbox is unbounded, so
    the generator queues everything in zero simulation time and returns.

    Subclasses must implement:
        set_item_inputs(item, index): Randomize or direct the input fields
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.put_port: pyuvm.uvm_blocking_put_port

    def build_phase(self) -> None:
        super().build_phase()
        self.put_port = pyuvm.uvm_blocking_put_port("put_port", self)

    def item_class(self) -> Callable[[str], T]:
        """The concrete item type after factory overrides."""
        sample = pyuvm.uvm_factory().create_object_by_type(BaseItem, name="item_type")
        return cast(Callable[[str], T], type(sample))

    async def main(self, count: int | None = None) -> None:
        n = self._resolve_count(count)
        make = self.item_class()
        self.logger.debug("main begin: count=%d item=%s", n, make.__name__)
        for i in range(n):
            item = make(f"stim{i}")
            self.set_item_inputs(item, i)
            await self.put_port.put(item)
            self.handled += 1
            self.logger.debug("gen[%d] %s", i, item)
        self.logger.debug("main end")

    def set_item_inputs(self, item: T, index: int) -> None:
        raise NotImplementedError("Implement set_item_inputs here")
