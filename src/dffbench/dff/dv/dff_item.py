# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_item.py

"""Transaction item for the 1-bit register bench."""

from __future__ import annotations

from dffbench.shared.dv import BaseItem

from .dff_model import check_bit


class DffItem(BaseItem):
    """One d/q pair; both bits are write-once.

    Stimulus items get d from the generator and q from the driver's
    read-back right after it applies d. Observation items get both from the
    monitor.
    """

    IN_FIELDS = ("d",)
    OUT_FIELDS = ("q",)

    def __init__(self, name: str = "dff_item") -> None:
        super().__init__(name)
        self._d: int | None = None
        self._q: int | None = None

    @property
    def d(self) -> int | None:
        """Input bit."""
        return self._d

    @d.setter
    def d(self, value: int) -> None:
        self._set_once("d", check_bit("d", value))

    @property
    def q(self) -> int | None:
        """Output bit."""
        return self._q

    @q.setter
    def q(self, value: int) -> None:
        self._set_once("q", check_bit("q", value))
