# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_model.py

"""Synchronous 1-bit register with reset/preset priority."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def check_bit(name: str, value: object) -> int:
    """Return value as 0/1 or raise ValueError."""
    if isinstance(value, bool):
        return int(value)
    if value in (0, 1) and isinstance(value, int):
        return value
    raise ValueError(f"{name} must be 0 or 1, got {value!r}")


class DffModel:
    """Device model of a rising-edge D flip-flop with synchronous reset and preset.

    The stored bit changes only in on_rising_edge(). At each edge:

        reset asserted            -> q = 0
        else preset asserted      -> q = 1
        else                      -> q = most recently applied d

    Reset and preset asserted together resolve to 0. apply(d) only records
    a pending input; it becomes visible in read() after the next edge.
    Reset and preset are level inputs sampled at each edge, not transaction
    fields.

    The model knows nothing about simulated time. A clocked adapter calls
    on_rising_edge() once per rising edge of the bench clock.

    Attributes:
        edges: Number of rising edges processed

    Example:
        >>> m = DffModel()
        >>> m.apply(1)
        >>> m.read()
        0
        >>> m.on_rising_edge()
        >>> m.read()
        1
        >>> m.assert_reset()
        >>> m.on_rising_edge()
        >>> m.read()
        0
    """

    def __init__(self, q: int = 0) -> None:
        self._q: int = check_bit("q", q)
        self._d: int = 0
        self._reset: bool = False
        self._preset: bool = False
        self.edges: int = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(d={self._d}, q={self._q}, "
            f"reset={self._reset}, preset={self._preset}, edges={self.edges})"
        )

    @property
    def d(self) -> int:
        """The pending input, latched at the next edge."""
        return self._d

    @property
    def q(self) -> int:
        """The stored bit as of the last processed edge."""
        return self._q

    @property
    def reset(self) -> bool:
        """Reset level."""
        return self._reset

    @property
    def preset(self) -> bool:
        """Preset level."""
        return self._preset

    def apply(self, d: int) -> None:
        """Record d as the pending input; no immediate effect on q."""
        self._d = check_bit("d", d)

    def read(self) -> int:
        """Return q as of the last processed edge."""
        return self._q

    def assert_reset(self) -> None:
        self._reset = True

    def deassert_reset(self) -> None:
        self._reset = False

    def assert_preset(self) -> None:
        self._preset = True

    def deassert_preset(self) -> None:
        self._preset = False

    def next_q(self) -> int:
        """Value q will take at the next edge, given the current levels."""
        if self._reset:
            return 0
        if self._preset:
            return 1
        return self._d

    def on_rising_edge(self) -> None:
        """Advance one clock edge."""
        self._q = self.next_q()
        self.edges += 1
        logger.debug("edge %d: %r", self.edges, self)
