# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_item.py

"""Base transaction item with declared fields and write-once storage."""

from __future__ import annotations

import json
from typing import Any, ClassVar, Iterable, Self

import pyuvm


class WriteOnceError(AttributeError):
    """Raised when a write-once item field is assigned a second time."""


class BaseItem(pyuvm.uvm_sequence_item):
    """Transaction item whose fields are declared once and written once.

    Subclasses list their stimulus fields in IN_FIELDS and their observed
    fields in OUT_FIELDS, and store each through _set_once() into a backing
    slot named _<field>. An item is created by one agent, handed off through
    one mailbox and owned by the receiver afterwards, so a second write to
    any field is always a bench bug and raises WriteOnceError.

    Example:
        >>> class EchoItem(BaseItem):
        ...     IN_FIELDS = ("data",)
        ...     OUT_FIELDS = ("echo",)
        ...
        ...     @property
        ...     def data(self):
        ...         return getattr(self, "_data", None)
        ...
        ...     @data.setter
        ...     def data(self, value):
        ...         self._set_once("data", value)
    """

    IN_FIELDS: ClassVar[tuple[str, ...]] = ()
    OUT_FIELDS: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def in_fields(cls) -> tuple[str, ...]:
        return cls.IN_FIELDS

    @classmethod
    def out_fields(cls) -> tuple[str, ...]:
        return cls.OUT_FIELDS

    @classmethod
    def fields(cls) -> tuple[str, ...]:
        return cls.IN_FIELDS + tuple(f for f in cls.OUT_FIELDS if f not in cls.IN_FIELDS)

    def _set_once(self, field: str, value: Any) -> None:
        if self.is_set(field):
            raise WriteOnceError(
                f"{type(self).__name__}.{field} is write-once "
                f"(has {getattr(self, field)!r}, refused {value!r})"
            )
        setattr(self, f"_{field}", value)

    def is_set(self, field: str) -> bool:
        """True once the field has been written."""
        return getattr(self, f"_{field}", None) is not None

    def unset_fields(self, fields: Iterable[str] | None = None) -> list[str]:
        """Names among `fields` (default: all) that were never written."""
        names = self.fields() if fields is None else fields
        return [f for f in names if not self.is_set(f)]

    def to_dict(self) -> dict[str, object]:
        return {f: getattr(self, f) for f in self.fields()}

    def __str__(self) -> str:
        return f"{self.get_name()} {json.dumps(self.to_dict(), sort_keys=True)}"

    def compare_out(self, other: Self) -> bool:
        """True when both items are the same type and agree on every output."""
        if type(self) is not type(other):
            return False
        return all(getattr(self, f) == getattr(other, f) for f in self.OUT_FIELDS)
