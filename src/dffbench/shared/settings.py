# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/settings.py

"""Typed bench settings looked up in the environment, then in plusargs.

A setting NAME is found, in order, in the environment variable NAME, in
DFFB_NAME, and in the plusarg +NAME=value. A bare +NAME means "1". The
first value that parses for the requested type wins; one that does not
parse is passed over, so a typo in the environment falls back to the
plusarg and finally to the caller's default.

Plusargs are read from PLUSARGS, COCOTB_PLUSARGS or DFFB_PLUSARGS, first
non-empty one wins, split on whitespace.

Example:
    >>> get_int_setting("CLOCK_PERIOD_PS", 1000)
    >>> get_bool_setting("COVERAGE_EN", True)
"""

from __future__ import annotations

import os
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")

ENV_PREFIX = "DFFB_"

_BOOL_WORDS = {
    **dict.fromkeys(("1", "true", "yes", "y", "on"), True),
    **dict.fromkeys(("0", "false", "no", "n", "off"), False),
}


def parse_bool(s: str) -> bool | None:
    return _BOOL_WORDS.get(s.strip().lower())


def parse_int(s: str) -> int | None:
    """Decimal, or 0x/0o/0b prefixed."""
    try:
        return int(s.strip(), 0)
    except ValueError:
        return None


def parse_float(s: str) -> float | None:
    try:
        return float(s.strip())
    except ValueError:
        return None


def iter_plusargs() -> Iterable[str]:
    for var in ("PLUSARGS", "COCOTB_PLUSARGS", f"{ENV_PREFIX}PLUSARGS"):
        text = os.environ.get(var, "")
        if text:
            return text.split()
    return []


def get_plusarg(name: str) -> str | None:
    """Value of +NAME=value, "1" for a bare +NAME, else None."""
    for tok in iter_plusargs():
        key, eq, value = tok.partition("=")
        if key == f"+{name}":
            return value if eq else "1"
    return None


def _candidates(name: str) -> Iterator[str]:
    for var in (name, f"{ENV_PREFIX}{name}"):
        if var in os.environ:
            yield os.environ[var]
    arg = get_plusarg(name)
    if arg is not None:
        yield arg


def get_raw_setting(name: str) -> str | None:
    return next(_candidates(name), None)


def _first_parsed(name: str, default: T, parse: Callable[[str], T | None]) -> T:
    for raw in _candidates(name):
        value = parse(raw)
        if value is not None:
            return value
    return default


def get_bool_setting(name: str, default: bool) -> bool:
    return _first_parsed(name, default, parse_bool)


def get_str_setting(name: str, default: str) -> str:
    return _first_parsed(name, default, str)


def get_int_setting(name: str, default: int) -> int:
    return _first_parsed(name, default, parse_int)


def get_float_setting(name: str, default: float) -> float:
    return _first_parsed(name, default, parse_float)
