# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/utils.py

"""Helpers shared by the dv and dv-regress command-line tools."""

from __future__ import annotations

import random
import shutil
from pathlib import Path
from typing import Iterable

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"

SUPPORTED_SIMS: tuple[str, ...] = ("verilator", "icarus")

_SIM_EXECUTABLES: dict[str, str] = {"verilator": "verilator", "icarus": "iverilog"}


def available_sims(candidates: Iterable[str] = SUPPORTED_SIMS) -> list[str]:
    """Simulators from `candidates` whose executable is on PATH."""
    return [s for s in candidates if shutil.which(_SIM_EXECUTABLES.get(s, s))]


def read_srclist(srclist: Path, root: Path) -> list[Path]:
    """HDL source files named in a srclist, resolved against `root`.

    One path per line; blank lines and // comments are skipped.
    """
    sources = []
    for raw in srclist.read_text(encoding="utf-8").splitlines():
        line = raw.split("//", 1)[0].strip()
        if line:
            sources.append((root / line).resolve())
    return sources


def normalize_seed(rng: random.Random, s: str) -> int:
    """32-bit seed from decimal, 0x hex, or "random" (drawn from `rng`)."""
    if s.lower() in ("rand", "random", "auto"):
        return rng.getrandbits(32)
    try:
        return int(s, 0) & 0xFFFF_FFFF
    except ValueError:
        raise SystemExit(f"[dv] bad seed {s!r}: use decimal, 0x..., or 'random'") from None


def _paint(colour: str, s: str) -> str:
    return f"{colour}{s}{RESET}"


def green(s: str) -> str:
    return _paint(GREEN, s)


def red(s: str) -> str:
    return _paint(RED, s)


def yellow(s: str) -> str:
    return _paint(YELLOW, s)
