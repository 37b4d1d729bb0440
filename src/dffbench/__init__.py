# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/__init__.py

"""dffbench: a clock-synchronized verification bench for a 1-bit storage element.

The bench drives randomized stimulus into a synchronous 1-bit register with
reset/preset priority, observes it on clock edges, and checks the observed
output against an independent expectation. Four agents (generator, driver,
monitor, scoreboard) cooperate through mailboxes under one clock timeline and
are composed by an environment that runs them concurrently and joins on them.

Main Components:

shared:
    Reusable bench infrastructure built on cocotb and pyuvm: clock and reset
    drivers, mailboxes, generic agents, scoreboard, coverage, test scaffold,
    plus the pure-Python settings and bench configuration layers.

dff:
    The 1-bit register device model, its transaction item, the concrete
    agents and environment, and the pyuvm tests. The rtl/ directory holds the
    HDL toplevel that hosts the simulated clock net.

tools:
    Command-line runners (dv, dv-regress) for building and running benches.

utils:
    Common utilities used by the tools.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

try:
    __version__ = pkg_version("dffbench")
except PackageNotFoundError:
    __version__ = "0+local"
