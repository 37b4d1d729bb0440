# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/__init__.py

"""Shared bench infrastructure built on cocotb and pyuvm.

Base Classes:
- BaseTest: Test scaffold (config, factory overrides, clock, env)
- BaseEnv: Orchestrator owning mailboxes and the device handle
- BaseAgent: Common base of the four bounded agents
- BaseGenerator: Stimulus producer
- BaseDriver: Applies stimulus on the drive edge
- BaseMonitor: Samples the device on delayed rising edges
- BaseScoreboard: Checks observations, records verdicts
- BaseRefModel: Expectation model used by the scoreboard
- BaseCoverage: Functional coverage subscriber fed by the driver
- BaseMailbox: Unbounded FIFO between two agents
- BaseItem: Transaction item base class

Clock and Reset Infrastructure:
- BaseClockDriver: Clock source
- BaseClockMixin: Mixin for clock-aware components
- BaseResetDriver: Reset sequencing on drive edges

Utilities:
- utils_dv: ConfigDB publish/require, the BenchModel accessor, clock net
  lookup, sim time and log level
- utils_cli: setting getters and factory overrides from plusargs
"""

from __future__ import annotations

from dffbench import __version__

from . import utils_cli, utils_dv
from .base_agent import BaseAgent
from .base_clock_driver import BaseClockDriver
from .base_clock_mixin import BaseClockMixin
from .base_coverage import BaseCoverage
from .base_driver import BaseDriver
from .base_env import BaseEnv
from .base_generator import BaseGenerator
from .base_item import BaseItem, WriteOnceError
from .base_mailbox import BaseMailbox
from .base_monitor import BaseMonitor
from .base_ref_model import BaseRefModel
from .base_reset_driver import BaseResetDriver
from .base_scoreboard import BaseScoreboard, Verdict
from .base_test import BaseTest

__all__ = (
    "BaseAgent",
    "BaseClockDriver",
    "BaseClockMixin",
    "BaseCoverage",
    "BaseDriver",
    "BaseEnv",
    "BaseGenerator",
    "BaseItem",
    "BaseMailbox",
    "BaseMonitor",
    "BaseRefModel",
    "BaseResetDriver",
    "BaseScoreboard",
    "BaseTest",
    "Verdict",
    "WriteOnceError",
    "utils_cli",
    "utils_dv",
    "__version__",
)
