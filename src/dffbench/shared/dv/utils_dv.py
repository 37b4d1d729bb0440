# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/utils_dv.py

"""Glue between bench components, pyuvm's ConfigDB and the simulator.

A test publishes two things into ConfigDB: the DUT handle and one validated
BenchModel. Components fetch both in end_of_elaboration_phase through the
helpers here, so no component parses individual config keys.

Error Handling:
    ConfigKeyError: a required ConfigDB entry is missing or has the wrong type
    RuntimeError: the clock net is not on the DUT
"""

from __future__ import annotations

import logging
import os
from typing import Any

import pyuvm
from cocotb.handle import SimHandleBase
from cocotb.utils import get_sim_time
from pyuvm import ConfigDB

from ..bench_config import BenchModel

DUT_KEY = "dut"
CFG_KEY = "bench_cfg"

_MISSING = object()


class ConfigKeyError(KeyError):
    """A required ConfigDB entry is missing or has the wrong type."""


def publish(ctx: pyuvm.uvm_component | None, key: str, value: Any) -> None:
    """Make value visible to ctx and everything below it."""
    ConfigDB().set(ctx, "*", key, value)


def require(comp: pyuvm.uvm_component, key: str) -> Any:
    value = ConfigDB().get(comp, "", key, _MISSING)
    if value is _MISSING:
        raise ConfigKeyError(f"{comp.get_full_name()}: nothing published under {key!r}")
    return value


def bench_cfg(comp: pyuvm.uvm_component) -> BenchModel:
    """The run configuration published by the test."""
    cfg = require(comp, CFG_KEY)
    if not isinstance(cfg, BenchModel):
        raise ConfigKeyError(
            f"{comp.get_full_name()}: {CFG_KEY!r} is a {type(cfg).__name__}, "
            "expected a BenchModel"
        )
    return cfg


def clock_signal(dut: Any, name: str) -> SimHandleBase:
    """Return the clock net dut.<name>."""
    sig = getattr(dut, name, None)
    if sig is None or not hasattr(sig, "value"):
        raise RuntimeError(f"no clock net {name!r} on {getattr(dut, '_name', dut)!r}")
    return sig


def sim_time_ps() -> int:
    return int(get_sim_time(unit="ps"))


def log_level() -> int:
    """Level named by COCOTB_LOG_LEVEL (INFO when unset or unknown)."""
    level = logging.getLevelName((os.getenv("COCOTB_LOG_LEVEL") or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def apply_log_level(target: pyuvm.uvm_component | logging.Logger) -> None:
    """Set a component's or a plain logger's level from COCOTB_LOG_LEVEL."""
    if isinstance(target, logging.Logger):
        target.setLevel(log_level())
        return
    target.set_logging_level(log_level())
