# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/utils_cli.py

"""Plusarg handling that needs pyuvm, plus the typed setting getters.

Factory overrides follow the uvm_cmdline_processor spelling:

    +uvm_set_type_override=<requested>,<override>[,<replace>]
    +uvm_set_inst_override=<requested>,<override>,<path>
"""

from __future__ import annotations

import logging

import pyuvm

from ..settings import (
    get_bool_setting,
    get_float_setting,
    get_int_setting,
    get_str_setting,
    iter_plusargs,
)

__all__ = (
    "apply_factory_overrides_from_plusargs",
    "get_bool_setting",
    "get_float_setting",
    "get_int_setting",
    "get_str_setting",
    "iter_plusargs",
)

_TYPE = "+uvm_set_type_override="
_INST = "+uvm_set_inst_override="


def _apply_one(factory: pyuvm.uvm_factory, tok: str) -> bool:
    if tok.startswith(_TYPE):
        parts = [p.strip() for p in tok[len(_TYPE) :].split(",")]
        if len(parts) == 2:
            parts.append("1")
        if len(parts) != 3:
            raise ValueError("expected requested,override[,replace]")
        factory.set_type_override_by_name(
            parts[0], parts[1], replace=parts[2] != "0"
        )
        return True
    if tok.startswith(_INST):
        parts = [p.strip() for p in tok[len(_INST) :].split(",")]
        if len(parts) != 3:
            raise ValueError("expected requested,override,path")
        factory.set_inst_override_by_name(*parts)
        return True
    return False


def apply_factory_overrides_from_plusargs(logger: logging.Logger | None = None) -> int:
    """Apply every factory override plusarg and return how many took effect.

    A malformed or rejected override is logged as a warning and skipped.
    """
    log = logger or logging.getLogger("dffbench.factory")
    factory = pyuvm.uvm_factory()
    applied = 0
    for tok in iter_plusargs():
        try:
            if _apply_one(factory, tok):
                applied += 1
                log.debug("factory override: %s", tok)
        except (KeyError, ValueError, TypeError) as e:
            log.warning("override %s ignored: %s", tok, e)
    return applied
