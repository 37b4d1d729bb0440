# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/conftest.py

"""Shared fixtures for the pure-Python unit tests."""

from __future__ import annotations

import pytest

from dffbench.dff.dv.dff_config import DffBenchModel
from dffbench.shared.settings import ENV_PREFIX

PLUSARG_VARS = ("PLUSARGS", "COCOTB_PLUSARGS", f"{ENV_PREFIX}PLUSARGS")


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every environment variable a bench setting could be read from."""
    for var in PLUSARG_VARS:
        monkeypatch.delenv(var, raising=False)
    for name in DffBenchModel.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)
        monkeypatch.delenv(f"{ENV_PREFIX}{name.upper()}", raising=False)
    for name in ("RANDOM_N", "FOO"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)
    return monkeypatch
