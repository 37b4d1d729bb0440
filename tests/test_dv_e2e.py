# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_dv_e2e.py

"""End-to-end runs through a real simulator (skipped when none is installed)."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest
import yaml

from dffbench import utils

SIMS = utils.available_sims()

pytestmark = pytest.mark.skipif(not SIMS, reason="no HDL simulator on PATH")


def _run_dv(outdir: Path, *extra: str) -> tuple[int, list[dict]]:
    cmd = [
        sys.executable,
        "-m",
        "dffbench.tools.dv",
        f"--sim={SIMS[0]}",
        "--design=dff",
        "--test=test_dff",
        f"--outdir={outdir}",
        *extra,
    ]
    rc = subprocess.run(cmd, check=False, timeout=900).returncode
    found = sorted(outdir.glob("tests/*/verdicts.yaml"))
    verdicts = yaml.safe_load(found[0].read_text()) if found else []
    return rc, verdicts


def test_same_seed_same_verdicts(tmp_path: Path) -> None:
    args = ("--testcase=DffBaseTest", "--count=10", "--seeds", "42")
    rc_a, va = _run_dv(tmp_path / "a", *args)
    rc_b, vb = _run_dv(tmp_path / "b", *args)
    assert rc_a == 0 and rc_b == 0
    assert len(va) == 10
    assert all(v["passed"] for v in va)
    assert va == vb


def test_reset_held_is_expected_to_fail(tmp_path: Path) -> None:
    rc, verdicts = _run_dv(
        tmp_path,
        "--testcase=DffBaseTest",
        "--count=3",
        "--plusarg=+RESET_HOLD",
        "--plusarg=+FIXED_D=1",
        "--expect=FAIL",
    )
    assert rc == 0
    assert [v["observed"]["q"] for v in verdicts] == [0, 0, 0]
