# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_dv_regress.py

from __future__ import annotations

import argparse
import re
import subprocess
from pathlib import Path

import pytest

from dffbench.tools import dv_regress


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "dv_regress.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_as_str_list() -> None:
    assert dv_regress._as_str_list(None) == []
    assert dv_regress._as_str_list("--a=1 '--b=x y'") == ["--a=1", "--b=x y"]
    assert dv_regress._as_str_list(["--c", 3]) == ["--c", "3"]


def test_load_config(tmp_path: Path) -> None:
    p = _write(
        tmp_path,
        """
defaults:
  args: "--design=dff --test=test_dff"
jobs:
  - name: a
    args: ["--count=2"]
  - args: "--count=3"
    expect: fail
""",
    )
    defaults, jobs = dv_regress._load_config(p)
    assert defaults == ["--design=dff", "--test=test_dff"]
    assert [j.name for j in jobs] == ["a", "job1"]
    assert jobs[0].args == ["--count=2"]
    assert jobs[1].args == ["--count=3", "--expect=FAIL"]


@pytest.mark.parametrize(
    "text",
    [
        "- just a list",
        "jobs: []",
        "jobs: [1]",
        "jobs:\n  - name: a\n  - name: a\n",
        "jobs:\n  - name: a\n    expect: MAYBE\n",
    ],
)
def test_load_config_rejects(tmp_path: Path, text: str) -> None:
    with pytest.raises(ValueError):
        dv_regress._load_config(_write(tmp_path, text))


def test_select_jobs() -> None:
    jobs = [dv_regress.Job("a", []), dv_regress.Job("b", []), dv_regress.Job("c", [])]
    assert dv_regress._select_jobs(jobs, None) == jobs
    assert [j.name for j in dv_regress._select_jobs(jobs, ["c", "a"])] == ["a", "c"]
    with pytest.raises(ValueError, match="nope"):
        dv_regress._select_jobs(jobs, ["nope"])


def test_shipped_regression_file_parses() -> None:
    path = Path(dv_regress.__file__).resolve().parents[1] / "dff" / "dv" / "dv_regress.yaml"
    defaults, jobs = dv_regress._load_config(path)
    assert "--design=dff" in defaults
    assert len({j.name for j in jobs}) == len(jobs)


def test_run_regress_reports_failures(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    p = _write(tmp_path, "jobs:\n  - name: ok\n  - name: bad\n    args: --count=2\n")
    calls: list[list[str]] = []

    def fake_run(cmd: list[str], check: bool) -> subprocess.CompletedProcess:
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 1 if "--count=2" in cmd else 0)

    monkeypatch.setattr(dv_regress.subprocess, "run", fake_run)
    args = argparse.Namespace(file=p, outdir="out_x", only=None)
    assert dv_regress.run_regress(args) == 1
    assert len(calls) == 2
    assert all("--outdir=out_x" in c for c in calls)
    out = capsys.readouterr().out
    assert "SUMMARY" in out and "bad" in out


def test_run_regress_missing_file(tmp_path: Path) -> None:
    args = argparse.Namespace(file=tmp_path / "none.yaml", outdir="o", only=None)
    assert dv_regress.run_regress(args) == 1


def test_shipped_regression_covers_every_dff_test() -> None:
    dv_dir = Path(dv_regress.__file__).resolve().parents[1] / "dff" / "dv"
    source = (dv_dir / "test_dff.py").read_text(encoding="utf-8")
    declared = set(re.findall(r"^class (Dff\w+Test)\(", source, re.M))
    declared |= set(re.findall(r"^async def (test_\w+)\(", source, re.M))
    _, jobs = dv_regress._load_config(dv_dir / "dv_regress.yaml")
    run = {
        a.split("=", 1)[1] for j in jobs for a in j.args if a.startswith("--testcase=")
    }
    assert "test_mailbox_fifo_order" in run
    assert declared <= run, sorted(declared - run)
