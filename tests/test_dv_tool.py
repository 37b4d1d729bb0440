# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_dv_tool.py

from __future__ import annotations

import json
import shlex
from pathlib import Path

import pytest
import yaml

from dffbench.tools import dv


def test_defaults() -> None:
    args = dv.parse_args([])
    assert args.design == "dff"
    assert args.test == "test_dff"
    assert args.expect == "PASS"
    assert dv.derive_seeds(args) == [dv.DEFAULT_SEED]


def test_derive_seeds_explicit() -> None:
    args = dv.parse_args(["--seeds", "7", "0x10"])
    assert dv.derive_seeds(args) == [7, 16]


def test_derive_seeds_is_reproducible() -> None:
    args = dv.parse_args(["--nseeds=3", "--seed-base=5"])
    first = dv.derive_seeds(args)
    assert len(first) == 3
    assert dv.derive_seeds(args) == first
    other = dv.derive_seeds(dv.parse_args(["--nseeds=3", "--seed-base=6"]))
    assert other != first


def test_bench_plusargs() -> None:
    args = dv.parse_args(["--count=12", "--check-en=0", "--plusarg=+FIXED_D=1"])
    assert dv.bench_plusargs(args) == ["+COUNT=12", "+CHECK_EN=0", "+COVERAGE_EN=1", "+FIXED_D=1"]
    assert "+COUNT" not in " ".join(dv.bench_plusargs(dv.parse_args([])))


def test_seed_dir_and_env(tmp_path: Path) -> None:
    args = dv.parse_args([f"--outdir={tmp_path}", "--testcase=DffOrderTest", "--count=5"])
    test_dir = dv.seed_dir(args, 99)
    assert test_dir == (tmp_path / "tests" / "dff.test_dff.DffOrderTest.99").resolve()
    env = dv.seed_env(args, test_dir, 99)
    assert env["COCOTB_RANDOM_SEED"] == "99"
    assert env["SB_VERDICTS_YAML"] == str(test_dir / dv.VERDICTS_FILE)
    assert env["COV_YAML"] == str(test_dir / dv.COVERAGE_FILE)
    assert "+COUNT=5" in env["COCOTB_PLUSARGS"].split()


def test_replay_cmd_reruns_one_seed() -> None:
    args = dv.parse_args(
        ["--nseeds=4", "--testcase=DffBaseTest", "--plusarg=+RESET_HOLD", "--expect=FAIL"]
    )
    replay = dv.parse_args(shlex.split(dv.replay_cmd(args, 1234))[1:])
    assert dv.derive_seeds(replay) == [1234]
    assert replay.testcase == "DffBaseTest"
    assert replay.plusargs == ["+RESET_HOLD"]
    assert replay.expect == "FAIL"
    assert dv.bench_plusargs(replay) == dv.bench_plusargs(args)


def test_validate_args() -> None:
    with pytest.raises(SystemExit):
        dv.validate_args(dv.parse_args(["--design=nosuch"]))
    with pytest.raises(SystemExit):
        dv.validate_args(dv.parse_args(["--count=0"]))
    with pytest.raises(SystemExit):
        dv.validate_args(dv.parse_args(["--nseeds=-1"]))
    with pytest.raises(SystemExit):
        dv.validate_args(dv.parse_args(["--plusarg=COUNT=1"]))
    dv.validate_args(dv.parse_args(["--count=3", "--plusarg=+PRESET"]))


def test_verdict_counts(tmp_path: Path) -> None:
    path = tmp_path / dv.VERDICTS_FILE
    assert dv.verdict_counts(path) is None
    path.write_text(yaml.safe_dump([{"passed": True}, {"passed": False}, {"passed": True}]))
    assert dv.verdict_counts(path) == {"passed": 2, "failed": 1}


class _FakeRunner:
    def __init__(self, failures: int, exit_code: int | None = None) -> None:
        self.failures = failures
        self.exit_code = exit_code
        self.kwargs: dict = {}

    def test(self, **kwargs) -> Path:
        self.kwargs = kwargs
        if self.exit_code is not None:
            raise SystemExit(self.exit_code)
        xml = Path(kwargs["results_xml"])
        xml.write_text(
            f'<testsuites><testsuite tests="2" failures="{self.failures}" errors="0"/></testsuites>'
        )
        return xml


@pytest.mark.parametrize(
    ("failures", "exit_code", "expect", "status", "matched"),
    [
        (0, None, "PASS", "PASS", True),
        (1, None, "PASS", "FAIL", False),
        (1, None, "FAIL", "FAIL", True),
        (0, 3, "PASS", "FAIL", False),
    ],
)
def test_run_seed_writes_manifest(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    failures: int,
    exit_code: int | None,
    expect: str,
    status: str,
    matched: bool,
) -> None:
    runner = _FakeRunner(failures, exit_code)
    monkeypatch.setattr(dv, "get_runner", lambda sim: runner)
    args = dv.parse_args([f"--outdir={tmp_path}", "--sim=icarus", f"--expect={expect}"])

    assert dv.run_seed(args, tmp_path / "build", 7) is matched

    test_dir = dv.seed_dir(args, 7)
    manifest = json.loads((test_dir / dv.MANIFEST_FILE).read_text())
    assert manifest["status"] == status
    assert manifest["expect"] == expect
    assert manifest["seed"] == 7
    assert manifest["replay_cmd"].endswith("--seeds 7")
    assert runner.kwargs["test_module"] == "dffbench.dff.dv.test_dff"
    assert runner.kwargs["seed"] == 7
    assert Path(runner.kwargs["results_xml"]).is_absolute()
