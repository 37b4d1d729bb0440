# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/tools/dv_regress.py

"""dffbench: run a list of `dv` jobs from a YAML file.

    defaults:
      args: ["--design=dff", "--test=test_dff"]
    jobs:
      - name: smoke
        args: ["--testcase=DffBaseTest", "--nseeds=2"]
      - name: must_fail
        args: "--testcase=DffBaseTest --plusarg=+RESET_HOLD=1"
        expect: FAIL

`args` may be a list or one shell-style string. A job's args follow the
defaults, so the job wins on any repeated option. `expect` becomes
`--expect=`. Each job is a separate `dv` process; the report at the end
lists a rerun command per job, failures first.

Usage:
    dv-regress --file=src/dffbench/dff/dv/dv_regress.yaml [--outdir=out_dv]
    dv-regress --file=... --only smoke order
"""

from __future__ import annotations

import argparse
import shlex
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

import yaml

from dffbench import utils


@dataclass(frozen=True)
class Job:
    name: str
    args: list[str]


@dataclass(frozen=True)
class JobResult:
    job: Job
    cmd: str
    rc: int
    duration_s: float

    @property
    def passed(self) -> bool:
        return self.rc == 0


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="dffbench YAML regression")
    ap.add_argument("--file", type=Path, required=True, help="regression YAML")
    ap.add_argument("--outdir", default="out_dv", help="output directory")
    ap.add_argument("--only", nargs="+", metavar="NAME", help="run only these jobs")
    return ap.parse_args(argv)


def _as_str_list(x: Any) -> list[str]:
    if x is None:
        return []
    if isinstance(x, str):
        return shlex.split(x)
    return [str(t) for t in x]


def _job(idx: int, raw: Any) -> Job:
    if not isinstance(raw, dict):
        raise ValueError(f"jobs[{idx}] must be a mapping")
    args = _as_str_list(raw.get("args"))
    if raw.get("expect") is not None:
        expect = str(raw["expect"]).strip().upper()
        if expect not in ("PASS", "FAIL"):
            raise ValueError(f"jobs[{idx}].expect must be PASS or FAIL")
        args.append(f"--expect={expect}")
    return Job(str(raw.get("name") or f"job{idx}"), args)


def _load_config(path: Path) -> tuple[list[str], list[Job]]:
    """Return (default args, jobs); ValueError on a malformed file."""
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: top level must be a mapping")
    defaults = data.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ValueError("'defaults' must be a mapping")
    raw_jobs = data.get("jobs")
    if not isinstance(raw_jobs, list) or not raw_jobs:
        raise ValueError("'jobs' must be a non-empty list")
    jobs = [_job(i, j) for i, j in enumerate(raw_jobs)]
    names = [j.name for j in jobs]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise ValueError(f"duplicate job name(s): {', '.join(dupes)}")
    return _as_str_list(defaults.get("args")), jobs


def _select_jobs(jobs: list[Job], only: Sequence[str] | None) -> list[Job]:
    """Keep file order; naming a job that does not exist is an error."""
    if not only:
        return jobs
    unknown = sorted(set(only) - {j.name for j in jobs})
    if unknown:
        raise ValueError(f"unknown job name(s): {', '.join(unknown)}")
    return [j for j in jobs if j.name in only]


def run_regress(args: argparse.Namespace) -> int:
    """Run the selected jobs one after another; 0 only if all of them passed."""
    path = args.file.resolve()
    if not path.is_file():
        print(f"[dv_regress] no such file: {path}", file=sys.stderr)
        return 1
    try:
        default_args, jobs = _load_config(path)
        jobs = _select_jobs(jobs, args.only)
    except ValueError as exc:
        print(f"[dv_regress] {path}: {exc}", file=sys.stderr)
        return 1

    results: list[JobResult] = []
    for job in jobs:
        dv_args = [*default_args, *job.args, f"--outdir={args.outdir}"]
        shown = shlex.join(["dv", *dv_args])
        print(f"\n[dv_regress] {job.name}: {shown}")
        t0 = time.monotonic()
        rc = subprocess.run(
            [sys.executable, "-m", "dffbench.tools.dv", *dv_args], check=False
        ).returncode
        results.append(JobResult(job, shown, rc, time.monotonic() - t0))

    print(f"\n[dv_regress] {len(results)} job(s) from {path}\n")
    for r in sorted(results, key=lambda r: r.passed):
        tag = utils.green("PASS") if r.passed else utils.red("FAIL")
        print(f"{tag}: [{r.job.name} {r.duration_s:.1f}s] {r.cmd}")
    print(f"\n[dv_regress] manifests under {utils.yellow(str(Path(args.outdir) / 'tests'))}")

    failed = sum(not r.passed for r in results)
    summary = utils.red(f"FAIL ({failed})") if failed else utils.green("PASS")
    print(f"[dv_regress] SUMMARY: {summary}")
    return 1 if failed else 0


def main(argv: Sequence[str] | None = None) -> int:
    return run_regress(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
