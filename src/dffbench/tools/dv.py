# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/tools/dv.py

"""dffbench: build a design once, then run its test module once per seed.

The HDL toplevel named by --design is compiled from its rtl/srclist.f with
the cocotb runner. The pyuvm test module dffbench.<design>.dv.<test> is then
run in the simulator for every seed. Bench knobs (--count, --check-en,
--coverage-en, --plusarg) reach BenchModel.from_settings() as plusargs.

Each seed gets <outdir>/tests/<design>.<test>[.<testcase>].<seed>/ with
test.log, results.xml, verdicts.yaml, coverage.yaml and manifest.json. The
manifest records the status, the expectation, the verdict counts and a
command that replays exactly that seed.

    dv --design=dff --testcase=DffBaseTest --count=500
    dv --design=dff --seeds 42 7
    dv --design=dff --nseeds=10 --plusarg=+FIXED_D=1
    dv --design=dff --plusarg=+RESET_HOLD --expect=FAIL

The exit status is 0 only when every seed ended as expected.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import random
import shlex
import time
from pathlib import Path
from typing import Any, Sequence

import yaml
from cocotb_tools.check_results import get_results
from cocotb_tools.runner import get_runner

from dffbench import utils

DESIGNS_ROOT = Path(__file__).resolve().parents[1]
VERDICTS_FILE = "verdicts.yaml"
COVERAGE_FILE = "coverage.yaml"
MANIFEST_FILE = "manifest.json"
DEFAULT_SEED = 42

_VERILATOR_BUILD_ARGS = ("--timing", "--autoflush")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Build and run a dffbench cocotb/pyuvm bench",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("--design", default="dff", help="design under src/dffbench")
    ap.add_argument("--test", default=None, help="test module (default: test_<design>)")
    ap.add_argument("--testcase", default=None, help="run only this test")
    ap.add_argument(
        "--sim", choices=utils.SUPPORTED_SIMS, default=os.getenv("SIM", "verilator")
    )
    ap.add_argument("--outdir", default="out_dv", help="output directory")
    ap.add_argument(
        "--verbosity",
        choices=["critical", "error", "warning", "info", "debug"],
        default=os.getenv("VERBOSITY", "info"),
    )
    seeds = ap.add_argument_group("seeds")
    seeds.add_argument("--seeds", nargs="+", metavar="SEED", help="decimal, 0x.. or random")
    seeds.add_argument("--nseeds", type=int, default=0, help="draw N seeds")
    seeds.add_argument("--seed-base", type=int, default=1999, help="seeds --nseeds")
    knobs = ap.add_argument_group("bench knobs")
    knobs.add_argument("--count", type=int, default=None, help="+COUNT")
    knobs.add_argument("--check-en", choices=["0", "1"], default="1", help="+CHECK_EN")
    knobs.add_argument("--coverage-en", choices=["0", "1"], default="1", help="+COVERAGE_EN")
    knobs.add_argument(
        "--plusarg",
        dest="plusargs",
        action="append",
        default=[],
        metavar="+NAME[=VALUE]",
        help="extra bench plusarg (repeatable)",
    )
    ap.add_argument("--expect", choices=["PASS", "FAIL"], default="PASS")
    args = ap.parse_args(argv)
    args.test = args.test or f"test_{args.design}"
    return args


def srclist_for(design: str) -> Path:
    return DESIGNS_ROOT / design / "rtl" / "srclist.f"


def validate_args(args: argparse.Namespace) -> None:
    """Exit with a message on arguments that cannot give a meaningful run."""
    if not srclist_for(args.design).is_file():
        raise SystemExit(f"[dv] unknown design {args.design!r}: no rtl/srclist.f")
    if args.count is not None and args.count < 1:
        raise SystemExit(f"[dv] --count must be >= 1, got {args.count}")
    if args.nseeds < 0:
        raise SystemExit(f"[dv] --nseeds must be >= 0, got {args.nseeds}")
    bad = [p for p in args.plusargs if not p.startswith("+")]
    if bad:
        raise SystemExit(f"[dv] plusargs must start with '+': {bad}")


def derive_seeds(args: argparse.Namespace) -> list[int]:
    """Explicit --seeds, else --nseeds drawn from --seed-base, else DEFAULT_SEED."""
    rng = random.Random(args.seed_base & 0xFFFF_FFFF)
    if args.seeds:
        return [utils.normalize_seed(rng, s) for s in args.seeds]
    if args.nseeds:
        return [rng.getrandbits(32) for _ in range(args.nseeds)]
    return [DEFAULT_SEED]


def bench_plusargs(args: argparse.Namespace) -> list[str]:
    out = [] if args.count is None else [f"+COUNT={args.count}"]
    out += [f"+CHECK_EN={args.check_en}", f"+COVERAGE_EN={args.coverage_en}"]
    return out + list(args.plusargs)


def seed_dir(args: argparse.Namespace, seed: int) -> Path:
    parts = [args.design, args.test, args.testcase, str(seed)]
    leaf = ".".join(p for p in parts if p)
    return (Path(args.outdir) / "tests" / leaf).resolve()


def replay_cmd(args: argparse.Namespace, seed: int) -> str:
    """Command line that reruns one seed with the same design, test and knobs."""
    argv = ["dv", f"--design={args.design}", f"--test={args.test}"]
    if args.testcase:
        argv.append(f"--testcase={args.testcase}")
    argv += [f"--sim={args.sim}", f"--outdir={args.outdir}"]
    if args.count is not None:
        argv.append(f"--count={args.count}")
    argv += [f"--check-en={args.check_en}", f"--coverage-en={args.coverage_en}"]
    argv += [f"--plusarg={p}" for p in args.plusargs]
    argv += [f"--expect={args.expect}", "--seeds", str(seed)]
    return shlex.join(argv)


def seed_env(args: argparse.Namespace, test_dir: Path, seed: int) -> dict[str, str]:
    level = args.verbosity.upper()
    return {
        "COCOTB_RANDOM_SEED": str(seed),
        "COCOTB_LOG_LEVEL": level,
        "LOG_LEVEL": level,
        "COCOTB_PLUSARGS": " ".join(bench_plusargs(args)),
        "SB_VERDICTS_YAML": str(test_dir / VERDICTS_FILE),
        "COV_YAML": str(test_dir / COVERAGE_FILE),
    }


def build(args: argparse.Namespace) -> Path:
    """Compile the design into <outdir>/build/<design>.<sim> and return that dir."""
    build_dir = (Path(args.outdir) / "build" / f"{args.design}.{args.sim}").resolve()
    build_dir.mkdir(parents=True, exist_ok=True)
    sources = utils.read_srclist(srclist_for(args.design), DESIGNS_ROOT)
    print(f"\n[dv] build {args.design} ({len(sources)} source(s)) -> {build_dir}")
    get_runner(args.sim).build(
        sources=sources,
        hdl_toplevel=args.design,
        build_dir=build_dir,
        build_args=list(_VERILATOR_BUILD_ARGS) if args.sim == "verilator" else [],
        timescale=("1ns", "1ps"),
        log_file=build_dir / "build.log",
    )
    return build_dir


def verdict_counts(path: Path) -> dict[str, int] | None:
    if not path.is_file():
        return None
    verdicts = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    passed = sum(1 for v in verdicts if v.get("passed"))
    return {"passed": passed, "failed": len(verdicts) - passed}


def run_seed(args: argparse.Namespace, build_dir: Path, seed: int) -> bool:
    """Run the test module for one seed, write its manifest, and report.

    Returns True when the outcome matches --expect.
    """
    test_dir = seed_dir(args, seed)
    test_dir.mkdir(parents=True, exist_ok=True)
    results_xml = test_dir / "results.xml"
    error: str | None = None
    t0 = time.monotonic()
    try:
        get_runner(args.sim).test(
            test_module=f"dffbench.{args.design}.dv.{args.test}",
            hdl_toplevel=args.design,
            hdl_toplevel_lang="verilog",
            testcase=args.testcase,
            seed=seed,
            extra_env=seed_env(args, test_dir, seed),
            build_dir=build_dir,
            test_dir=test_dir,
            results_xml=str(results_xml),
            log_file=test_dir / "test.log",
        )
        ran, failed = get_results(results_xml)
    except SystemExit as exc:
        # the runner exits on a simulator error or, under pytest, on failed tests
        error = f"runner exited with {exc.code}"
    except RuntimeError as exc:
        error = str(exc)
    else:
        if not ran:
            error = "no test matched"
        elif failed:
            error = f"{failed} of {ran} test(s) failed"
    duration = time.monotonic() - t0

    status = "FAIL" if error else "PASS"
    matched = status == args.expect
    replay = replay_cmd(args, seed)
    manifest: dict[str, Any] = {
        "status": status,
        "expect": args.expect,
        "error": error,
        "seed": seed,
        "duration_s": round(duration, 3),
        "replay_cmd": replay,
        "build_dir": str(build_dir),
        "results_xml": str(results_xml),
        "verdicts": str(test_dir / VERDICTS_FILE),
        "verdict_counts": verdict_counts(test_dir / VERDICTS_FILE),
        "coverage": str(test_dir / COVERAGE_FILE),
        "plusargs": bench_plusargs(args),
    }
    (test_dir / MANIFEST_FILE).write_text(json.dumps(manifest, indent=2), encoding="utf-8")

    label = f"{status} ({'expected' if matched else 'UNEXPECTED'})"
    paint = utils.green if matched else utils.red
    print(f"[dv] {paint(label)} seed={seed} {duration:.1f}s {error or ''}".rstrip())
    print(f"[dv]   {replay}")
    return matched


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    validate_args(args)
    logging.basicConfig(
        level=args.verbosity.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    seeds = derive_seeds(args)
    print(f"[dv] {args.design}/{args.test} on {args.sim}, seeds {seeds}")
    build_dir = build(args)
    results = [run_seed(args, build_dir, seed) for seed in seeds]
    print(f"[dv] {sum(results)} of {len(results)} seed(s) as expected")
    return 0 if all(results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
