# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_scoreboard.py

"""Scoreboard: checks observations and records per-transaction verdicts."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Generic, TypeVar

import pyuvm
import yaml

from . import utils_dv
from .base_agent import BaseAgent
from .base_item import BaseItem
from .base_ref_model import BaseRefModel

T = TypeVar("T", bound=BaseItem)


@dataclass(frozen=True)
class Verdict:
    """Outcome of checking one observation."""

    index: int
    passed: bool
    time_ps: int
    label: str
    observed: dict[str, object] = field(default_factory=dict)
    expected: dict[str, object] = field(default_factory=dict)


class BaseScoreboard(BaseAgent, Generic[T]):
    """Check `count` observations against the reference model.

    Every observation is handed to the reference model and the output
    fields are compared with BaseItem.compare_out(). Each comparison becomes
    a Verdict stamped with the simulation time. A mismatch is logged as an
    error and counted but never raised while agents are running; with
    cfg.sb_fail_on_error it fails the test in final_phase instead. With
    cfg.check_en off the observations are drained and dropped.

    SB_VERDICTS_YAML, when set, names the file the verdict list is written
    to in report_phase.

    Reference:
        C.E. Cummings, "OVM/UVM Scoreboards - Fundamental Architectures,"
        SNUG 2013 (Silicon Valley)
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.get_port: pyuvm.uvm_blocking_get_port
        self.ref_model: BaseRefModel[T]
        self.verdicts: list[Verdict] = []

    @property
    def vect_cnt(self) -> int:
        return len(self.verdicts)

    @property
    def pass_cnt(self) -> int:
        return sum(v.passed for v in self.verdicts)

    @property
    def err_cnt(self) -> int:
        return self.vect_cnt - self.pass_cnt

    def build_phase(self) -> None:
        super().build_phase()
        self.get_port = pyuvm.uvm_blocking_get_port("get_port", self)
        self.ref_model = pyuvm.uvm_factory().create_object_by_type(
            BaseRefModel, name="ref_model"
        )

    async def main(self, count: int | None = None) -> None:
        n = self._resolve_count(count)
        self.logger.debug("main begin: count=%d check_en=%s", n, self.cfg.check_en)
        for i in range(n):
            act: T = await self.get_port.get()
            self.handled += 1
            if self.cfg.check_en:
                self.check(i, act)
        self.logger.debug("main end")

    def check(self, index: int, act: T) -> Verdict:
        """Compare one observation with its expectation and record the verdict."""
        exp = self.ref_model.calc_exp(act)
        verdict = Verdict(
            index=index,
            passed=act.compare_out(exp),
            time_ps=utils_dv.sim_time_ps(),
            label=act.get_name(),
            observed=act.to_dict(),
            expected=exp.to_dict(),
        )
        self.verdicts.append(verdict)
        log = self.logger.debug if verdict.passed else self.logger.error
        log(
            "%s[%d] exp=%s act=%s @ %d ps",
            "PASS" if verdict.passed else "MISMATCH",
            index,
            verdict.expected,
            verdict.observed,
            verdict.time_ps,
        )
        return verdict

    def write_verdicts(self, path: str | Path) -> Path:
        """Dump the verdicts as a YAML list and return the path."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        with out.open("w", encoding="utf-8") as f:
            yaml.safe_dump([asdict(v) for v in self.verdicts], f, sort_keys=False)
        return out

    def report_phase(self) -> None:
        super().report_phase()
        if not self.cfg.check_en:
            self.logger.info("checks disabled: %d observation(s) dropped", self.handled)
        elif not self.vect_cnt:
            self.logger.warning("no observations checked")
        elif not self.err_cnt:
            self.logger.info("PASSED: %d of %d", self.pass_cnt, self.vect_cnt)
        else:
            self.logger.error(
                "FAILED: %d of %d passed, %d mismatch(es)",
                self.pass_cnt,
                self.vect_cnt,
                self.err_cnt,
            )
        path = os.getenv("SB_VERDICTS_YAML")
        if path:
            self.logger.debug("verdicts written to %s", self.write_verdicts(path))

    def final_phase(self) -> None:
        super().final_phase()
        if self.cfg.sb_fail_on_error and self.err_cnt:
            raise AssertionError(
                f"{self.err_cnt} mismatch(es) and sb_fail_on_error is set"
            )
