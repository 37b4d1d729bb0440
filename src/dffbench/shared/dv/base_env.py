# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_env.py

"""Environment: owns the mailboxes and device handle, runs the agents."""

from __future__ import annotations

from typing import Any

import pyuvm
from cocotb.triggers import gather

from . import utils_dv
from .base_agent import BaseAgent
from .base_coverage import BaseCoverage
from .base_driver import BaseDriver
from .base_generator import BaseGenerator
from .base_mailbox import BaseMailbox
from .base_monitor import BaseMonitor
from .base_reset_driver import BaseResetDriver
from .base_scoreboard import BaseScoreboard


class BaseEnv(pyuvm.uvm_env):
    """Builds the bench, wires it, and runs it to completion.

    build_phase makes the device handle, the stimulus and observation
    mailboxes, the four agents and the reset driver, all through the
    factory so a test can override any of them. The coverage collector is
    added only when the published BenchModel has coverage_en set.

        gen --put--> stim_mbx --get--> drv --apply--> model
                                        `--ap--> cov
        model --sample--> mon --put--> obs_mbx --get--> sb

    run() pulses reset, starts every agent's main() together and returns
    once all of them have returned. If one agent raises, the others are
    cancelled and the error propagates to the test.

    Subclasses must implement:
        build_model(): Return the device handle
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.apply_log_level(self)
        self.model: Any = None
        self.stim_mbx: BaseMailbox
        self.obs_mbx: BaseMailbox
        self.gen: BaseGenerator
        self.drv: BaseDriver
        self.mon: BaseMonitor
        self.sb: BaseScoreboard
        self.reset_driver: BaseResetDriver
        self.cov: BaseCoverage | None = None

    def _make(self, kind: type, name: str) -> Any:
        return pyuvm.uvm_factory().create_component_by_type(
            kind, parent_inst_path=self.get_full_name(), name=name, parent=self
        )

    def build_phase(self) -> None:
        super().build_phase()
        self.model = self.build_model()
        self.stim_mbx = BaseMailbox("stim_mbx", self)
        self.obs_mbx = BaseMailbox("obs_mbx", self)
        self.gen = self._make(BaseGenerator, "gen")
        self.drv = self._make(BaseDriver, "drv")
        self.mon = self._make(BaseMonitor, "mon")
        self.sb = self._make(BaseScoreboard, "sb")
        self.reset_driver = self._make(BaseResetDriver, "reset_driver")
        if utils_dv.bench_cfg(self).coverage_en:
            self.cov = self._make(BaseCoverage, "coverage")

    def connect_phase(self) -> None:
        super().connect_phase()
        self.gen.put_port.connect(self.stim_mbx.blocking_put_export)
        self.drv.get_port.connect(self.stim_mbx.blocking_get_export)
        self.mon.put_port.connect(self.obs_mbx.blocking_put_export)
        self.sb.get_port.connect(self.obs_mbx.blocking_get_export)
        if self.cov is not None:
            self.drv.ap.connect(self.cov.analysis_export)
        for comp in self.device_users():
            comp.model = self.model

    def build_model(self) -> Any:
        """Return the device handle shared by the driver, monitor, and reset driver."""
        raise NotImplementedError("Implement build_model here")

    def device_users(self) -> list[Any]:
        """Components that receive the device handle in connect_phase."""
        return [self.reset_driver, self.drv, self.mon]

    @property
    def agents(self) -> tuple[BaseAgent, ...]:
        """The four agents, in start order."""
        return (self.gen, self.drv, self.mon, self.sb)

    def check_counts(self) -> int:
        """Return the shared transaction count, or raise if the agents disagree."""
        counts = {a.get_name(): a.count for a in self.agents}
        if len(set(counts.values())) != 1:
            raise ValueError(f"agents disagree on count: {counts}")
        return self.gen.count

    async def run(self) -> None:
        """Reset the device, then run all agents and wait for every one."""
        count = self.check_counts()
        await self.reset_driver.pulse_reset()
        self.logger.info(
            "starting %d agents: count=%d @ %d ps",
            len(self.agents),
            count,
            utils_dv.sim_time_ps(),
        )
        await gather(*(a.main() for a in self.agents))
        self.logger.info("all agents finished @ %d ps", utils_dv.sim_time_ps())
