# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_test.py

"""Base test: publishes the device and config, builds clock and env."""

from __future__ import annotations

import logging
import os

import cocotb
import pyuvm
from cocotb.triggers import Timer
from pyuvm import ConfigDB

from ..bench_config import BenchModel
from . import utils_cli, utils_dv
from .base_clock_driver import BaseClockDriver
from .base_env import BaseEnv


class BaseTest(pyuvm.uvm_test):
    """Top of every bench run.

    build_phase publishes cocotb.top and the BenchModel returned by
    bench_config() into ConfigDB, applies code and plusarg factory
    overrides, then creates the clock driver and the environment. The
    config is resolved exactly once, so every component sees the same
    validated values.

    run_phase holds an objection around env.run() plus the drain time.

    Subclasses must implement:
        set_factory_overrides(): Point the bench base classes at concrete ones

    Subclasses may override:
        bench_config(): Directed tests pass keyword overrides to from_settings()
        build_clocks() / build_envs(): Replace the single clock or env

    Example:
        >>> class MyTest(BaseTest):
        ...     def set_factory_overrides(self):
        ...         factory.set_type_override_by_type(BaseItem, MyItem)
        ...
        ...     def bench_config(self):
        ...         return MyBenchModel.from_settings(count=5)
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        utils_dv.apply_log_level(self)
        self.cfg: BenchModel
        self.clock_driver: BaseClockDriver
        self.env: BaseEnv

    def build_phase(self) -> None:
        utils_dv.publish(self, utils_dv.DUT_KEY, cocotb.top)
        self.set_factory_overrides()
        utils_cli.apply_factory_overrides_from_plusargs(self.logger)
        super().build_phase()
        self.cfg = self.bench_config()
        utils_dv.publish(self, utils_dv.CFG_KEY, self.cfg)
        self.build_clocks()
        self.build_envs()

    def end_of_elaboration_phase(self) -> None:
        super().end_of_elaboration_phase()
        self.set_logging_level_hier(utils_dv.log_level())

    def start_of_simulation_phase(self) -> None:
        super().start_of_simulation_phase()
        self.logger.info("%s", self.cfg)
        seed = os.getenv("COCOTB_RANDOM_SEED") or os.getenv("RANDOM_SEED")
        self.logger.info("seed: %s", seed or "(unset)")
        if self.logger.isEnabledFor(logging.DEBUG):
            print(ConfigDB())
            pyuvm.uvm_factory().print(debug_level=1)

    async def run_phase(self) -> None:
        self.raise_objection()
        await self.env.run()
        await self.drain()
        self.drop_objection()

    def set_factory_overrides(self) -> None:
        raise NotImplementedError("Implement set_factory_overrides here")

    def bench_config(self) -> BenchModel:
        """Return the validated run configuration for this test."""
        return BenchModel.from_settings()

    def build_clocks(self) -> None:
        self.clock_driver = pyuvm.uvm_factory().create_component_by_type(
            BaseClockDriver,
            parent_inst_path=self.get_full_name(),
            name="clock_driver",
            parent=self,
        )

    def build_envs(self) -> None:
        self.env = pyuvm.uvm_factory().create_component_by_type(
            BaseEnv, parent_inst_path=self.get_full_name(), name="env", parent=self
        )

    async def drain(self, time_ps: int | None = None) -> None:
        """Let simulation time pass after the agents finish.

        pyuvm has no set_drain_time(), so this is a plain Timer; it defaults
        to cfg.drain_time_ps.
        """
        if time_ps is None:
            time_ps = self.cfg.drain_time_ps
        if time_ps > 0:
            self.logger.debug("drain %s ps", format(time_ps, "_d"))
            await Timer(time_ps, unit="ps")
