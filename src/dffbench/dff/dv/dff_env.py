# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/dff_env.py

"""Environment for the 1-bit register bench."""

from __future__ import annotations

from typing import Any

import pyuvm

from dffbench.shared.dv import BaseEnv

from .dff_edge_adapter import DffEdgeAdapter
from .dff_model import DffModel


class DffEnv(BaseEnv):
    """BaseEnv plus the register model and the adapter that clocks it."""

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        super().__init__(name, parent)
        self.edge_adapter: DffEdgeAdapter

    def build_phase(self) -> None:
        super().build_phase()
        self.edge_adapter = pyuvm.uvm_factory().create_component_by_type(
            DffEdgeAdapter,
            parent_inst_path=self.get_full_name(),
            name="edge_adapter",
            parent=self,
        )

    def build_model(self) -> DffModel:
        return DffModel()

    def device_users(self) -> list[Any]:
        return [*super().device_users(), self.edge_adapter]
