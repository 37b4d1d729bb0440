# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/__init__.py

"""Shared components and utilities for dffbench benches.

Modules:
- settings: env/plusarg/default resolution of bench settings (no simulator)
- bench_config: validated run configuration (pydantic)

Subpackages:
- dv: UVM-style bench base classes built on cocotb and pyuvm

The settings and bench_config modules import neither cocotb nor pyuvm, so
they can be used and tested outside a simulator.
"""
