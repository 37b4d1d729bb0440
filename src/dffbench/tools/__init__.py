# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/tools/__init__.py

"""dffbench command-line tools.

- dv: Build a design and run its testbench for one or more seeds
- dv-regress: Run a YAML-defined list of dv jobs and report pass/fail
"""
