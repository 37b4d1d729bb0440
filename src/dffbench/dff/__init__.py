# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/__init__.py

"""1-bit storage element with reset/preset priority.

Subpackages:
- rtl: HDL toplevel hosting the bench clock net
- dv: Device model and verification bench (cocotb/pyuvm)
"""
