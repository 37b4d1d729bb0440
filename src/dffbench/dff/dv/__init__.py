# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/dff/dv/__init__.py

"""Verification bench for the 1-bit storage element.

Components:
- dff_model: Synchronous device model (pure Python)
- dff_config: Run configuration (pydantic, pure Python)
- dff_item: Transaction item (d, q)
- dff_edge_adapter: Advances the device model on every rising edge
- dff_generator: Random or directed stimulus
- dff_driver: Applies d on the drive edge, reads back q
- dff_monitor: Samples d and q one edge later
- dff_ref_model: Expected q for an observation
- dff_coverage: Functional coverage of driven items
- dff_reset_driver: Reset and preset control levels
- dff_env: Environment wiring the above
- test_dff: pyuvm tests

To run tests:
    dv --design=dff --test=test_dff
    dv-regress --file=src/dffbench/dff/dv/dv_regress.yaml
"""
