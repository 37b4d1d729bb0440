# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/dffbench/shared/dv/base_mailbox.py

"""Unbounded mailbox between two agents."""

from __future__ import annotations

import pyuvm

from . import utils_dv


class BaseMailbox(pyuvm.uvm_tlm_fifo):
    """Unbounded, order-preserving TLM FIFO connecting one producer to one consumer.

    A put never blocks; a get on an empty mailbox suspends the caller until
    the next put. Items come out in the order they went in. Agents reach the
    mailbox only through their blocking put/get ports, connected by the
    environment in connect_phase.

    A mailbox that still holds items in report_phase means the producer and
    consumer disagreed on how many items to exchange; it is reported as a
    warning.

    Example:
        >>> # In an env's build_phase / connect_phase
        >>> self.mbx = BaseMailbox("mbx", self)
        >>> self.gen.put_port.connect(self.mbx.blocking_put_export)
        >>> self.drv.get_port.connect(self.mbx.blocking_get_export)
    """

    def __init__(self, name: str, parent: pyuvm.uvm_component | None) -> None:
        # maxsize 0 is unbounded
        super().__init__(name, parent, 0)
        utils_dv.apply_log_level(self)

    def report_phase(self) -> None:
        super().report_phase()
        left = self.used()
        if left:
            self.logger.warning("%d item(s) never consumed", left)
