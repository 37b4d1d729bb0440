# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_utils.py

from __future__ import annotations

import random
from pathlib import Path

import pytest

from dffbench import utils


def test_normalize_seed() -> None:
    rng = random.Random(0)
    assert utils.normalize_seed(rng, "42") == 42
    assert utils.normalize_seed(rng, "0x10") == 16
    assert utils.normalize_seed(rng, str(2**32 + 5)) == 5
    assert 0 <= utils.normalize_seed(rng, "random") < 2**32


def test_normalize_seed_rejects_garbage() -> None:
    with pytest.raises(SystemExit):
        utils.normalize_seed(random.Random(0), "abc")


def test_read_srclist(tmp_path: Path) -> None:
    srclist = tmp_path / "srclist.f"
    srclist.write_text("// header\n\ndff/rtl/dff.sv\n  other.sv  // trailing\n")
    assert utils.read_srclist(srclist, tmp_path) == [
        (tmp_path / "dff" / "rtl" / "dff.sv").resolve(),
        (tmp_path / "other.sv").resolve(),
    ]


def test_shipped_srclist_names_existing_files() -> None:
    root = Path(utils.__file__).resolve().parent
    sources = utils.read_srclist(root / "dff" / "rtl" / "srclist.f", root)
    assert sources and all(p.is_file() for p in sources)


def test_colours_wrap_text() -> None:
    assert "PASS" in utils.green("PASS")
    assert utils.red("x").endswith(utils.RESET)


def test_available_sims_filters_by_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(utils.shutil, "which", lambda exe: "/bin/x" if exe == "iverilog" else None)
    assert utils.available_sims() == ["icarus"]
