"""Tests for relname.platform.files module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relname.platform.files import atomic_rename


def test_atomic_rename_moves_file(tmp_path: Path) -> None:
    src = tmp_path / "demo"
    src.write_bytes(b"\x7fELF")
    dst = tmp_path / "demo-linux-1.0.0"

    assert atomic_rename(src, dst) == dst
    assert not src.exists()
    assert dst.read_bytes() == b"\x7fELF"


def test_atomic_rename_replaces_existing(tmp_path: Path) -> None:
    src = tmp_path / "new"
    src.write_text("new", encoding="utf-8")
    dst = tmp_path / "old"
    dst.write_text("old", encoding="utf-8")

    atomic_rename(src, dst)

    assert dst.read_text(encoding="utf-8") == "new"


def test_atomic_rename_missing_source_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        atomic_rename(tmp_path / "missing", tmp_path / "dst")
