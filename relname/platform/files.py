"""Filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["atomic_rename"]


def atomic_rename(src: Path, dst: Path) -> Path:
    """Rename src to dst in one step, replacing an existing dst.

    Both paths must live on the same filesystem (here: the same directory).
    Raises OSError when the rename fails.
    """
    os.replace(src, dst)
    return dst
