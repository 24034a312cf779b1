from __future__ import annotations

import os

import pytest


def require_arch_checks_enabled() -> None:
    """Skip architecture checks unless explicitly enabled."""

    if os.getenv("RELNAME_ARCH_CHECKS") != "1":
        pytest.skip("architecture checks are opt-in; set RELNAME_ARCH_CHECKS=1 to enable")
