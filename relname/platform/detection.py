"""Host operating system detection.

The detected platform names the OS component of the renamed binary and
decides whether executables carry a `.exe` suffix.
"""

from __future__ import annotations

import sys as _sys
from enum import Enum, auto
from functools import lru_cache

__all__ = [
    "Platform",
    "detect_platform",
    "os_name",
]


class Platform(Enum):
    """Operating system platform."""

    LINUX = auto()
    MACOS = auto()
    WINDOWS = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def exe_suffix(self) -> str:
        """Get executable file suffix for this platform."""
        return ".exe" if self == Platform.WINDOWS else ""

    def exe_name(self, name: str) -> str:
        """Get executable name with platform-appropriate suffix.

        Example: exe_name("relname") -> "relname.exe" on Windows, "relname" elsewhere.
        """
        return f"{name}{self.exe_suffix}"


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    # NOTE: avoid platform.system() on Windows, it may query WMI.
    system = _sys.platform.lower()
    if system.startswith("linux"):
        return Platform.LINUX
    if system.startswith("darwin"):
        return Platform.MACOS
    if system.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.UNKNOWN


def os_name(platform: Platform, system: str | None = None) -> str:
    """OS identifier embedded in the renamed binary.

    Known platforms use their short name; anything else falls back to the
    interpreter's platform string with version digits stripped
    (e.g. "freebsd14" -> "freebsd").
    """
    if platform != Platform.UNKNOWN:
        return str(platform)
    raw = (system if system is not None else _sys.platform).lower()
    return raw.rstrip("0123456789") or raw
