"""Platform abstraction layer."""

from .detection import (
    Platform,
    detect_platform,
    os_name,
)
from .files import atomic_rename
from .process import (
    SpawnError,
    run_streamed,
)

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    "os_name",
    # files
    "atomic_rename",
    # process
    "SpawnError",
    "run_streamed",
]
