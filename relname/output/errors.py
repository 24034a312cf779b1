"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relname.core.errors import ErrorCode
from relname.core.options import CliParseError
from relname.output.console import Style
from relname.services.rename_errors import (
    BuildFailed,
    BuildSpawnFailed,
    MissingCargoToml,
    MissingPackageName,
    MissingReleaseBinary,
    MissingReleaseDir,
    RenameError,
    RenameFailed,
)

if TYPE_CHECKING:
    from relname.output.console import ConsoleProtocol

__all__ = ["print_parse_error", "print_rename_error", "rename_error_exit_code"]


def print_parse_error(error: CliParseError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    console.print("usage: relname --name <TEXT> [--build]", Style.DIM)


def print_rename_error(error: RenameError, console: ConsoleProtocol) -> None:
    """Print rename error to console with appropriate formatting."""
    console.error(error.message)
    match error:
        case MissingPackageName(hint=hint):
            console.print(f"hint: {hint}", Style.DIM)
        case MissingCargoToml():
            console.print("hint: run relname from the crate root", Style.DIM)
        case MissingReleaseDir() | MissingReleaseBinary():
            console.print("hint: pass --build or run cargo build --release first", Style.DIM)
        case _:
            pass


def rename_error_exit_code(error: RenameError) -> int:
    """Get exit code for a rename error."""
    match error:
        case MissingCargoToml() | MissingPackageName():
            return int(ErrorCode.ENV_ERROR)
        case BuildSpawnFailed() | BuildFailed():
            return int(ErrorCode.BUILD_ERROR)
        case MissingReleaseDir() | MissingReleaseBinary() | RenameFailed():
            return int(ErrorCode.IO_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.IO_ERROR)
