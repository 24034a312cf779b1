"""Error codes for CLI exit status.

These values are used as process exit codes and should remain stable:
- 0: Success
- 1: User error (bad or missing arguments)
- 2: Environment error (not a Cargo project, build env not injected)
- 3: Build error (cargo could not start or failed)
- 5: I/O error (release output missing, rename failed)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the relname command."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    IO_ERROR = 5

