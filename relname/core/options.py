"""Command-line options and the flag scanner that builds them.

The scanner walks the raw argument list by hand instead of declaring a schema:
only two flags exist, unknown tokens are ignored, and each malformed flag has
its own error variant.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .result import Err, Ok, Result

__all__ = [
    "BoolArg",
    "CliParseError",
    "MissingArgumentValue",
    "MissingRequiredArg",
    "Options",
    "parse_args",
]


@dataclass(frozen=True, slots=True)
class Options:
    """Parsed invocation options.

    Attributes:
        name: Identifier embedded at the front of the renamed binary.
        build: Run `cargo build --release` before renaming.
    """

    name: str
    build: bool = False


@dataclass(frozen=True, slots=True)
class MissingRequiredArg:
    arg: str

    @property
    def message(self) -> str:
        return f"required argument was not passed: --{self.arg}"


@dataclass(frozen=True, slots=True)
class MissingArgumentValue:
    arg: str
    expected: str

    @property
    def message(self) -> str:
        return f"argument passed without a value: --{self.arg} <{self.expected}>"


@dataclass(frozen=True, slots=True)
class BoolArg:
    arg: str

    @property
    def message(self) -> str:
        return f"--{self.arg} takes no value"


CliParseError = MissingRequiredArg | MissingArgumentValue | BoolArg


def _is_flag(token: str) -> bool:
    return token.startswith("-")


def parse_args(argv: Sequence[str]) -> Result[Options, CliParseError]:
    """Scan a full argument list into Options.

    Args:
        argv: Process arguments, program name at index 0.

    Returns:
        Ok(Options) on success, Err(CliParseError) on the first malformed flag
        or when --name was never given.
    """
    name = ""
    build = False
    args = list(argv[1:])

    for i, arg in enumerate(args):
        following = args[i + 1] if i + 1 < len(args) else None
        match arg:
            case "--name":
                if following is None or _is_flag(following):
                    return Err(MissingArgumentValue(arg="name", expected="TEXT"))
                name = following
            case "--build":
                if following is not None and not _is_flag(following):
                    return Err(BoolArg(arg="build"))
                build = True
            case _:
                pass

    if not name:
        return Err(MissingRequiredArg(arg="name"))
    return Ok(Options(name=name, build=build))
