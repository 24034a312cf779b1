"""Core domain types and logic."""

from .config import BuildEnv, ProjectLayout
from .errors import ErrorCode
from .options import (
    BoolArg,
    CliParseError,
    MissingArgumentValue,
    MissingRequiredArg,
    Options,
    parse_args,
)
from .result import Err, Ok, Result

__all__ = [
    # config
    "BuildEnv",
    "ProjectLayout",
    # errors
    "ErrorCode",
    # options
    "BoolArg",
    "CliParseError",
    "MissingArgumentValue",
    "MissingRequiredArg",
    "Options",
    "parse_args",
    # result
    "Err",
    "Ok",
    "Result",
]
