from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from relname.core.config import BuildEnv, ProjectLayout
from relname.core.errors import ErrorCode
from relname.output.console import ConsoleProtocol, RichConsole
from relname.platform.detection import Platform, detect_platform


@dataclass(frozen=True, slots=True)
class CLIContext:
    layout: ProjectLayout
    platform: Platform
    env: BuildEnv
    console: ConsoleProtocol


def build_context() -> CLIContext:
    try:
        cwd = Path.cwd()
    except OSError as e:
        typer.echo(f"error: cannot read current directory: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        layout=ProjectLayout(root=cwd),
        platform=detect_platform(),
        env=BuildEnv.from_environ(os.environ),
        console=RichConsole(),
    )
