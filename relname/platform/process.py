"""Subprocess execution with live output forwarding.

The child's stdout and stderr are piped as independent byte streams and each
one is drained on its own reader thread, so a chatty stderr can never block a
child that is still writing to stdout.

Usage:
    result = run_streamed(
        ["cargo", "build", "--release"],
        cwd=Path("."),
        on_stdout=print,
        on_stderr=lambda line: print(line, file=sys.stderr),
        on_read_error=lambda stream, exc: print(f"{stream}: {exc}", file=sys.stderr),
    )
    match result:
        case Ok(returncode):
            ...
        case Err(error):
            print(f"Failed to start: {error.reason}")
"""

from __future__ import annotations

import subprocess
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from relname.core.result import Err, Ok, Result

__all__ = ["SpawnError", "run_streamed"]


LineHandler = Callable[[str], None]
ReadErrorHandler = Callable[[str, Exception], None]


@dataclass(frozen=True, slots=True)
class SpawnError:
    """A command that could not be started.

    Attributes:
        command: The command that was executed.
        reason: OS error text (program not found, permission denied).
    """

    command: tuple[str, ...]
    reason: str


def _decode_line(raw: bytes) -> str:
    return raw.decode("utf-8").rstrip("\r\n")


def _pump(
    stream: IO[bytes],
    name: str,
    on_line: LineHandler,
    on_read_error: ReadErrorHandler,
) -> None:
    """Forward every line of `stream` until EOF.

    Undecodable lines and handler failures are reported and skipped so the
    pipe keeps draining; an OS-level read failure is reported and ends this
    stream only.
    """
    try:
        for raw in iter(stream.readline, b""):
            try:
                line = _decode_line(raw)
            except UnicodeDecodeError as e:
                on_read_error(name, e)
                continue
            try:
                on_line(line)
            except Exception as e:
                on_read_error(name, e)
    except (OSError, ValueError) as e:
        on_read_error(name, e)
    finally:
        stream.close()


def run_streamed(
    cmd: list[str],
    cwd: Path,
    *,
    on_stdout: LineHandler,
    on_stderr: LineHandler,
    on_read_error: ReadErrorHandler,
    env: dict[str, str] | None = None,
) -> Result[int, SpawnError]:
    """Run a command, forwarding its output line by line while it runs.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        on_stdout: Called with each stdout line (line ending stripped).
        on_stderr: Called with each stderr line (line ending stripped).
        on_read_error: Called with ("stdout" | "stderr", exception) when a
            stream cannot be read or decoded, or a line handler raises.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(returncode) once the child has exited, whatever its status.
        Err(SpawnError) if the child could not be started.
    """
    try:
        proc = subprocess.Popen(
            cmd,
            cwd=str(cwd),
            env=env,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        return Err(SpawnError(command=tuple(cmd), reason=str(e)))

    assert proc.stdout is not None
    assert proc.stderr is not None
    readers = [
        threading.Thread(
            target=_pump,
            args=(proc.stdout, "stdout", on_stdout, on_read_error),
            name="relname-stdout",
        ),
        threading.Thread(
            target=_pump,
            args=(proc.stderr, "stderr", on_stderr, on_read_error),
            name="relname-stderr",
        ),
    ]
    for reader in readers:
        reader.start()
    for reader in readers:
        reader.join()

    return Ok(proc.wait())
