"""Console output abstraction.

Services talk to a ConsoleProtocol so the rename pipeline can be exercised in
tests with MockConsole while the CLI prints through Rich. Errors and the raw
stderr lines of a child process go to the error stream; everything else goes
to stdout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
    "escape",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    DIM = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling (Rich markup allowed)."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None:
        """Print an error message to stderr."""
        ...

    def warning(self, message: str) -> None: ...

    def out(self, line: str) -> None:
        """Write a raw line to stdout (no markup, no wrapping)."""
        ...

    def err(self, line: str) -> None:
        """Write a raw line to stderr (no markup, no wrapping)."""
        ...

    def newline(self) -> None: ...


class RichConsole:
    """Console implementation using Rich library."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        # Messages stay on one line when piped (no wrap at the 80-column default).
        self._console = Console(highlight=False, soft_wrap=True)
        self._err_console = Console(stderr=True, highlight=False, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style)
        else:
            self._console.print(message)

    def success(self, message: str) -> None:
        self._console.print(f"[green]SUCCESS[/green] {message}")

    def error(self, message: str) -> None:
        self._err_console.print(f"[red bold]error:[/red bold] {message}")

    def warning(self, message: str) -> None:
        self._err_console.print(f"[yellow]warning:[/yellow] {message}")

    def out(self, line: str) -> None:
        self._console.out(line, highlight=False)

    def err(self, line: str) -> None:
        self._err_console.out(line, highlight=False)

    def newline(self) -> None:
        self._console.print()


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    stream: str = "stdout"


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"SUCCESS {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR, "stderr"))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING, "stderr"))

    def out(self, line: str) -> None:
        self.outputs.append(OutputRecord(line, Style.DEFAULT))

    def err(self, line: str) -> None:
        self.outputs.append(OutputRecord(line, Style.DEFAULT, "stderr"))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def stdout_lines(self) -> list[str]:
        return [o.message for o in self.outputs if o.stream == "stdout"]

    @property
    def stderr_lines(self) -> list[str]:
        return [o.message for o in self.outputs if o.stream == "stderr"]

    def has_error(self) -> bool:
        """Check if any error was printed."""
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_success(self) -> bool:
        """Check if any success message was printed."""
        return any(o.style == Style.SUCCESS for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]


def escape(text: str) -> str:
    """Escape Rich markup in text that is embedded in a styled message."""
    from rich.markup import escape as _escape

    return _escape(text)
