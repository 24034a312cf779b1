"""Tests for relname.output.console module."""

from __future__ import annotations

import pytest

from relname.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
    escape,
)


class TestStyle:
    """Test Style enum."""

    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.ERROR) == "error"
        assert str(Style.DIM) == "dim"


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT, "stdout")]

    def test_success(self) -> None:
        console = MockConsole()
        console.success("renamed")
        assert console.messages == ["SUCCESS renamed"]
        assert console.has_success()

    def test_error_goes_to_stderr(self) -> None:
        console = MockConsole()
        console.error("boom")
        assert console.stderr_lines == ["error: boom"]
        assert console.has_error()

    def test_warning_goes_to_stderr(self) -> None:
        console = MockConsole()
        console.warning("careful")
        assert console.stderr_lines == ["warning: careful"]

    def test_raw_lines_keep_their_stream(self) -> None:
        console = MockConsole()
        console.out("Compiling demo v0.1.0")
        console.err("warning: unused variable")
        assert console.stdout_lines == ["Compiling demo v0.1.0"]
        assert console.stderr_lines == ["warning: unused variable"]
        assert not console.has_error()

    def test_find_and_messages(self) -> None:
        console = MockConsole()
        console.print("first")
        console.newline()
        console.print("second")
        assert console.messages == ["first", "", "second"]
        assert [o.message for o in console.find("sec")] == ["second"]

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("ok")


class TestRichConsole:
    """RichConsole routes output to the right stream."""

    def test_out_and_success_go_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.out("[not markup]")
        console.success("done")
        captured = capsys.readouterr()
        assert "[not markup]" in captured.out
        assert "SUCCESS done" in captured.out
        assert captured.err == ""

    def test_error_and_err_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("boom")
        console.err("raw line")
        captured = capsys.readouterr()
        assert "error: boom" in captured.err
        assert "raw line" in captured.err
        assert captured.out == ""

    def test_long_error_stays_on_one_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        path = "/home/runner/work/my-tool/my-tool/target/release/my-tool"
        RichConsole().error(f"executable binary not found in release directory: {path}")
        captured = capsys.readouterr()
        assert captured.err.count("\n") == 1
        assert path in captured.err

    def test_long_success_stays_on_one_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        src = "/home/runner/work/my-tool/my-tool/target/release/my-tool"
        RichConsole().success(f"renamed [red]{src}[/red] to: [bold]{src}-linux-1.2.3[/bold]")
        captured = capsys.readouterr()
        assert captured.out.count("\n") == 1
        assert f"to: {src}-linux-1.2.3" in captured.out


def test_escape_neutralizes_markup() -> None:
    assert escape("[red]x") == "\\[red]x"
