"""Tests for maybe.output.console module."""

from __future__ import annotations

import pytest

from maybe.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    """Test Style enum."""

    def test_str_conversion(self) -> None:
        assert str(Style.WARNING) == "warning"
        assert str(Style.DEFAULT) == "default"

    def test_all_styles_exist(self) -> None:
        assert {s.name for s in Style} == {"DEFAULT", "WARNING", "ERROR", "DIM"}


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_print_with_style(self) -> None:
        console = MockConsole()
        console.print("detail", Style.DIM)
        assert console.outputs[0].style == Style.DIM

    def test_warning(self) -> None:
        console = MockConsole()
        console.warning("be careful")
        assert console.messages == ["warning: be careful"]
        assert console.has_warning()

    def test_error(self) -> None:
        console = MockConsole()
        console.error("broken")
        assert console.messages == ["error: broken"]
        assert console.count(Style.ERROR) == 1

    def test_helpers(self) -> None:
        console = MockConsole()
        console.print("one")
        console.warning("two")
        assert console.text == "one\nwarning: two"
        assert len(console.find("two")) == 1
        console.clear()
        assert console.outputs == []
        assert not console.has_warning()

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.warning("ok")


class TestRichConsole:
    """Test RichConsole writes to stderr without interpreting markup."""

    def test_warning_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.warning("list index [0] out of range")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "warning:" in captured.err
        assert "list index [0] out of range" in captured.err

    def test_print_is_literal(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("[bold]not markup[/bold]", Style.DIM)
        assert "[bold]not markup[/bold]" in capsys.readouterr().err
