"""Tests for relgit.output.console module."""

from __future__ import annotations

import pytest

from relgit.output.console import (
    ConsoleProtocol,
    MockConsole,
    NullConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    """Test Style enum."""

    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.ERROR) == "error"
        assert str(Style.DEBUG) == "debug"


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_level_prefixes(self) -> None:
        console = MockConsole()
        console.success("pushed")
        console.error("failed")
        console.warning("careful")
        console.info("found")
        console.debug("resolved")

        assert console.messages == [
            "OK pushed",
            "error: failed",
            "warning: careful",
            "info: found",
            "debug: resolved",
        ]

    def test_debug_captured_when_not_verbose(self) -> None:
        console = MockConsole(verbose=False)
        console.debug("still recorded")
        assert console.count(Style.DEBUG) == 1

    def test_clear(self) -> None:
        console = MockConsole()
        console.print("x")
        console.clear()
        assert console.outputs == []

    def test_text_property(self) -> None:
        console = MockConsole()
        console.print("line1")
        console.print("line2")
        assert console.text == "line1\nline2"

    def test_has_error_and_warning(self) -> None:
        console = MockConsole()
        assert not console.has_error()
        assert not console.has_warning()
        console.error("e")
        console.warning("w")
        assert console.has_error()
        assert console.has_warning()

    def test_find(self) -> None:
        console = MockConsole()
        console.info("Merge base is abc")
        console.info("Found branch release-1.20")
        assert len(console.find("Merge base")) == 1


class TestNullConsole:
    def test_discards_everything(self) -> None:
        console = NullConsole()
        console.print("x")
        console.error("x")
        console.debug("x")
        assert console.verbose is False


class TestRichConsole:
    """Test RichConsole integration."""

    def test_debug_hidden_unless_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole(verbose=False).debug("hidden detail")
        assert "hidden detail" not in capsys.readouterr().err

    def test_debug_shown_when_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole(verbose=True).debug("shown detail")
        assert "shown detail" in capsys.readouterr().err

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().error("boom")
        captured = capsys.readouterr()
        assert "boom" in captured.err
        assert "boom" not in captured.out


class TestProtocolCompliance:
    def test_consoles_satisfy_protocol(self) -> None:
        consoles: list[ConsoleProtocol] = [MockConsole(), NullConsole(), RichConsole()]
        for console in consoles:
            console.info("x")
