"""Tests for pubflow.output.console module."""

from __future__ import annotations

import pytest

from pubflow.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.STEP) == "step"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_step(self) -> None:
        console = MockConsole()
        console.step("1) Cleaning build artifacts...")
        console.print("noise")
        console.step("2) Ensuring build & twine are installed...")
        assert console.steps == [
            "1) Cleaning build artifacts...",
            "2) Ensuring build & twine are installed...",
        ]

    def test_error(self) -> None:
        console = MockConsole()
        console.error("boom")
        assert console.has_error()
        assert console.messages == ["boom"]

    def test_warning(self) -> None:
        console = MockConsole()
        console.warning("careful")
        assert console.has_warning()
        assert console.messages == ["warning: careful"]

    def test_command(self) -> None:
        console = MockConsole()
        console.command(["python", "-m", "build"])
        assert console.outputs[0].message == "$ python -m build"
        assert console.outputs[0].style == Style.DIM

    def test_find_and_text(self) -> None:
        console = MockConsole()
        console.print("one")
        console.success("two done")
        assert [o.message for o in console.find("done")] == ["two done"]
        assert console.text == "one\ntwo done"

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.success("ok")


class TestRichConsole:
    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("Choose one: --testpypi or --prod")
        captured = capsys.readouterr()
        assert "Choose one" in captured.err
        assert "Choose one" not in captured.out

    def test_brackets_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.command(["pip", "install", "demo[cli]==1.0.0"])
        assert "demo[cli]==1.0.0" in capsys.readouterr().out
