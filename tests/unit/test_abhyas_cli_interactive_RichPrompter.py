"""Unit tests for abhyas.cli.interactive.RichPrompter."""

import builtins
import io

import pytest
from rich.console import Console

from abhyas.cli.interactive.actions import MainMenuAction
from abhyas.cli.interactive.errors import UserCancelledError, UserInterruptedError
from abhyas.cli.interactive.RichPrompter import RichPrompter

pytestmark = pytest.mark.cli


@pytest.fixture
def prompter() -> RichPrompter:
    return RichPrompter(Console(file=io.StringIO(), width=120))


def _output(prompter: RichPrompter) -> str:
    return prompter.console.file.getvalue()  # type: ignore[attr-defined]


def test_choose_returns_member(prompter, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert prompter.choose("Select your option", list(MainMenuAction)) is MainMenuAction.ADD_LINK
    out = _output(prompter)
    assert "1. Check Status" in out
    assert "7. Exit" in out


def test_choose_reasks_on_invalid_number(prompter, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\nabc\n2\n"))
    assert prompter.choose("Select link", ["a", "b"]) == "b"


def test_choose_requires_options(prompter):
    with pytest.raises(ValueError):
        prompter.choose("Select link", [])


def test_ask_text(prompter, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("https://a\n"))
    assert prompter.ask_text("Enter the link") == "https://a"


def test_confirm(prompter, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("y\n"))
    assert prompter.confirm("Delete?") is True


def test_end_of_input_is_cancel(prompter, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(UserCancelledError):
        prompter.ask_text("Enter the link")


def test_ctrl_c_is_interrupt(prompter, monkeypatch):
    def interrupted(*args):
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", interrupted)
    with pytest.raises(UserInterruptedError):
        prompter.choose("Select your option", list(MainMenuAction))
