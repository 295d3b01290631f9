"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import click
import typer

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Get the display format set by the main callback, "yaml" if unset."""
    context: click.Context | None = click.get_current_context(silent=True)
    current = context
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)

    Args:
        func: Function that returns StageResult

    Returns:
        Wrapped function that displays the result and exits with its code
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        code = _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format())
        raise typer.Exit(code)

    return wrapper  # type: ignore[return-value]
