"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from ..api.validate_output import validate_output
from ..constants import DEFAULT_TIMESTAMP_FORMAT
from .display.CLIDisplay import CLIDisplay


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    display_format: str,
) -> int:
    """Run command once, display the result and return the exit code.

    Commands must handle their expected exceptions internally and report
    errors via their domain-specific output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    output: dict[str, Any] = validate_output(func, result.output)

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    for warning in output.get("warnings", []):
        display.warning(warning)
    display.json_output(output, format=display_format)

    return 0 if result.success else 1
