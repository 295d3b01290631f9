"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    Stages are announce, progress, result and output. The progress callback
    is a generator that must set ``result``, ``output`` and ``success`` on the
    instance before it finishes.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
