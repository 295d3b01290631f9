"""Terminal prompts built on rich."""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt

from .errors import UserCancelledError, UserInterruptedError

T = TypeVar("T")


def _label(option: object) -> str:
    if isinstance(option, Enum):
        return str(option.value)
    return str(option)


class RichPrompter:
    """Numbered-choice and free-text prompts.

    End of input raises UserCancelledError and Ctrl-C raises
    UserInterruptedError, whatever prompt is active.
    """

    def __init__(self, console: Console):
        self.console = console

    def _ask(self, ask: Callable[[], T]) -> T:
        try:
            return ask()
        except EOFError as e:
            raise UserCancelledError() from e
        except KeyboardInterrupt as e:
            raise UserInterruptedError() from e

    def choose(self, title: str, options: Sequence[T]) -> T:
        """Show ``options`` numbered from 1 and return the one picked."""
        if not options:
            raise ValueError("choose() needs at least one option")
        for index, option in enumerate(options, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]. {escape(_label(option))}", highlight=False)
        picked = self._ask(
            lambda: IntPrompt.ask(
                title,
                console=self.console,
                choices=[str(index) for index in range(1, len(options) + 1)],
                show_choices=False,
            )
        )
        return options[picked - 1]

    def ask_text(self, message: str) -> str:
        return self._ask(lambda: Prompt.ask(message, console=self.console))

    def confirm(self, message: str) -> bool:
        return self._ask(lambda: Confirm.ask(message, console=self.console, default=False))
