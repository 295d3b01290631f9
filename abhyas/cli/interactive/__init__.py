"""Interactive menu session."""

from .actions import LinkAction, MainMenuAction, OtherAction
from .errors import ExitRequested, UserCancelledError, UserInterruptedError
from .InteractiveSession import InteractiveSession
from .RichPrompter import RichPrompter

__all__ = [
    "ExitRequested",
    "InteractiveSession",
    "LinkAction",
    "MainMenuAction",
    "OtherAction",
    "RichPrompter",
    "UserCancelledError",
    "UserInterruptedError",
]
