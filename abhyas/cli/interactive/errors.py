"""Signals that end the interactive session."""


class UserCancelledError(Exception):
    """The user closed a prompt (end of input)."""


class UserInterruptedError(Exception):
    """The user forcefully quit a prompt (Ctrl-C)."""


class ExitRequested(Exception):
    """The user picked Exit from a menu."""
