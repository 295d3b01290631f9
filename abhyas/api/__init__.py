"""API module for abhyas.

Functions defined here serve as the single source of truth for the CLI commands
and the interactive session.
"""

__all__: list[str] = []
