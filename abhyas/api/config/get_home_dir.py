"""Get abhyas home directory path or path under it."""

import os
import sys
from pathlib import Path

from ...constants import ABHYAS_HOME_ENV, APP_NAME


def _user_cache_dir() -> Path:
    """Per-user cache directory for the current platform."""
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches"
    if sys.platform.startswith("win"):
        local_app_data = os.environ.get("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data)
        return Path.home() / "AppData" / "Local"
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        return Path(xdg_cache).expanduser()
    return Path.home() / ".cache"


def get_home_dir(*parts: str) -> Path:
    """Get abhyas home directory path or path under it.

    Checks the ABHYAS_HOME environment variable first and falls back to
    ``<user cache dir>/abhyas``. The directory is not created here.

    Args:
        *parts: Optional path components to join (e.g., "abhyas.db")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.cache/abhyas")
        >>> get_home_dir("abhyas.db")
        Path("/home/user/.cache/abhyas/abhyas.db")
    """
    home_env = os.environ.get(ABHYAS_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = _user_cache_dir() / APP_NAME

    return home / Path(*parts) if parts else home
