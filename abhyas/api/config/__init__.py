"""Configuration API."""

from .AbhyasConfig import AbhyasConfig
from .DatabaseConfig import DatabaseConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig

__all__ = ["AbhyasConfig", "DatabaseConfig", "LogConfig", "get_home_dir"]
