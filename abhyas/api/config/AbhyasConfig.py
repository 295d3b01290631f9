"""Top-level abhyas configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILENAME
from .DatabaseConfig import DatabaseConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class AbhyasConfig(BaseModel):
    """Top-level configuration for abhyas."""

    model_config = ConfigDict(extra="forbid")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the home dir."""
        return get_home_dir(CONFIG_FILENAME)

    @classmethod
    def load(cls) -> "AbhyasConfig":
        """Load and validate config from file.

        A missing config file is not an error: every section has defaults,
        so a first run works without one.

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
