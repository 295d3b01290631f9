"""Log configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_LOG_FILENAME
from .get_home_dir import get_home_dir


class LogConfig(BaseModel):
    """Logfile configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("WARNING", description="Logging level")
    filename: str = Field(DEFAULT_LOG_FILENAME, description="Logfile name under the home dir")

    @property
    def path(self) -> Path:
        return get_home_dir(self.filename)
