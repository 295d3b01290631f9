"""Database configuration with Pydantic validation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_DB_FILENAME
from .get_home_dir import get_home_dir


class DatabaseConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    filename: str = Field(DEFAULT_DB_FILENAME, description="SQLite file name, or absolute path")
    timeout_secs: float = Field(5.0, gt=0, description="Seconds sqlite waits on a locked database")

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("database.filename must not be empty")
        return v

    @property
    def path(self) -> Path:
        """Database file location, relative names resolve under the home dir."""
        candidate = Path(self.filename).expanduser()
        if candidate.is_absolute():
            return candidate
        return get_home_dir(self.filename)
