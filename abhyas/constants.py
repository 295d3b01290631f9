"""Shared constants for abhyas state locations."""

APP_NAME = "abhyas"

ABHYAS_HOME_ENV = "ABHYAS_HOME"  # overrides the per-user cache directory

DEFAULT_DB_FILENAME = "abhyas.db"
DEFAULT_LOG_FILENAME = "abhyas.log"
CONFIG_FILENAME = "config.json"

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
