"""Core module exports."""

from gocoveralls.core.errors import (
    BlockMismatchError,
    ConfigError,
    ErrorCode,
    GocoverallsError,
    SourceMismatchError,
    ProfileParseError,
    SourceNotFoundError,
    SourceReadError,
    UploadError,
)
from gocoveralls.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from gocoveralls.core.progress import pluralize, spinner, status

__all__ = [
    # Errors
    "BlockMismatchError",
    "ConfigError",
    "ErrorCode",
    "GocoverallsError",
    "SourceMismatchError",
    "ProfileParseError",
    "SourceNotFoundError",
    "SourceReadError",
    "UploadError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "pluralize",
    "spinner",
    "status",
]
