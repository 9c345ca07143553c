"""Config module exports."""

from gocoveralls.config.loader import load_config
from gocoveralls.config.models import (
    GocoverallsConfig,
    LoggingConfig,
    LogOutputConfig,
    ResolverConfig,
    UploadConfig,
)

__all__ = [
    "load_config",
    "GocoverallsConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ResolverConfig",
    "UploadConfig",
]
