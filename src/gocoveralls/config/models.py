"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GOCOVERALLS__SECTION__KEY)
3. Repo YAML (.gocoveralls.yaml)
4. Global YAML (~/.config/gocoveralls/config.yaml)
5. Built-in defaults (this file)

Examples:
    GOCOVERALLS__LOGGING__LEVEL=DEBUG
    GOCOVERALLS__UPLOAD__SERVICE_NAME=github
    GOCOVERALLS__RESOLVER__PATH_PREFIX=src/
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_ENDPOINT = "https://coveralls.io"


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GOCOVERALLS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every resolved source file.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class UploadConfig(BaseModel):
    """Coveralls upload configuration.

    Env vars:
        GOCOVERALLS__UPLOAD__ENDPOINT: Coveralls base URL
        GOCOVERALLS__UPLOAD__REPO_TOKEN: Repository token (COVERALLS_TOKEN also works)
        GOCOVERALLS__UPLOAD__SERVICE_NAME: CI service name reported to Coveralls
    """

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="Base URL of the Coveralls API. Override for Coveralls Enterprise.",
    )
    repo_token: str | None = Field(
        default=None,
        description="Repository token. Not needed for public repos on supported CI.",
    )
    service_name: str = Field(
        default="github",
        description="CI service name, e.g. github, travis-ci, circleci.",
    )
    service_job_id: str | None = Field(
        default=None,
        description="CI job id. Detected from the environment when unset.",
    )
    service_number: str | None = Field(
        default=None,
        description="Build number shared by parallel jobs; also the default for 'finish'.",
    )
    parallel: bool = Field(
        default=False,
        description="Mark the job as one of several; finish with 'gocoveralls finish'.",
    )
    flag_name: str | None = Field(
        default=None,
        description="Job flag shown in the Coveralls UI for parallel jobs.",
    )
    timeout_sec: float = Field(
        default=30.0,
        description="HTTP timeout per request.",
    )

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Endpoint must be an http(s) URL, got {v}")
        return v.rstrip("/")

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class ResolverConfig(BaseModel):
    """Source file resolution configuration.

    Env vars:
        GOCOVERALLS__RESOLVER__MODULE_FILE: Module declaration file name
        GOCOVERALLS__RESOLVER__PATH_PREFIX: Prefix added to reported file names
    """

    module_file: str = Field(
        default="go.mod",
        description="Module declaration file searched for upward from the working directory.",
    )
    path_prefix: str = Field(
        default="",
        description="Prefix prepended to every reported source file name.",
    )


class GocoverallsConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    upload: UploadConfig = Field(default_factory=UploadConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
