"""gocoveralls error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Profile (parse and merge)
- 4xxx: Source (resolution and reading)
- 5xxx: Upload
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Profile (3xxx)
    PROFILE_PARSE_ERROR = 3001
    BLOCK_LENGTH_MISMATCH = 3002
    BLOCK_START_MISMATCH = 3003

    # Source (4xxx)
    SOURCE_NOT_FOUND = 4001
    SOURCE_READ_ERROR = 4002
    SOURCE_MISMATCH = 4003

    # Upload (5xxx)
    UPLOAD_REJECTED = 5001
    UPLOAD_TRANSPORT_ERROR = 5002


@dataclass(frozen=True, slots=True)
class GocoverallsError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SOURCE_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(GocoverallsError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ProfileParseError(GocoverallsError):
    """A coverage profile could not be parsed.

    Recoverable: the caller decides whether to abort the run.
    """

    @classmethod
    def at_line(cls, source: str, line_no: int, reason: str) -> "ProfileParseError":
        return cls(
            code=ErrorCode.PROFILE_PARSE_ERROR,
            message=f"{source}:{line_no}: {reason}",
            details={"source": source, "line": line_no, "reason": reason},
        )

    @classmethod
    def invalid(cls, source: str, reason: str) -> "ProfileParseError":
        return cls(
            code=ErrorCode.PROFILE_PARSE_ERROR,
            message=f"{source}: {reason}",
            details={"source": source, "reason": reason},
        )

    @classmethod
    def unreadable(cls, source: str, reason: str) -> "ProfileParseError":
        return cls(
            code=ErrorCode.PROFILE_PARSE_ERROR,
            message=f"Failed to read profile {source}: {reason}",
            details={"source": source, "reason": reason},
        )


class BlockMismatchError(GocoverallsError):
    """Two block lists being merged do not line up."""

    @classmethod
    def length_mismatch(cls, file_name: str, left: int, right: int) -> "BlockMismatchError":
        return cls(
            code=ErrorCode.BLOCK_LENGTH_MISMATCH,
            message=f"Block counts differ for {file_name}: {left} != {right}",
            details={"file": file_name, "left": left, "right": right},
        )

    @classmethod
    def start_mismatch(
        cls,
        file_name: str,
        index: int,
        left: tuple[int, int],
        right: tuple[int, int],
    ) -> "BlockMismatchError":
        return cls(
            code=ErrorCode.BLOCK_START_MISMATCH,
            message=(
                f"Blocks are not aligned in {file_name} at index {index}: "
                f"{left[0]}.{left[1]} != {right[0]}.{right[1]}"
            ),
            details={"file": file_name, "index": index, "left": left, "right": right},
        )


class SourceNotFoundError(GocoverallsError):
    """A profiled file could not be located on disk."""

    @classmethod
    def for_path(cls, logical_path: str, reason: str) -> "SourceNotFoundError":
        return cls(
            code=ErrorCode.SOURCE_NOT_FOUND,
            message=f"Can't find {logical_path!r}: {reason}",
            details={"path": logical_path, "reason": reason},
        )


class SourceReadError(GocoverallsError):
    """A resolved source file could not be read."""

    @classmethod
    def for_path(cls, path: str, reason: str) -> "SourceReadError":
        return cls(
            code=ErrorCode.SOURCE_READ_ERROR,
            message=f"Error reading {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class SourceMismatchError(GocoverallsError):
    """A profile describes lines the source file does not have."""

    @classmethod
    def past_end(cls, file_name: str, end_line: int, line_count: int) -> "SourceMismatchError":
        return cls(
            code=ErrorCode.SOURCE_MISMATCH,
            message=(
                f"Profile for {file_name} covers line {end_line} "
                f"but the source has {line_count} lines; is the profile stale?"
            ),
            details={"file": file_name, "end_line": end_line, "line_count": line_count},
        )


class UploadError(GocoverallsError):
    """The coverage service rejected or never received a request."""

    @classmethod
    def rejected(cls, url: str, status_code: int, body: str) -> "UploadError":
        return cls(
            code=ErrorCode.UPLOAD_REJECTED,
            message=f"Bad response status from {url}: {status_code}",
            retryable=status_code >= 500,
            details={"url": url, "status_code": status_code, "body": body[:500]},
        )

    @classmethod
    def transport(cls, url: str, reason: str) -> "UploadError":
        return cls(
            code=ErrorCode.UPLOAD_TRANSPORT_ERROR,
            message=f"Request to {url} failed: {reason}",
            retryable=True,
            details={"url": url, "reason": reason},
        )
