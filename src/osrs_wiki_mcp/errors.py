"""Error classes and helpers for the OSRS Wiki MCP Server.

Tools never let these escape to the MCP runtime: each tool raises them
internally and renders them as a short, prefixed line of text so the
client always receives a successful response envelope. The leading
marker distinguishes the four failure kinds:

- validation: a required input was empty.
- upstream_status: the upstream API answered with a non-2xx status.
- empty_result: a well-formed response carried nothing usable.
- exception: the request failed in transport or the body was not JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Literal, Optional

ErrorKind = Literal["validation", "upstream_status", "empty_result", "exception"]

UNKNOWN_ERROR = "Unknown error"


@dataclass
class AppError(Exception):
    """Base application error with a code, text marker and optional details."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    marker: str = "❌ Error:"

    kind: ClassVar[ErrorKind] = "exception"

    def to_text(self) -> str:
        if not self.marker:
            return self.message
        return f"{self.marker} {self.message}"


class BadRequestError(AppError):
    """Raised when a required parameter is missing or blank."""

    kind: ClassVar[ErrorKind] = "validation"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("BAD_REQUEST", message, details, "❌ Error:")


class UpstreamStatusError(AppError):
    """Raised when an upstream API responds with a non-success status."""

    kind: ClassVar[ErrorKind] = "upstream_status"

    def __init__(self, status_code: int, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            "UPSTREAM_STATUS",
            str(status_code),
            {"status": status_code, **(details or {})},
            "❌ API Error:",
        )


class NotFoundError(AppError):
    """Raised when a response is well-formed but has no usable content."""

    kind: ClassVar[ErrorKind] = "empty_result"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        *,
        marker: str = "🔎",
    ) -> None:
        super().__init__("NOT_FOUND", message, details, marker)


class UpstreamRequestError(AppError):
    """Raised when a request fails in transport or its body cannot be decoded."""

    kind: ClassVar[ErrorKind] = "exception"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("UPSTREAM_ERROR", message or UNKNOWN_ERROR, details, "❌ Request failed:")

    @classmethod
    def from_exception(cls, error: BaseException) -> UpstreamRequestError:
        return cls(str(error), {"type": type(error).__name__})


def as_app_error(error: Exception) -> AppError:
    """Return `error` itself if it is an AppError, otherwise wrap it."""

    if isinstance(error, AppError):
        return error
    return UpstreamRequestError.from_exception(error)


def to_error_text(error: Exception) -> str:
    """Convert any exception into the user-facing error line.

    Examples:
        >>> to_error_text(BadRequestError("query is required"))
        '❌ Error: query is required'
        >>> to_error_text(UpstreamStatusError(503))
        '❌ API Error: 503'
        >>> to_error_text(ValueError(""))
        '❌ Request failed: Unknown error'
    """

    return as_app_error(error).to_text()
