"""Exception hierarchy and HTTP error mapping for gsheettsv."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GSheetTsvError(Exception):
    """
    Base exception for gsheettsv.

    Attributes:
        details: Optional structured information (e.g., HTTP status, paths).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ConfigError(GSheetTsvError):
    """Raised when configuration cannot be resolved (e.g., no home directory)."""


class AuthError(GSheetTsvError):
    """Raised when loading, exchanging or refreshing OAuth credentials fails."""


class PermissionError(GSheetTsvError):
    """Raised when access to the spreadsheet is denied (HTTP 403)."""


class InvalidArgumentError(GSheetTsvError):
    """Raised when request arguments are invalid (HTTP 400, etc.)."""


class NotFoundError(GSheetTsvError):
    """Raised when the spreadsheet or worksheet is not found (HTTP 404)."""


class RateLimitError(GSheetTsvError):
    """Raised when rate-limited (HTTP 429)."""


class NetworkError(GSheetTsvError):
    """Raised when DNS/connection/TLS/timeout issues prevent the request."""


class OutputError(GSheetTsvError):
    """Raised when the exported data cannot be written to the destination."""


class ApiError(GSheetTsvError):
    """Raised for unclassified HTTP errors (5xx, unknown 4xx, redirects, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to gsheettsv exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GSheetTsvError:
    """
    Map a non-200 export response to a gsheettsv exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> PermissionError
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
