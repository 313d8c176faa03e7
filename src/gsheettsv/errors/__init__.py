"""Public error exports for gsheettsv."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    ConfigError,
    GSheetTsvError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    OutputError,
    PermissionError,
    RateLimitError,
    map_http_error,
)

__all__ = [
    "GSheetTsvError",
    "ConfigError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "NetworkError",
    "OutputError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
