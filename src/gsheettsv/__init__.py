"""gsheettsv public API."""

from __future__ import annotations

from gsheettsv.auth import (
    DEFAULT_SCOPES,
    AuthInfo,
    CodePrompt,
    OAuthClient,
    console_prompt,
    default_token_file,
    resolve_home_dir,
)
from gsheettsv.errors import (
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
from gsheettsv.export import ExportResult, SheetExporter, build_export_url

__all__ = [
    # Export
    "SheetExporter",
    "ExportResult",
    "build_export_url",
    # Auth
    "AuthInfo",
    "DEFAULT_SCOPES",
    "OAuthClient",
    "CodePrompt",
    "console_prompt",
    "default_token_file",
    "resolve_home_dir",
    # Errors
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
