"""Public auth exports for gsheettsv."""

from __future__ import annotations

from .auth_info import (
    DEFAULT_SCOPES,
    AuthInfo,
    default_token_file,
    resolve_home_dir,
)
from .oauth_client import OAuthClient
from .prompt import CodePrompt, console_prompt

__all__ = [
    "AuthInfo",
    "DEFAULT_SCOPES",
    "OAuthClient",
    "CodePrompt",
    "console_prompt",
    "default_token_file",
    "resolve_home_dir",
]
