"""OAuth credential acquisition and caching for gsheettsv."""

from __future__ import annotations

import logging
import os
from typing import Optional

from gsheettsv.errors import AuthError

from .auth_info import AuthInfo
from .prompt import CodePrompt, console_prompt

logger = logging.getLogger(__name__)


class OAuthClient:
    """Load cached OAuth credentials or obtain new ones interactively."""

    def __init__(self, auth_info: AuthInfo, *, prompt: Optional[CodePrompt] = None) -> None:
        self._auth_info = auth_info
        self._prompt = prompt if prompt is not None else console_prompt

    def get_credentials(self, ensure_valid: bool = False):
        """
        Return OAuth credentials, running the interactive flow if none are cached.

        A cached token is trusted as-is unless ensure_valid is True, in which
        case an expired token is refreshed (and re-cached) when possible.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: on load/refresh/flow failures.
        """
        creds = self.load_cached_credentials()
        if creds is None:
            return self.authorize()

        if ensure_valid and not creds.valid and creds.refresh_token:
            self._refresh(creds)

        return creds

    def load_cached_credentials(self):
        """
        Read the token file.

        Returns:
            Credentials, or None when the token file does not exist.

        Raises:
            AuthError: if the file exists but cannot be read or parsed.
        """
        try:
            from google.oauth2.credentials import Credentials
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth"},
                cause=exc,
            ) from exc

        token_file = self._auth_info.token_file
        try:
            creds = Credentials.from_authorized_user_file(
                token_file,
                scopes=list(self._auth_info.scopes),
            )
        except FileNotFoundError:
            logger.debug("No cached token at %s", token_file)
            return None
        except Exception as exc:
            raise AuthError(
                "Failed to load token_file (delete it to re-authorize)",
                details={"token_file": token_file},
                cause=exc,
            ) from exc

        logger.debug("Loaded cached token from %s", token_file)
        return creds

    def authorize(self):
        """
        Run the authorization-code flow and cache the result.

        The user opens the printed URL, approves access and pastes the code
        back. Persisting the token is best-effort; the credentials are
        returned even if the cache cannot be written.

        Raises:
            AuthError: if the client secrets cannot be used or the code
                exchange fails.
        """
        try:
            from google_auth_oauthlib.flow import InstalledAppFlow
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth-oauthlib"},
                cause=exc,
            ) from exc

        client_secrets = self._auth_info.client_secrets_file
        try:
            flow = InstalledAppFlow.from_client_secrets_file(
                client_secrets,
                scopes=list(self._auth_info.scopes),
            )
            redirect_uris = flow.client_config.get("redirect_uris") or []
            if not redirect_uris:
                raise ValueError("client secrets define no redirect_uris")
            flow.redirect_uri = redirect_uris[0]

            auth_url, _ = flow.authorization_url(
                access_type="offline",
                prompt="consent",
            )
        except Exception as exc:
            raise AuthError(
                "Failed to prepare OAuth authorization flow",
                details={"client_secrets_file": client_secrets},
                cause=exc,
            ) from exc

        code = self._prompt(auth_url)
        if not code:
            raise AuthError("No authorization code entered")

        try:
            flow.fetch_token(code=code)
        except Exception as exc:
            raise AuthError(
                "Failed to exchange authorization code for a token",
                details={"client_secrets_file": client_secrets},
                cause=exc,
            ) from exc

        creds = flow.credentials
        self._save_credentials(creds)
        return creds

    def _refresh(self, creds) -> None:
        try:
            from google.auth.transport.requests import Request
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth[requests]"},
                cause=exc,
            ) from exc

        try:
            creds.refresh(Request())
        except Exception as exc:
            raise AuthError(
                "Failed to refresh OAuth credentials",
                details={"token_file": self._auth_info.token_file},
                cause=exc,
            ) from exc

        self._save_credentials(creds)

    def _save_credentials(self, creds) -> None:
        token_file = self._auth_info.token_file
        token_dir = self._auth_info.token_dir
        if token_dir:
            try:
                os.makedirs(token_dir, exist_ok=True)
            except OSError as exc:
                logger.warning(
                    "Failed to store token. Could not create %s (%s)", token_dir, exc
                )

        try:
            # Holds the refresh token and client secret: owner-only.
            fd = os.open(token_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            logger.warning("Failed to store token to %s (%s)", token_file, exc)
            return

        logger.info("Token stored to %s", token_file)
