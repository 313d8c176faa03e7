"""Authentication configuration for gsheettsv."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from gsheettsv.errors import ConfigError

PROGRAM_NAME = "gsheettsv"

DEFAULT_SCOPES: tuple[str, ...] = (
    "https://www.googleapis.com/auth/drive.metadata.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
)

DEFAULT_CLIENT_SECRETS_FILE = ".client_secret.json"

CLIENT_SECRETS_ENV = "GSHEETTSV_CLIENT_SECRETS"
TOKEN_FILE_ENV = "GSHEETTSV_TOKEN_FILE"

# Checked in this order; the first non-empty one wins.
HOME_ENV_VARS: tuple[str, ...] = ("HOME", "HOMEPATH", "USERPROFILE")


def resolve_home_dir(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Return the user's home directory from the environment.

    Raises:
        ConfigError: if none of HOME, HOMEPATH, USERPROFILE is set.
    """
    env = os.environ if environ is None else environ
    for name in HOME_ENV_VARS:
        value = env.get(name, "").strip()
        if value:
            return value
    raise ConfigError(
        "Cannot locate home directory for the credential cache",
        details={"checked": list(HOME_ENV_VARS)},
    )


def default_token_file(environ: Optional[Mapping[str, str]] = None) -> str:
    """Path of the cached credential: <home>/.credentials/.gsheettsv-drive-auth."""
    home = resolve_home_dir(environ)
    return os.path.join(home, ".credentials", f".{PROGRAM_NAME}-drive-auth")


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Fields:
        client_secrets_file: OAuth client secrets JSON ("installed" app).
        token_file: where the authorized-user credential is cached.
        scopes: OAuth scopes requested during authorization.
    """

    client_secrets_file: str
    token_file: str
    scopes: tuple[str, ...] = DEFAULT_SCOPES

    def __post_init__(self) -> None:
        for key in ("client_secrets_file", "token_file"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.{key} must be a non-empty string")

        if not self.scopes or not all(isinstance(s, str) and s.strip() for s in self.scopes):
            raise ValueError("AuthInfo.scopes must be a non-empty sequence of strings")

    @property
    def token_dir(self) -> str:
        """Directory holding the token file."""
        return os.path.dirname(self.token_file)

    @classmethod
    def from_environ(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        client_secrets_file: Optional[str] = None,
        token_file: Optional[str] = None,
    ) -> "AuthInfo":
        """
        Resolve configuration once at startup.

        Explicit arguments win over GSHEETTSV_* environment variables, which
        win over the defaults. The home directory is only required when the
        token file falls back to its default location.

        Raises:
            ConfigError: if the default token file is needed and no home
                directory is set.
        """
        env = os.environ if environ is None else environ

        secrets = client_secrets_file or env.get(CLIENT_SECRETS_ENV, "").strip()
        token = token_file or env.get(TOKEN_FILE_ENV, "").strip()

        return cls(
            client_secrets_file=secrets or DEFAULT_CLIENT_SECRETS_FILE,
            token_file=token or default_token_file(env),
        )
