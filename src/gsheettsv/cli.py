"""Command line entry point.

Usage:
    gsheettsv <file_id_or_url> <gid> > sheet.tsv
    python -m gsheettsv <file_id_or_url> <gid> [--timeout SECONDS] [--refresh]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, Mapping, Optional, Sequence

import requests

from gsheettsv.auth import AuthInfo, CodePrompt, OAuthClient
from gsheettsv.errors import GSheetTsvError
from gsheettsv.export import SheetExporter
from gsheettsv.util import configure_logging, parse_file_id

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_AUTH = 2
EXIT_DOWNLOAD = 3


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not seconds > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="gsheettsv",
        description="Export one worksheet of a Google Spreadsheet as TSV to stdout.",
    )
    parser.add_argument("file_id", help="spreadsheet ID or docs.google.com URL")
    parser.add_argument("gid", help="worksheet gid")
    parser.add_argument(
        "--client-secrets",
        metavar="PATH",
        help="OAuth client secrets JSON (default: $GSHEETTSV_CLIENT_SECRETS or .client_secret.json)",
    )
    parser.add_argument(
        "--token-file",
        metavar="PATH",
        help="cached token location (default: ~/.credentials/.gsheettsv-drive-auth)",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        metavar="SECONDS",
        help="abort the download after this many seconds without data (default: wait)",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="refresh an expired cached token before downloading",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _describe(exc: GSheetTsvError) -> str:
    text = str(exc)
    if exc.details:
        text = f"{text} {exc.details}"
    if exc.cause is not None:
        text = f"{text}: {exc.cause}"
    return text


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdout: Optional[BinaryIO] = None,
    environ: Optional[Mapping[str, str]] = None,
    prompt: Optional[CodePrompt] = None,
    session: Optional[requests.Session] = None,
    setup_logging: bool = True,
) -> int:
    """Run the export and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.file_id.strip() or not args.gid.strip():
        parser.error("file_id and gid must not be empty")
    if setup_logging:
        configure_logging(verbose=args.verbose)

    try:
        auth_info = AuthInfo.from_environ(
            environ,
            client_secrets_file=args.client_secrets,
            token_file=args.token_file,
        )
        creds = OAuthClient(auth_info, prompt=prompt).get_credentials(
            ensure_valid=args.refresh
        )
    except GSheetTsvError as exc:
        logger.error("Authorization failed: %s", _describe(exc))
        return EXIT_AUTH

    exporter = SheetExporter(creds, session=session, timeout=args.timeout)
    dest = stdout if stdout is not None else sys.stdout.buffer
    result = exporter.export(parse_file_id(args.file_id), args.gid, dest)
    if not result.ok:
        return EXIT_DOWNLOAD
    return EXIT_OK


def run() -> None:
    sys.exit(main())
