"""Spreadsheet export over HTTPS."""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Optional
from urllib.parse import quote

import requests

from gsheettsv.errors import HttpErrorInfo, NetworkError, OutputError, map_http_error

from .results import ExportResult

logger = logging.getLogger(__name__)

EXPORT_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{file_id}/export?format={fmt}&gid={gid}"
EXPORT_FORMAT = "tsv"
DEFAULT_CHUNK_SIZE = 64 * 1024


def build_export_url(file_id: str, gid: str, *, fmt: str = EXPORT_FORMAT) -> str:
    """Return the export URL for worksheet `gid` of spreadsheet `file_id`."""
    return EXPORT_URL_TEMPLATE.format(
        file_id=quote(file_id, safe=""),
        fmt=fmt,
        gid=quote(gid, safe=""),
    )


class SheetExporter:
    """
    Download one worksheet as TSV and stream it into a binary sink.

    Notes:
        - The credential's access token is sent as-is; no refresh happens here.
        - timeout=None waits indefinitely unless the transport fails.
    """

    def __init__(
        self,
        credentials: Any,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._credentials = credentials
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout
        self._chunk_size = chunk_size

    def export(self, file_id: str, gid: str, dest: BinaryIO) -> ExportResult:
        """
        Export worksheet `gid` of `file_id` into `dest`.

        Nothing is written to `dest` unless the server answers 200. Failures
        are logged and reported through the returned ExportResult.
        """
        url = build_export_url(file_id, gid)
        headers = {"Authorization": f"Bearer {self._credentials.token}"}

        logger.debug("GET %s", url)
        try:
            response = self._session.get(
                url,
                headers=headers,
                stream=True,
                timeout=self._timeout,
            )
        except (requests.RequestException, OSError) as exc:
            logger.error("Failed to download file: %s", exc)
            error = NetworkError("Failed to download file", details={"url": url}, cause=exc)
            return ExportResult.failed(url, error)

        try:
            if response.status_code != 200:
                logger.error("Failed to get file, got status %s", response.status_code)
                error = map_http_error(
                    HttpErrorInfo(
                        status_code=response.status_code,
                        reason=response.reason,
                        message=f"Failed to get file, got status {response.status_code}",
                        details={"url": url},
                    )
                )
                return ExportResult.failed(url, error, status_code=response.status_code)

            written = 0
            try:
                for chunk in response.iter_content(chunk_size=self._chunk_size):
                    if not chunk:
                        continue
                    dest.write(chunk)
                    written += len(chunk)
                dest.flush()
            except requests.RequestException as exc:
                logger.error("Failed to download file: %s", exc)
                error = NetworkError(
                    "Connection lost while streaming file",
                    details={"url": url, "bytes_written": written},
                    cause=exc,
                )
                return ExportResult.failed(
                    url, error, status_code=response.status_code, bytes_written=written
                )
            except OSError as exc:
                # RequestException is an OSError too, so this clause must come second.
                logger.error("Failed to write output: %s", exc)
                error = OutputError(
                    "Failed to write exported data",
                    details={"url": url, "bytes_written": written},
                    cause=exc,
                )
                return ExportResult.failed(
                    url, error, status_code=response.status_code, bytes_written=written
                )

            logger.debug("Wrote %d bytes from %s", written, url)
            return ExportResult(
                status="success",
                url=url,
                status_code=response.status_code,
                bytes_written=written,
            )
        finally:
            response.close()
