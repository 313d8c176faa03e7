"""Result model for sheet exports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional

from gsheettsv.errors import GSheetTsvError

ExportStatus = Literal["success", "failed"]


@dataclass(slots=True)
class ExportResult:
    """Outcome of a single export request."""

    status: ExportStatus
    url: str

    status_code: Optional[int] = None
    bytes_written: int = 0

    error_type: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def failed(
        cls,
        url: str,
        error: GSheetTsvError,
        *,
        status_code: Optional[int] = None,
        bytes_written: int = 0,
    ) -> "ExportResult":
        return cls(
            status="failed",
            url=url,
            status_code=status_code,
            bytes_written=bytes_written,
            error_type=type(error).__name__,
            error_message=str(error),
            error_details=dict(error.details),
        )
