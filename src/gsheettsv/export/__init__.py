"""Public export API for gsheettsv."""

from __future__ import annotations

from .exporter import EXPORT_FORMAT, SheetExporter, build_export_url
from .results import ExportResult, ExportStatus

__all__ = [
    "EXPORT_FORMAT",
    "SheetExporter",
    "build_export_url",
    "ExportResult",
    "ExportStatus",
]
