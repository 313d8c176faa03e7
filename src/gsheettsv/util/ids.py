from __future__ import annotations

import re

_SPREADSHEET_URL_RE = re.compile(r"docs\.google\.com/spreadsheets/d/([a-zA-Z0-9_-]+)")


def parse_file_id(id_or_url: str) -> str:
    """Extract the spreadsheet ID from a Sheets URL, or return the input as-is."""
    match = _SPREADSHEET_URL_RE.search(id_or_url)
    if match:
        return match.group(1)
    return id_or_url
