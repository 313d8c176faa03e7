"""Interactive authorization-code prompts."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

# Receives the authorization URL, returns the code typed back by the user.
CodePrompt = Callable[[str], str]


def console_prompt(
    auth_url: str,
    *,
    stdin: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> str:
    """
    Show the authorization URL and read one line of input as the code.

    Everything is written to stderr: stdout carries the exported sheet.
    """
    in_stream = stdin if stdin is not None else sys.stdin
    out_stream = stderr if stderr is not None else sys.stderr

    out_stream.write(f"Open this: {auth_url}\n")
    out_stream.write("Enter the code from that page here: ")
    out_stream.flush()

    return in_stream.readline().strip()
