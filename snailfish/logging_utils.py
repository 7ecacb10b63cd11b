"""snailfish.logging_utils
==========================

Simple logging utilities, mainly for recording rejected input lines so that
corrupt puzzle inputs can be inspected after the run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .constants import PARSE_FAIL_LOG
from .errors import ParseError


def read_line(text: str, line_no: Optional[int]) -> str:
    """Return line ``line_no`` (1-based) of ``text`` or an empty string."""

    if line_no is None:
        return ""
    lines = text.splitlines()
    if 1 <= line_no <= len(lines):
        return lines[line_no - 1]
    return ""


def log_parse_failure(source: str, text: str, error: ParseError, path: str = PARSE_FAIL_LOG) -> None:
    """Append a JSON line describing ``error`` to ``path``."""

    entry = {
        "source": source,
        "line_no": error.line_no,
        "line": read_line(text, error.line_no),
        "error": str(error),
    }
    with Path(path).open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["log_parse_failure", "read_line"]
