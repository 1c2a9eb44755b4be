"""
Trailing-newline normalization for default-mode output.

After adjacent duplicates are removed the output is reshaped so that:
  - every internal run of "\n" collapses to a single "\n";
  - if the ORIGINAL input ended with one or more newlines (LF or CR+LF),
    the output ends with exactly one "\n";
  - otherwise all trailing whitespace is stripped.
"""

from __future__ import annotations

import re

TRAILING_NEWLINES_RE = re.compile(r"(?:\r?\n)+\Z")  # whole LF / CRLF suffix
NEWLINE_RUN_RE = re.compile(r"\n+")


def trailing_newlines_count(text: str) -> int:
    """Length of the trailing newline run of `text` (0 if none)."""
    m = TRAILING_NEWLINES_RE.search(text)
    return len(m.group(0)) if m else 0


def update_trailing_newlines(text: str, trailing_count: int) -> str:
    """
    Collapse newline runs in `text`, then restore the trailing shape recorded
    as `trailing_count` (see trailing_newlines_count).
    """
    text = NEWLINE_RUN_RE.sub("\n", text)
    if trailing_count >= 1:
        return TRAILING_NEWLINES_RE.sub("\n", text)
    return text.rstrip()
