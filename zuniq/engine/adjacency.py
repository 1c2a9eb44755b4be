"""
Adjacent-duplicate removal (the classic uniq rule).

A line is kept iff:
  - it is empty (blank lines are always kept, even consecutive ones), or
  - it is the first line, or
  - it differs from the line immediately before it in the input.

Comparison ignores a trailing carriage return and, when `ignore_case` is
set, letter case. What gets emitted is always the original line.
"""

from __future__ import annotations

from typing import List

from .newlines import trailing_newlines_count, update_trailing_newlines


def _same_line(a: str, b: str, ignore_case: bool) -> bool:
    a = a.rstrip("\r")
    b = b.rstrip("\r")
    if ignore_case:
        return a.lower() == b.lower()
    return a == b


def keep_adjacent_unique(lines: List[str], ignore_case: bool = False) -> List[str]:
    """
    Filter `lines` with the adjacency rule above.

    Examples:
      keep_adjacent_unique(["a", "a", "b"])            -> ["a", "b"]
      keep_adjacent_unique(["x", "y", "x"])            -> ["x", "y", "x"]
      keep_adjacent_unique(["", ""])                   -> ["", ""]
      keep_adjacent_unique(["A", "a"], ignore_case=True) -> ["A"]
    """
    out: List[str] = []
    for i, line in enumerate(lines):
        if line.rstrip("\r") == "":
            out.append(line)
            continue
        if i == 0 or not _same_line(line, lines[i - 1], ignore_case):
            out.append(line)
    return out


def dedupe_adjacent(text: str, ignore_case: bool = False) -> str:
    """
    Default dedup: drop adjacent duplicates from `text`, rejoin with "\n",
    then normalize newlines against the shape of the original `text`.

    Examples:
      dedupe_adjacent("a\na\nb\n")                 -> "a\nb\n"
      dedupe_adjacent("A\na\nB\n", ignore_case=True) -> "A\nB\n"
    """
    lines = text.split("\n")
    joined = "\n".join(keep_adjacent_unique(lines, ignore_case=ignore_case))
    return update_trailing_newlines(joined, trailing_newlines_count(text))
