"""
Mode-level transforms built on the count table.

- repeated_lines:   lines occurring more than once, first-occurrence order,
                    each listed once.
- decorate_with_counts: prefix every output line with "<count> ".
- format_count:     the "<count> <line>" shape shared by both modes.
"""

from __future__ import annotations

from typing import List

from .counting import LineCount, find_line_key, split_lines


def format_count(line: str, n: int) -> str:
    return f"{n} {line}"


def repeated_lines(table: LineCount) -> List[str]:
    """
    Keys of `table` seen more than once. Table order is first-occurrence
    order, so no extra dedupe pass is needed.
    """
    return [line for line, n in table.items() if n > 1]


def _count_for(table: LineCount, line: str) -> int:
    if table.ignore_case:
        key = find_line_key(table, line)
        n = 0 if key is None else table[key]
    else:
        n = table.count_of(line)
    if n == 0 and not line.endswith("\r"):
        # newline normalization may have dropped the CR of a final CRLF line
        return _count_for(table, line + "\r")
    return n


def decorate_with_counts(text: str, table: LineCount) -> str:
    """
    Prefix each line of `text` with its occurrence count in `table`.
    A trailing "\n" on `text` is kept and not itself decorated.

    Example:
      # table: a seen twice, b once
      decorate_with_counts("a\nb\n", table) -> "2 a\n1 b\n"
    """
    decorated = [format_count(line, _count_for(table, line)) for line in split_lines(text)]
    out = "\n".join(decorated)
    if text.endswith("\n"):
        out += "\n"
    return out
