"""
Line occurrence tables.

Given:
  - raw text (split on "\n")
  - a case policy (exact, or case-folded)

Return:
  - a LineCount mapping each distinct line to how often it occurs.

Case-insensitive tables key every case variant of a line under the FIRST
spelling seen, e.g. "Apple\napple\nAPPLE" -> {"Apple": 3}. A folded shadow
index (lower-cased line -> canonical key) keeps lookups O(1).
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple


def split_lines(text: str) -> List[str]:
    """
    Split on line feeds only. A final "\n" terminates the last line rather
    than opening an empty one; carriage returns are left in place.

    Examples:
      split_lines("a\nb\n")  -> ["a", "b"]
      split_lines("a\n\nb")  -> ["a", "", "b"]
      split_lines("")        -> []
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


class LineCount:
    """
    Ordered line -> occurrence count table.

    Keys keep first-seen order and first-seen spelling. When `ignore_case`
    is set, `_folded` maps line.lower() to the canonical key.
    """

    def __init__(self, ignore_case: bool = False):
        self.ignore_case = ignore_case
        self._counts: Dict[str, int] = {}
        self._folded: Dict[str, str] = {}

    def add(self, line: str) -> None:
        key = self.key_for(line)
        if key is None:
            key = line
            self._counts[key] = 0
            if self.ignore_case:
                self._folded[line.lower()] = key
        self._counts[key] += 1

    def key_for(self, line: str) -> Optional[str]:
        """Canonical key under which `line` is counted, or None if unseen."""
        if self.ignore_case:
            return self._folded.get(line.lower())
        return line if line in self._counts else None

    def count_of(self, line: str) -> int:
        key = self.key_for(line)
        return 0 if key is None else self._counts[key]

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self._counts.items())

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def __getitem__(self, key: str) -> int:
        return self._counts[key]

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"LineCount({self._counts!r}, ignore_case={self.ignore_case})"


def build_lines_count(raw_text: str, ignore_case: bool = False) -> LineCount:
    """
    Count every line of `raw_text`, empty lines included.

    Args:
      raw_text    : text to count (split with split_lines)
      ignore_case : fold case when grouping; keys keep first-seen spelling

    Returns:
      LineCount in first-occurrence order.
    """
    table = LineCount(ignore_case=ignore_case)
    for line in split_lines(raw_text):
        table.add(line)
    return table


def find_line_key(table: LineCount, line: str) -> Optional[str]:
    """
    Return the key of `table` whose lower-cased form equals line.lower(),
    or None if there is none. ("" is a valid key: the empty line.)
    """
    if table.ignore_case:
        return table.key_for(line)

    # Exact-case table: several keys may match once folded; the last one wins.
    folded = line.lower()
    found = None
    for key in table:
        if key.lower() == folded:
            found = key
    return found
