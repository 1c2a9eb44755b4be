from .counting import LineCount, build_lines_count, find_line_key, split_lines
from .adjacency import dedupe_adjacent, keep_adjacent_unique
from .newlines import trailing_newlines_count, update_trailing_newlines
from .transform import decorate_with_counts, format_count, repeated_lines

__all__ = [
    "LineCount",
    "build_lines_count",
    "find_line_key",
    "split_lines",
    "dedupe_adjacent",
    "keep_adjacent_unique",
    "trailing_newlines_count",
    "update_trailing_newlines",
    "decorate_with_counts",
    "format_count",
    "repeated_lines",
]
