"""
zuniq entry points.

- run_uniq: run one call described by a UniqOptions bundle.
- uniq:     keyword convenience, e.g. uniq(content="a\na\n", count=True).

Modes (mutually exclusive):
  1) repeated  : lines occurring more than once, each listed once, joined
                 with "\n" (no trailing-newline restoration).
  2) default   : adjacent duplicates removed, newline shape normalized.
                 When file_path is missing but content is given, content
                 is used with a warning.
  repeated + unique short-circuits to an empty result with a warning.

With `count`, every output line is prefixed by its occurrence count in the
RAW input, not in the deduplicated output.

Warnings are returned on UniqResult.warnings and also emitted on `logger`.
No state survives between calls.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from zuniq.engine import (
    build_lines_count,
    decorate_with_counts,
    dedupe_adjacent,
    format_count,
    repeated_lines,
)
from zuniq.sources import resolve_input, write_output
from zuniq.utils.logger import get_logger
from .options import UniqOptions, UniqResult

MODE_CONFLICT_WARNING = "Provide either 'repeated' or 'unique', not both."

_log = get_logger("zuniq.runner")


def _warn(logger: logging.Logger, warnings: List[str], message: str) -> None:
    warnings.append(message)
    logger.warning(message)


def _run_repeated(text: str, opts: UniqOptions) -> str:
    table = build_lines_count(text, ignore_case=opts.ignore_case)
    lines = repeated_lines(table)
    if opts.count:
        lines = [format_count(line, table[line]) for line in lines]
    return "\n".join(lines)


def _run_default(text: str, opts: UniqOptions) -> str:
    out = dedupe_adjacent(text, ignore_case=opts.ignore_case)
    if opts.count:
        # Counts come from the raw input, before dedupe.
        table = build_lines_count(text, ignore_case=opts.ignore_case)
        out = decorate_with_counts(out, table)
    return out


def run_uniq(opts: UniqOptions, *, logger: Optional[logging.Logger] = None) -> UniqResult:
    """
    Execute one zuniq call.

    Args:
      opts   : validated options bundle
      logger : where warnings go (default: the "zuniq.runner" logger)

    Returns:
      UniqResult(out, warnings). If opts.output_path is set, `out` has also
      been written there.

    Raises:
      InvalidPath       : input missing, or output path can't be created
      ConflictingInputs : an existing file_path and content were both given
    """
    logger = logger or _log
    warnings: List[str] = []

    if opts.repeated and opts.unique:
        _warn(logger, warnings, MODE_CONFLICT_WARNING)
        return UniqResult(out="", warnings=warnings)

    resolved = resolve_input(opts.file_path, opts.content)
    for message in resolved.warnings:
        _warn(logger, warnings, message)

    if opts.repeated:
        mode = "repeated"
        out = _run_repeated(resolved.text, opts)
    else:
        mode = "default"
        out = _run_default(resolved.text, opts)

    logger.debug(
        "mode=%s source=%s ignore_case=%s count=%s | %d chars in -> %d chars out",
        mode, resolved.source, opts.ignore_case, opts.count,
        len(resolved.text), len(out),
    )

    if opts.output_path:
        written = write_output(opts.output_path, out)
        logger.debug("wrote %s", written)

    return UniqResult(out=out, warnings=warnings)


def uniq(*, logger: Optional[logging.Logger] = None, **options) -> UniqResult:
    """
    Keyword form of run_uniq; option names are validated by
    UniqOptions.from_dict.
    """
    return run_uniq(UniqOptions.from_dict(options), logger=logger)
