# apps/cli/uniq.py
"""
Command-line front end for zuniq.

This script:
  1) Parses uniq(1)-style flags into a UniqOptions bundle.
  2) Runs the call (warnings go to the log on stderr).
  3) Prints the result to stdout, and/or writes it to --output.

Usage:
    python -m apps.cli.uniq notes.txt
    python -m apps.cli.uniq notes.txt -c -i -o deduped.txt
    cat notes.txt | python -m apps.cli.uniq --stdin -d
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from zuniq import ZuniqError, UniqOptions, run_uniq
from zuniq.utils.logger import configure_logging, default_level, get_logger

log = get_logger("zuniq.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="zuniq", description="Report or omit repeated lines.")
    ap.add_argument("input", nargs="?", help="input file")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--content", help="process this text instead of / as fallback for a file")
    src.add_argument("--stdin", action="store_true", help="read the text to process from standard input")
    ap.add_argument("-o", "--output", help="write the result to this file (created if missing)")
    ap.add_argument("-c", "--count", action="store_true", help="prefix lines by the number of occurrences")
    ap.add_argument("-d", "--repeated", action="store_true", help="only print lines that occur more than once")
    ap.add_argument("-u", "--unique", action="store_true", help="reserved; cannot be combined with --repeated")
    ap.add_argument("-i", "--ignore-case", action="store_true", help="ignore differences in case when comparing")
    ap.add_argument("--log-level", type=str.upper, default=default_level(), choices=LOG_LEVELS,
                    help="logging level (default: $ZUNIQ_LOG_LEVEL or WARNING)")
    ap.add_argument("--quiet", action="store_true", help="don't echo the result to stdout")
    return ap


def options_from_args(args: argparse.Namespace) -> UniqOptions:
    content = sys.stdin.read() if args.stdin else args.content
    return UniqOptions(
        file_path=args.input,
        content=content,
        output_path=args.output,
        count=args.count,
        repeated=args.repeated,
        unique=args.unique,
        ignore_case=args.ignore_case,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse args, run, print. Returns the process exit code
    (0 ok, 1 input/output error; argparse exits with 2 on usage errors).
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        result = run_uniq(options_from_args(args))
    except ZuniqError as e:
        log.error("%s", e)
        return 1

    if not args.quiet:
        sys.stdout.write(result.out)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
