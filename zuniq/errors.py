"""
Error taxonomy for zuniq.

- InvalidPath:       a path that must exist does not, or an output path
                     cannot be created.
- ConflictingInputs: an existing file path and literal content were both
                     supplied.

Mode conflicts (repeated + unique) are NOT errors: the runner degrades to an
empty result and records a warning instead.
"""

from __future__ import annotations


class ZuniqError(Exception):
    """Base class for every error raised by zuniq."""


class InvalidPath(ZuniqError):
    def __init__(self, path, message: str | None = None):
        self.path = path
        super().__init__(message or f"Invalid file path '{path}'")


class ConflictingInputs(ZuniqError, ValueError):
    def __init__(self, message: str = "Provide either a file path or content, not both"):
        super().__init__(message)
