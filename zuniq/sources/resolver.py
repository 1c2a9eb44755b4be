"""
Input resolution: turn (file_path, content) into the one raw text to process.

Decision table (path existence is probed once):

  path exists | content given | result
  ------------+---------------+-------------------------------------------
  yes         | yes           | ConflictingInputs
  no          | yes           | content, plus an "invalid path" warning
                                (only when a path was actually given)
  yes         | no            | the file's text
  no          | no            | InvalidPath

`content=""` counts as given; only None means absent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from zuniq.errors import ConflictingInputs, InvalidPath
from .io import path_exists, read_text


@dataclass
class ResolvedInput:
    """Raw text plus where it came from."""
    text: str
    source: str                       # "file" | "content"
    warnings: List[str] = field(default_factory=list)


def invalid_path_warning(file_path) -> str:
    return f"Invalid file path '{file_path}'. Using provided content."


def resolve_input(file_path: Optional[Path | str], content: Optional[str]) -> ResolvedInput:
    """
    Apply the decision table above.

    Raises:
      ConflictingInputs : an existing file AND content were supplied
      InvalidPath       : no content and the path is missing/absent
    """
    has_path = file_path is not None and str(file_path) != ""
    exists = has_path and path_exists(file_path)

    if content is not None:
        if exists:
            raise ConflictingInputs()
        warnings = [invalid_path_warning(file_path)] if has_path else []
        return ResolvedInput(text=content, source="content", warnings=warnings)

    if not has_path:
        raise InvalidPath(file_path, "No input: provide a file path or content")
    return ResolvedInput(text=read_text(file_path), source="file")
