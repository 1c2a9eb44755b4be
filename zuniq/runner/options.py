"""
Options bundle and result type for a zuniq call.

UniqOptions is validated at the boundary: unknown option names and
non-boolean flags are rejected before any file is touched.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Dict, List, Optional

BOOL_FLAGS = ("count", "repeated", "unique", "ignore_case")


@dataclass
class UniqOptions:
    file_path: Optional[Path | str] = None   # input file
    content: Optional[str] = None            # in-memory input
    output_path: Optional[Path | str] = None # sink (overwritten)
    count: bool = False                      # prefix lines with occurrence counts
    repeated: bool = False                   # only lines seen more than once
    unique: bool = False                     # reserved; exclusive with `repeated`
    ignore_case: bool = False                # case-folded comparison

    def __post_init__(self):
        for name in BOOL_FLAGS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(f"option '{name}' must be a bool, got {type(value).__name__}")
        if self.content is not None and not isinstance(self.content, str):
            raise TypeError(f"option 'content' must be a str, got {type(self.content).__name__}")

    @classmethod
    def from_dict(cls, opts: Dict) -> "UniqOptions":
        """
        Build options from a plain dict, rejecting names zuniq doesn't know.

        Example:
          UniqOptions.from_dict({"content": "a\na\n", "count": True})
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(opts) - known)
        if unknown:
            raise ValueError(f"Unknown option(s): {unknown}. Recognized: {sorted(known)}")
        return cls(**opts)

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass
class UniqResult:
    """Final text plus any advisory warnings raised along the way."""
    out: str
    warnings: List[str] = field(default_factory=list)
