"""
Filesystem collaborator: the only place zuniq touches disk.

- path_exists:  existence probe (never raises).
- read_text:    read a whole file as UTF-8, newlines untranslated.
- write_output: create-if-missing, then overwrite the whole file.
"""

from __future__ import annotations

from pathlib import Path

from zuniq.errors import InvalidPath


def path_exists(p: Path | str | None) -> bool:
    if p is None or p == "":
        return False
    try:
        return Path(p).exists()
    except OSError:
        return False


def read_text(p: Path | str) -> str:
    """
    Read a UTF-8 text file verbatim ("\r\n" is NOT translated to "\n");
    undecodable bytes become U+FFFD.
    Raises InvalidPath if the path doesn't exist.
    """
    if not path_exists(p):
        raise InvalidPath(p)
    with Path(p).open("r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def write_output(p: Path | str, text: str) -> str:
    """
    Overwrite `p` with `text` (UTF-8, newlines untranslated).

    A missing file is created empty first; if that fails (e.g. the parent
    directory doesn't exist) InvalidPath is raised and nothing is written.
    Returns the string path written.
    """
    p = Path(p)
    if not p.exists():
        try:
            p.touch()
        except OSError as e:
            raise InvalidPath(p) from e
    with p.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    return str(p)
