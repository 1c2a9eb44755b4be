from .io import path_exists, read_text, write_output
from .resolver import ResolvedInput, resolve_input

__all__ = ["path_exists", "read_text", "write_output", "ResolvedInput", "resolve_input"]
