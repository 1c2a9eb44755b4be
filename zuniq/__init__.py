from .errors import ZuniqError, InvalidPath, ConflictingInputs
from .runner import run_uniq, uniq, UniqOptions, UniqResult

__version__ = "0.1.0"

__all__ = [
    "run_uniq",
    "uniq",
    "UniqOptions",
    "UniqResult",
    "ZuniqError",
    "InvalidPath",
    "ConflictingInputs",
]
