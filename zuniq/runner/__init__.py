from .core import run_uniq, uniq, MODE_CONFLICT_WARNING
from .options import UniqOptions, UniqResult

__all__ = ["run_uniq", "uniq", "UniqOptions", "UniqResult", "MODE_CONFLICT_WARNING"]
