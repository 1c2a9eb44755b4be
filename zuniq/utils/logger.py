import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = "ZUNIQ_LOG_LEVEL"


def default_level() -> str:
    """Level from $ZUNIQ_LOG_LEVEL, falling back to WARNING."""
    return os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()


def configure_logging(level: str | int | None = None) -> None:
    """
    Centralized logging config for the command-line app.
    Library code only asks for loggers; handlers are installed here.
    """
    logging.basicConfig(
        level=level if level is not None else default_level(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],  # stdout carries the result
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger instance for the given module/class."""
    return logging.getLogger(name)
