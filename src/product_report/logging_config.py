"""
Logging configuration for Product Report.

Records go to stderr through rich, and optionally to a plain-text log file.
Standard output is reserved for the report itself.
"""

import logging
from typing import Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

ROOT_LOGGER = "product_report"

LEVELS: Dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _file_handler(log_file: str) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(verbosity: Verbosity = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the product_report logger for one run.

    Args:
        verbosity: "quiet" (ERROR), "normal" (WARNING) or "verbose" (DEBUG)
        log_file: Optional file path; records are appended to it as well

    Returns:
        Configured logger instance for product_report

    Raises:
        ValueError: If verbosity is not a known level
    """
    try:
        level = LEVELS[verbosity]
    except KeyError:
        raise ValueError(f"Unknown verbosity: {verbosity!r}") from None

    verbose = verbosity == "verbose"
    handlers: List[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]
    if log_file:
        handlers.append(_file_handler(log_file))

    # force=True replaces handlers left by a previous run in the same process
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``product_report`` or a child logger namespaced under it."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
