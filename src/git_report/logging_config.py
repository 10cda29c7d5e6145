"""
Logging configuration for git-report.

Records go to stderr through rich, and optionally to a plain-text log file.
The level follows ``ReportConfig.verbosity``.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import InvalidConfigError

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Install the rich stderr handler (and a file handler if asked) on the root logger.

    Safe to call more than once: the CLI calls it with the command-line
    flags first, then again once the merged configuration is known.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or "verbose" (debug)
        log_file: Optional path that also receives every record, appended

    Returns:
        The git_report logger

    Raises:
        InvalidConfigError: If log_file cannot be opened for appending
    """
    level = _LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            raise InvalidConfigError("log_file", log_file, f"cannot open: {e.strerror or e}")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger("git_report")
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the git_report namespace.

    Args:
        name: Module name (e.g., 'git_report.history'); None gives the
              package logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("git_report")

    if not name.startswith("git_report"):
        name = f"git_report.{name}"

    return logging.getLogger(name)
