"""
Rich-based logging system with a plain-text audit log
"""
import sys
import logging
from typing import Optional
from pathlib import Path

from rich.logging import RichHandler
from rich.console import Console
from rich.traceback import install as install_traceback

from .constants import AUDIT_LOG_FORMAT, AUDIT_DATE_FORMAT


# Global console instances
_stdout_console = Console(file=sys.stdout)
_stderr_console = Console(file=sys.stderr)

# Locals may hold credentials, keep them out of tracebacks
install_traceback(show_locals=False, width=120)


def audit_formatter() -> logging.Formatter:
    """Formatter producing `<YYYY-MM-DD HH:MM:SS> <LEVEL>: <message>` lines"""
    return logging.Formatter(AUDIT_LOG_FORMAT, datefmt=AUDIT_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    audit_file: Optional[Path] = None,
    rich_tracebacks: bool = True,
) -> None:
    """
    Setup Rich logging system.

    Operator output goes to stderr through Rich. When `audit_file` is given,
    every record is also appended to it in the audit line format.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        audit_file: Optional append-only audit log path
        rich_tracebacks: Enable rich tracebacks
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Configure root logger
    root_logger = logging.getLogger()
    # The audit file always records INFO, whatever the console shows
    root_logger.setLevel(min(log_level, logging.INFO))

    # Remove existing handlers, releasing audit files from a previous setup
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root_logger.handlers.clear()

    # Create Rich handler for stderr
    rich_handler = RichHandler(
        console=_stderr_console,
        show_time=True,
        show_path=False,
        rich_tracebacks=rich_tracebacks,
        markup=False,
        show_level=True,
    )
    rich_handler.setLevel(log_level)
    root_logger.addHandler(rich_handler)

    # Add audit file handler if specified
    if audit_file:
        audit_file = Path(audit_file).expanduser()
        try:
            audit_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(audit_file, mode="a", encoding="utf-8")
        except OSError as e:
            root_logger.warning("Audit log %s unavailable: %s", audit_file, e)
            return
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(audit_formatter())
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def get_stdout_console() -> Console:
    """Get stdout console for user-facing output"""
    return _stdout_console


def get_stderr_console() -> Console:
    """Get stderr console for errors and logs"""
    return _stderr_console
