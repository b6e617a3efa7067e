"""Logging configuration for gradle-poet."""

import logging
import sys

import click

# Package-level logger
LOGGER_NAME = "gradle_poet"

# Color mapping for log levels
LEVEL_COLORS = {
    "DEBUG": "blue",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}


class ColoredFormatter(logging.Formatter):
    """Formatter that highlights errors using Click styles."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors.

        Args:
            record: Log record to format

        Returns:
            Formatted message, styled for ERROR and above
        """
        message = super().format(record)

        if record.levelno >= logging.ERROR:
            level_color = LEVEL_COLORS.get(record.levelname, "white")
            return click.style(message, fg=level_color, bold=True)
        return message


def _resolve_level(verbose: bool, quiet: bool, log_level: str | None) -> int:
    # explicit > verbose > quiet > INFO
    if log_level:
        return getattr(logging, log_level.upper())
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False, log_level: str | None = None) -> None:
    """Configure logging for gradle-poet.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Show only WARNING and above
        log_level: Explicit log level (overrides verbose/quiet)
    """
    level = _resolve_level(verbose, quiet, log_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    # stdout carries rendered scripts (render, --dry-run)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(fmt="%(levelname)s: %(message)s"))

    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance under the gradle_poet namespace
    """
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
