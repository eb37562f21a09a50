"""Logging configuration using loguru.

Library modules log through the shared ``loguru`` logger. The package disables
its own records on import; :func:`configure_logging` turns them back on.
"""

import sys

from loguru import logger


def format_record(_record: dict) -> str:
    """Human-readable format used for interactive runs."""
    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>\n"
        "{exception}"
    )


def configure_logging(*, json_logs: bool = False, log_level: str = "INFO") -> None:
    """Configure loguru for flatodt.

    Args:
        json_logs: If True, output logs as JSON lines (one record per line).
        log_level: Minimum log level to output.
    """
    # Remove default handler
    logger.remove()
    logger.enable("flatodt")

    # stdout may carry document output, so logs always go to stderr
    if json_logs:
        logger.add(
            sys.stderr,
            format="{message}",
            level=log_level.upper(),
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format=format_record,
            level=log_level.upper(),
            colorize=True,
        )


__all__ = ["configure_logging", "format_record", "logger"]
