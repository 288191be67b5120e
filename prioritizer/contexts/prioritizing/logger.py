"""
Prioritizing context logger.

Provides logging interface for the prioritizing context with automatic
[prioritize] prefix. All prioritizing modules should import from this module,
not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from prioritizer.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[prioritize]"


def setup_prioritizing_logger(
    log_dir: Optional[Path],
    console_level: Optional[str] = "WARNING",
    handler_key: Optional[str] = None,
) -> Optional[Path]:
    """
    Setup logger for the prioritizing context.

    Args:
        log_dir: Directory for the log file, or None to skip the file sink
        console_level: Minimum level printed to stderr, or None for no console sink
        handler_key: Event handler key, recorded in the provenance header

    Returns:
        Path to log file, or None
    """
    return _setup_logger(
        context_name="prioritize",
        log_dir=log_dir,
        console_level=console_level,
        extra_provenance={"Handler key": handler_key} if handler_key else None,
    )


# Wrapper functions with automatic [prioritize] prefix


def _log_info(message: str) -> None:
    """Log info message with [prioritize] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [prioritize] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
