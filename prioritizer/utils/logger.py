"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    console_level: Optional[str] = "WARNING",
    extra_provenance: dict = None,
) -> Optional[Path]:
    """
    Configure loguru for a context with provenance tracking.

    Command output goes through typer, so the console sink writes to stderr and
    defaults to WARNING. The file sink (only when log_dir is given) captures
    everything at DEBUG and starts with a provenance header.

    Args:
        context_name: Context identifier (e.g., "prioritize")
        log_dir: Directory for the log file, or None for no file sink
        console_level: Minimum level for the stderr sink, or None to disable it
        extra_provenance: Additional key-value pairs for provenance header

    Returns:
        Path to log file, or None if no file sink was configured

    Example:
        from prioritizer.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="prioritize",
            log_dir=Path("outs/logs"),
            extra_provenance={"Handler key": "prioritize"},
        )
    """
    # Remove default logger (and sinks from earlier invocations in this process)
    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    if console_level:
        logger.add(
            sys.stderr,
            format="<level>{level: <7}</level> | <level>{message}</level>",
            level=console_level,
            colorize=True,
        )

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
