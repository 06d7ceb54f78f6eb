"""
VCS context logger.

Provides logging interface for the VCS context with automatic [vcs] prefix.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[vcs]"


def _log_info(message: str) -> None:
    """Log info message with [vcs] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [vcs] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_backend_detected(name: str, root: Path) -> None:
    _log_debug(f"Using {name} repository at {root}")


def log_export(revision: str, destination: Path) -> None:
    _log_info(f"Exporting revision '{revision}'")
    _log_debug(f"  Into: {destination}")
