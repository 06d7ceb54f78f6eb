"""
Diffing context logger.

Provides logging interface for the diffing context with automatic [diff] prefix.
"""

from typing import List

from loguru import logger

CONTEXT_PREFIX = "[diff]"


def _log_info(message: str) -> None:
    """Log info message with [diff] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [diff] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [diff] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_sources_found(sources: List[str]) -> None:
    _log_info(f"Found {len(sources)} LaTeX source(s)")
    for source in sources:
        _log_debug(f"  {source}")


def log_diff_summary(included: List[str], skipped: List[str]) -> None:
    """Log which sources were annotated and which kept their new content."""
    _log_info(f"Annotated {len(included)} file(s), skipped {len(skipped)}")
    for source in skipped:
        _log_debug(f"  Skipped: {source}")
