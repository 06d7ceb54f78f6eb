"""
Rendering context logger.

Provides logging interface for rendering context with automatic [build] prefix.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[build]"


def _log_info(message: str) -> None:
    """Log info message with [build] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [build] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [build] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [build] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_build_start(command: str, working_dir: Path) -> None:
    """Log start of the build with context."""
    _log_info(f"Running build command: {command}")
    _log_debug(f"  In: {working_dir}")


def log_build_result(
    result,  # BuildResult
    elapsed_time: float,
) -> None:
    """
    Log the outcome of the build.

    Args:
        result: BuildResult from run_build()
        elapsed_time: Time taken by the build command (excluding the recovery shell)
    """
    if result.success:
        _log_success(f"Build succeeded ({elapsed_time:.2f}s)")
    else:
        _log_error(f"Build failed with exit status {result.returncode} ({elapsed_time:.2f}s)")
