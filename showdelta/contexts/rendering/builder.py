"""
Document build invocation.

Runs the configured build command (make by default) in the annotated
snapshot. A failed build is the one recoverable error of a delta run: the
operator gets a shell in the snapshot to fix things up and rebuild by hand.
"""

import signal
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from showdelta.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    log_build_result,
    log_build_start,
)


@dataclass
class BuildResult:
    """
    Result of the build step.

    Attributes:
        success: Whether the build command exited zero
        returncode: Exit status of the build command
        recovered: Whether the recovery shell was opened
    """

    success: bool
    returncode: int
    recovered: bool = False


def _ignore_interrupt(signum, frame):
    pass


def open_recovery_shell(cwd: Path, shell: str = "bash") -> None:
    """
    Run an interactive shell in cwd and wait for the operator to leave it.

    The shell's exit status is ignored. SIGINT is swallowed while waiting,
    since Ctrl-C at the shell prompt reaches this process too. The shell
    itself starts with the default disposition (handlers reset on exec).
    """
    _log_debug(f"Starting recovery shell {shell} in {cwd}")
    previous_handler = signal.signal(signal.SIGINT, _ignore_interrupt)
    try:
        subprocess.run([shell], cwd=cwd)
    except FileNotFoundError:
        _log_error(f"Recovery shell not found: {shell}")
    finally:
        signal.signal(signal.SIGINT, previous_handler)


def run_build(command: str, cwd: Path, shell: str = "bash") -> BuildResult:
    """
    Run the build command through the system shell in cwd.

    Args:
        command: Build command line (e.g. "make" or "latexmk -pdf paper.tex")
        cwd: Directory to build in
        shell: Interactive shell offered when the build fails

    Returns:
        BuildResult; a failed build returns only after the recovery shell exits
    """
    log_build_start(command, cwd)

    start_time = time.time()
    process = subprocess.run(command, shell=True, cwd=cwd)
    elapsed_time = time.time() - start_time

    result = BuildResult(success=process.returncode == 0, returncode=process.returncode)
    log_build_result(result, elapsed_time)

    if not result.success:
        _log_error("Compiling the document failed. Exit temp shell when fixed.")
        open_recovery_shell(cwd, shell)
        result.recovered = True

    return result
