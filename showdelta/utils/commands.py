"""External command execution."""

import subprocess
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from showdelta.exceptions import ExternalToolError


def run_tool(
    cmd: List[str],
    cwd: Optional[Union[str, Path]] = None,
    text: bool = True,
) -> subprocess.CompletedProcess:
    """
    Run an external program and capture its output.

    Args:
        cmd: Argument vector
        cwd: Working directory (default: current directory)
        text: Decode stdout/stderr as UTF-8 (False returns bytes)

    Returns:
        The completed process

    Raises:
        ExternalToolError: If the program cannot be started or exits non-zero
    """
    cmd = [str(part) for part in cmd]
    logger.debug(f"+ {' '.join(cmd)}")

    try:
        if text:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        else:
            result = subprocess.run(cmd, cwd=cwd, capture_output=True)
    except FileNotFoundError as e:
        raise ExternalToolError(cmd, 127, f"{cmd[0]}: command not found") from e

    if result.returncode != 0:
        stderr = result.stderr
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", errors="replace")
        raise ExternalToolError(cmd, result.returncode, stderr)

    return result
