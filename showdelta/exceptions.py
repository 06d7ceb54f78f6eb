"""Exceptions raised by the showdelta pipeline."""

from pathlib import Path
from typing import List, Optional


class ShowDeltaError(Exception):
    """Base class for errors that abort a delta run."""


class RepositoryNotFoundError(ShowDeltaError):
    """Raised when no supported version-control repository manages the directory."""

    def __init__(self, start: Path):
        self.start = start
        super().__init__(f"No git or Mercurial repository found at or above: {start}")


class TargetInferenceError(ShowDeltaError):
    """
    Raised when the build target cannot be inferred from the Makefile.

    Attributes:
        message: Error description
        makefile: Path to the Makefile that was inspected
    """

    def __init__(self, message: str, makefile: Optional[Path] = None):
        self.message = message
        self.makefile = makefile

        parts = [message]
        if makefile is not None:
            parts.append(f"Makefile: {makefile}")

        super().__init__("\n".join(parts))


class ExternalToolError(ShowDeltaError):
    """
    Raised when an external program (git, hg, latexdiff) exits non-zero.

    Attributes:
        command: The argument vector that was executed
        returncode: Exit status of the program
        stderr: Captured standard error, if any
    """

    def __init__(self, command: List[str], returncode: int, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr or ""

        parts = [f"Command failed with exit status {returncode}: {' '.join(self.command)}"]

        if self.stderr.strip():
            # Keep the tail, that is where tools put the actual complaint
            tail = self.stderr.strip().splitlines()[-10:]
            parts.append("\n".join(tail))

        super().__init__("\n".join(parts))


class MissingMainSourceError(ShowDeltaError):
    """Raised when the main .tex file derived from the target is not in the snapshot."""

    def __init__(self, main_source: Path):
        self.main_source = main_source
        super().__init__(f"Main tex file not found in snapshot: {main_source}")


class MissingArtifactError(ShowDeltaError):
    """Raised when the build did not leave the target file behind."""

    def __init__(self, artifact: Path):
        self.artifact = artifact
        super().__init__(f"Failed to retrieve target compilation output: {artifact}")


class SnapshotExtractionError(ShowDeltaError):
    """Raised when an exported revision archive cannot be unpacked."""

    def __init__(self, revision: str, destination: Path, reason: str):
        self.revision = revision
        self.destination = destination
        super().__init__(f"Cannot extract revision '{revision}' into {destination}: {reason}")


class OutputWriteError(ShowDeltaError):
    """Raised when the delta document cannot be written to its destination."""

    def __init__(self, output: Path, reason: str):
        self.output = output
        super().__init__(f"Cannot write output {output}: {reason}")
