"""
Version-control backends.

Both backends expose the same small capability: export a revision into a
directory and resolve a short identifier for naming the output. The backend
is chosen once, at startup, by detect_backend().
"""

import io
import tarfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from showdelta.contexts.vcs.logger import log_backend_detected, log_export
from showdelta.exceptions import (
    ExternalToolError,
    RepositoryNotFoundError,
    SnapshotExtractionError,
)
from showdelta.utils.commands import run_tool


class Backend(ABC):
    """
    A version-control client bound to one repository.

    Attributes:
        root: Repository root directory
    """

    name: str = ""
    current_revision: str = ""

    def __init__(self, root: Path):
        self.root = Path(root)

    @abstractmethod
    def export(self, revision: str, destination: Path) -> Path:
        """Materialize revision as a plain tree under destination (must exist)."""

    @abstractmethod
    def short_id(self, revision: str, snapshot: Path) -> str:
        """Short identifier of revision, as shown in the output file name."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={str(self.root)!r})"


class GitBackend(Backend):
    name = "git"
    current_revision = "HEAD"

    @classmethod
    def find_root(cls, start: Path) -> Optional[Path]:
        """Return the work tree root containing start, or None outside git."""
        start = Path(start)
        if not (start / ".git").exists():
            try:
                run_tool(["git", "rev-parse", "--git-dir"], cwd=start)
            except ExternalToolError:
                return None

        try:
            result = run_tool(["git", "rev-parse", "--show-toplevel"], cwd=start)
        except ExternalToolError:
            return None
        return Path(result.stdout.strip())

    def export(self, revision: str, destination: Path) -> Path:
        log_export(revision, destination)
        result = run_tool(
            ["git", "archive", "--format=tar", revision], cwd=self.root, text=False
        )
        # Absolute symlinks (e.g. a shared refs.bib) must survive extraction
        try:
            with tarfile.open(fileobj=io.BytesIO(result.stdout), mode="r:") as archive:
                archive.extractall(destination, filter="tar")
        except tarfile.TarError as e:
            raise SnapshotExtractionError(revision, destination, str(e)) from e
        return destination

    def short_id(self, revision: str, snapshot: Path) -> str:
        result = run_tool(["git", "rev-parse", "--short", revision], cwd=self.root)
        return result.stdout.strip()


class MercurialBackend(Backend):
    name = "hg"
    current_revision = "tip"

    @classmethod
    def find_root(cls, start: Path) -> Optional[Path]:
        """Return the repository root containing start, or None outside Mercurial."""
        try:
            result = run_tool(["hg", "root"], cwd=start)
        except ExternalToolError:
            return None
        return Path(result.stdout.strip())

    def export(self, revision: str, destination: Path) -> Path:
        log_export(revision, destination)
        run_tool(["hg", "clone", "-r", revision, str(self.root), str(destination)])
        return destination

    def short_id(self, revision: str, snapshot: Path) -> str:
        # The snapshot is a clone updated to revision, so its working
        # parent is the revision we want numbered
        result = run_tool(["hg", "id", "-n"], cwd=snapshot)
        return result.stdout.strip()


BACKENDS = [GitBackend, MercurialBackend]


def detect_backend(start: Optional[Path] = None) -> Backend:
    """
    Pick the backend managing start (default: current directory).

    git is preferred. Mercurial is used only when `hg root` confirms a
    repository, so a missing or unusable fallback is reported instead of
    failing later on the first export.

    Raises:
        RepositoryNotFoundError: If neither backend recognizes start
    """
    start = Path(start) if start is not None else Path.cwd()

    for backend_class in BACKENDS:
        root = backend_class.find_root(start)
        if root is not None:
            log_backend_detected(backend_class.name, root)
            return backend_class(root)

    raise RepositoryNotFoundError(start)
