"""Scoped temporary workspace holding the two revision snapshots."""

import shutil
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from loguru import logger


@dataclass(frozen=True)
class Workspace:
    """
    Temporary directory with one subtree per revision.

    Attributes:
        root: The temporary directory itself
        from_dir: Snapshot of the "from" revision (A)
        to_dir: Snapshot of the "to" revision (B), where the build happens
    """

    root: Path

    @property
    def from_dir(self) -> Path:
        return self.root / "A"

    @property
    def to_dir(self) -> Path:
        return self.root / "B"


@contextmanager
def temporary_workspace(
    prefix: str = "showdelta.", dir: Optional[Union[str, Path]] = None
) -> Iterator[Workspace]:
    """
    Create a workspace and remove it on every exit path.

    The directory is deleted on normal return, on exceptions, on SystemExit
    and on KeyboardInterrupt alike.

    Args:
        prefix: Name prefix of the temporary directory
        dir: Parent directory (default: the system temporary directory)

    Yields:
        Workspace with empty A/ and B/ subdirectories
    """
    root = Path(tempfile.mkdtemp(prefix=prefix, dir=dir))
    workspace = Workspace(root=root)
    logger.debug(f"Created workspace: {root}")

    try:
        workspace.from_dir.mkdir()
        workspace.to_dir.mkdir()
        yield workspace
    finally:
        shutil.rmtree(root, ignore_errors=True)
        logger.debug(f"Removed workspace: {root}")
