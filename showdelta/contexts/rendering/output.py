"""Output naming and collection."""

import shutil
from pathlib import Path

from showdelta.contexts.rendering.logger import _log_debug
from showdelta.exceptions import MissingArtifactError, OutputWriteError


def default_output_path(repo_root: Path, rev_from: str, short_id: str, extension: str) -> Path:
    """
    Default name of the delta document: <root>/delta.<R1>-<R2 short id>.<ext>.

    The extension part is dropped when the target has none.
    """
    name = f"delta.{rev_from}-{short_id}"
    if extension:
        name = f"{name}.{extension}"
    return Path(repo_root) / name


def collect_output(to_dir: Path, target: str, output: Path) -> Path:
    """
    Copy the built target out of the snapshot.

    Like cp, an existing directory as output receives the artifact under its
    own name.

    Args:
        to_dir: Snapshot the build ran in
        target: Target path relative to to_dir
        output: Destination file or directory

    Returns:
        The path written

    Raises:
        MissingArtifactError: If the build did not produce target; nothing is written
        OutputWriteError: If the destination cannot be written
    """
    artifact = Path(to_dir) / target
    if not artifact.is_file():
        raise MissingArtifactError(artifact)

    output = Path(output)
    if output.is_dir():
        output = output / artifact.name

    _log_debug(f"Copying {artifact} -> {output}")
    try:
        shutil.copyfile(artifact, output)
    except OSError as e:
        raise OutputWriteError(output, e.strerror or str(e)) from e
    return output
