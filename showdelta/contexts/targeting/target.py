"""
Build target discovery.

The target is the file the document's build command produces, relative to
the repository root (e.g. "paper.pdf"). When not given on the command line it
is read from a `TARGET=` assignment in the Makefile.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from showdelta.exceptions import TargetInferenceError


@dataclass(frozen=True)
class Target:
    """
    Parsed target name.

    Attributes:
        name: Target path relative to the repository root (e.g. "paper.pdf")
        extension: Text after the last dot, empty if there is none
        main_source: Main LaTeX file built into the target (e.g. "paper.tex")
    """

    name: str
    extension: str
    main_source: str

    @classmethod
    def from_name(cls, name: str) -> "Target":
        stem, dot, extension = name.rpartition(".")
        if not dot:
            stem, extension = name, ""
        return cls(name=name, extension=extension, main_source=f"{stem}.tex")


def infer_target(
    repo_root: Path,
    makefile: str = "Makefile",
    variable: str = "TARGET",
    default_extension: str = "pdf",
) -> str:
    """
    Read the target name from the first `VARIABLE=` line of the Makefile.

    The extension is whatever follows the last dot of the declared value, or
    default_extension when the value has no dot, and it is always appended:
    `TARGET=paper` gives "paper.pdf" and `TARGET=paper.tex` gives
    "paper.tex.tex".

    Args:
        repo_root: Directory holding the Makefile
        makefile: Makefile name
        variable: Variable holding the target basename
        default_extension: Extension used when the value has none

    Returns:
        Target file name

    Raises:
        TargetInferenceError: If the Makefile is missing, or the variable is
            undeclared or empty
    """
    makefile_path = Path(repo_root) / makefile
    if not makefile_path.is_file():
        raise TargetInferenceError("No makefile found", makefile_path)

    pattern = re.compile(rf"^{re.escape(variable)}=(.*)$")
    value = None
    with open(makefile_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            match = pattern.match(line.rstrip("\r\n"))
            if match:
                value = match.group(1).strip()
                break

    if value is None:
        raise TargetInferenceError(f"No variable {variable}= found in makefile", makefile_path)
    if not value:
        raise TargetInferenceError(f"Empty {variable}= found.", makefile_path)

    _, dot, extension = value.rpartition(".")
    if not dot:
        extension = default_extension

    target = f"{value}.{extension}"
    logger.debug(f"Inferred target {target} from {makefile_path}")
    return target
