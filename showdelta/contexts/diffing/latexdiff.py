"""
latexdiff driver.

Annotates the "to" snapshot in place: every selected .tex file is replaced by
the latexdiff of its "from" counterpart against it, and the main source gets
the latexdiff preamble so the markup compiles.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from showdelta.config import LATEXDIFF_OPTIONS, PREAMBLE_FILTER, PREAMBLE_SENTINEL
from showdelta.contexts.diffing.logger import (
    _log_debug,
    _log_info,
    log_diff_summary,
    log_sources_found,
)
from showdelta.exceptions import MissingMainSourceError
from showdelta.utils.commands import run_tool
from showdelta.utils.prompts import confirm


@dataclass
class LatexDiff:
    """
    A configured latexdiff executable.

    Attributes:
        executable: Program name or path
        options: Options passed before the file arguments on every call
        preamble_sentinel: Marker latexdiff writes into its preamble block
        preamble_filter: Lines of --show-preamble output containing this are dropped
    """

    executable: str = "latexdiff"
    options: List[str] = field(default_factory=lambda: list(LATEXDIFF_OPTIONS))
    preamble_sentinel: str = PREAMBLE_SENTINEL
    preamble_filter: str = PREAMBLE_FILTER

    @classmethod
    def from_config(cls, config) -> "LatexDiff":
        """Build from the `latexdiff` section of a showdelta config."""
        section = config.latexdiff
        return cls(
            executable=section.executable,
            options=list(section.options),
            preamble_sentinel=section.preamble_sentinel,
            preamble_filter=section.preamble_filter,
        )

    def command(self, *args) -> List[str]:
        return [self.executable, *self.options, *[str(arg) for arg in args]]

    def diff(self, old: Path, new: Path, cwd: Optional[Path] = None) -> bytes:
        """Annotated LaTeX showing the changes from old to new."""
        return run_tool(self.command(old, new), cwd=cwd, text=False).stdout

    def show_preamble(self) -> str:
        """Preamble commands latexdiff expects, without its introductory comment."""
        output = run_tool(self.command("--show-preamble")).stdout
        lines = output.splitlines(keepends=True)
        return "".join(line for line in lines if self.preamble_filter not in line)


def find_sources(snapshot: Path, pattern: str = "*.tex") -> List[str]:
    """
    Recursively list LaTeX sources under snapshot.

    Returns:
        POSIX paths relative to snapshot, sorted
    """
    snapshot = Path(snapshot)
    return sorted(
        path.relative_to(snapshot).as_posix()
        for path in snapshot.rglob(pattern)
        if path.is_file()
    )


def diff_file(latexdiff: LatexDiff, from_dir: Path, to_dir: Path, source: str) -> Path:
    """
    Replace to_dir/source with its latexdiff against from_dir/source.

    The new revision is kept aside as `<source>.tmp`.
    """
    target = Path(to_dir) / source
    moved = target.with_name(target.name + ".tmp")
    target.rename(moved)

    annotated = latexdiff.diff(Path(from_dir) / source, moved, cwd=to_dir)
    target.write_bytes(annotated)
    return target


def diff_sources(
    latexdiff: LatexDiff,
    from_dir: Path,
    to_dir: Path,
    pattern: str = "*.tex",
    assume_yes: bool = False,
    ask: Optional[Callable[[str], str]] = None,
) -> List[str]:
    """
    Annotate the sources of to_dir one by one, asking the operator first.

    Declined files keep the "to" revision's content unchanged. Files are
    processed sequentially; a latexdiff failure aborts the loop.

    Args:
        latexdiff: Configured latexdiff
        from_dir: Snapshot of the "from" revision
        to_dir: Snapshot of the "to" revision, modified in place
        pattern: Glob selecting LaTeX sources
        assume_yes: Include every file without prompting
        ask: Function reading one operator answer (default: builtin input)

    Returns:
        Relative paths of the annotated files
    """
    sources = find_sources(to_dir, pattern)
    log_sources_found(sources)

    included = []
    skipped = []
    for source in sources:
        if assume_yes or confirm(f"Include {source} in the diff?", ask=ask):
            diff_file(latexdiff, from_dir, to_dir, source)
            included.append(source)
        else:
            skipped.append(source)

    log_diff_summary(included, skipped)
    return included


def patch_preamble(main_source: Path, latexdiff: LatexDiff) -> bool:
    """
    Prepend the latexdiff preamble to main_source unless it is already there.

    Args:
        main_source: Main .tex file of the document
        latexdiff: Configured latexdiff

    Returns:
        True if the preamble was added, False if the sentinel was already present

    Raises:
        MissingMainSourceError: If main_source does not exist
    """
    main_source = Path(main_source)
    if not main_source.is_file():
        raise MissingMainSourceError(main_source)

    content = main_source.read_bytes()
    if latexdiff.preamble_sentinel.encode("utf-8") in content:
        _log_debug(f"Preamble already present in {main_source.name}")
        return False

    preamble = latexdiff.show_preamble()
    main_source.write_bytes(preamble.encode("utf-8") + content)
    _log_info(f"Added latexdiff preamble to {main_source.name}")
    return True
