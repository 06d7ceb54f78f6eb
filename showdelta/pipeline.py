"""
Delta pipeline.

Single pass over the stages of a delta run:

    detect repository -> resolve target -> export snapshots A and B
    -> latexdiff the selected sources -> inject preamble -> build -> collect

All intermediate files live in a temporary workspace that is removed when the
run ends, however it ends.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger
from omegaconf import DictConfig

from showdelta.config import load_config
from showdelta.contexts.diffing import LatexDiff, diff_sources, patch_preamble
from showdelta.contexts.rendering import (
    BuildResult,
    collect_output,
    default_output_path,
    run_build,
)
from showdelta.contexts.targeting import Target, infer_target
from showdelta.contexts.vcs import detect_backend
from showdelta.exceptions import MissingArtifactError
from showdelta.utils.workspace import temporary_workspace


@dataclass
class DeltaRequest:
    """
    What the operator asked for.

    Attributes:
        rev_from: The "from" revision (required)
        rev_to: The "to" revision (None: the backend's current tip)
        build_cmd: Build command (None: from config, "make" by default)
        target: Target file relative to the repository root (None: inferred)
        output: Final output path (None: derived from the revisions)
        args: Positional arguments as given
        assume_yes: Include every source without prompting
    """

    rev_from: str
    rev_to: Optional[str] = None
    build_cmd: Optional[str] = None
    target: Optional[str] = None
    output: Optional[Path] = None
    args: List[str] = field(default_factory=list)
    assume_yes: bool = False


@dataclass
class DeltaResult:
    """
    Outcome of a delta run.

    Attributes:
        success: Whether the output file was written
        target: Target descriptor used for the build
        rev_to: Resolved "to" revision
        output_path: Where the delta document was written (None if not)
        included: Sources annotated by latexdiff
        build: Result of the build step
        errors: Problems that kept the run from producing output
    """

    success: bool
    target: Target
    rev_to: str
    output_path: Optional[Path] = None
    included: List[str] = field(default_factory=list)
    build: Optional[BuildResult] = None
    errors: List[str] = field(default_factory=list)


def resolve_target(request: DeltaRequest, repo_root: Path, config: DictConfig) -> Target:
    """Target from the request, or inferred from the repository's Makefile."""
    name = request.target
    if not name:
        name = infer_target(
            repo_root,
            makefile=config.target.makefile,
            variable=config.target.variable,
            default_extension=config.target.default_extension,
        )
        logger.info(f"Assuming target: {name}")
    return Target.from_name(name)


def produce_delta(
    request: DeltaRequest,
    config: Optional[DictConfig] = None,
    ask: Optional[Callable[[str], str]] = None,
    start: Optional[Path] = None,
) -> DeltaResult:
    """
    Produce the delta document for request.

    Args:
        request: Revisions and overrides from the command line
        config: Settings (default: loaded for the detected repository)
        ask: Function reading operator answers for per-file prompts
        start: Directory to look for the repository from (default: cwd)

    Returns:
        DeltaResult; success is False when the build left no target behind

    Raises:
        ShowDeltaError: On any non-recoverable failure (no repository, target
            inference, git/hg/latexdiff errors, missing main source)
    """
    backend = detect_backend(start)
    if config is None:
        config = load_config(backend.root)

    rev_to = request.rev_to or backend.current_revision
    build_cmd = request.build_cmd or config.build_cmd

    target = resolve_target(request, backend.root, config)
    logger.info(f"Main tex file: {target.main_source}")
    logger.info(f"Computing delta from revision '{request.rev_from}' to revision '{rev_to}'.")

    latexdiff = LatexDiff.from_config(config)
    result = DeltaResult(success=False, target=target, rev_to=rev_to)

    with temporary_workspace(prefix=config.workspace.prefix, dir=config.workspace.dir) as workspace:
        backend.export(request.rev_from, workspace.from_dir)
        backend.export(rev_to, workspace.to_dir)

        output = request.output
        if output is None:
            short_id = backend.short_id(rev_to, workspace.to_dir)
            output = default_output_path(backend.root, request.rev_from, short_id, target.extension)

        result.included = diff_sources(
            latexdiff,
            workspace.from_dir,
            workspace.to_dir,
            pattern=config.sources.pattern,
            assume_yes=request.assume_yes,
            ask=ask,
        )
        patch_preamble(workspace.to_dir / target.main_source, latexdiff)

        result.build = run_build(build_cmd, workspace.to_dir, shell=config.shell)

        try:
            result.output_path = collect_output(workspace.to_dir, target.name, output)
        except MissingArtifactError as e:
            logger.error("Failed to retrieve target compilation output.")
            result.errors.append(str(e))
            return result

    result.success = True
    logger.success(f"Delta from '{request.rev_from}' to '{rev_to}' written")
    return result
