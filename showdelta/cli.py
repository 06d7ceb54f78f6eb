"""
showdelta command line

Produce a document showing the LaTeX differences between two revisions of a
LaTeX document's repository. Additions are shown in blue, deletions in red.

Examples:\n

    showdelta v1.0                          # v1.0 -> current tip

    showdelta v1.0 --to submitted -o delta.pdf

    showdelta HEAD~3 --target build/paper.pdf --cmd "latexmk -pdf"
"""

import signal
import sys
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from typing_extensions import Annotated

from showdelta import __version__
from showdelta.config import default_settings
from showdelta.exceptions import ShowDeltaError
from showdelta.pipeline import DeltaRequest, produce_delta
from showdelta.utils.logger import setup_logger

EXIT_USAGE = 1
# Status typer reports for usage errors in standalone mode
EXIT_USAGE_TYPER = 2
EXIT_INTERRUPTED = 130
EXIT_TERMINATED = 143

app = typer.Typer(
    help="Render the LaTeX differences between two revisions of a document repository",
    add_completion=False,
)


def _terminate(signum, frame):
    raise SystemExit(EXIT_TERMINATED)


@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_extra_args": True,
    }
)
def showdelta(
    ctx: typer.Context,
    revision: Annotated[
        str,
        typer.Argument(metavar="REV", help="The 'from' revision", show_default=False),
    ],
    rev_to: Annotated[
        Optional[str],
        typer.Option(
            "--to",
            metavar="REV2",
            help="The 'to' revision [default: HEAD for git, tip for Mercurial]",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            metavar="FILE",
            help="Name of the final diff document [default: ./delta.REV1-REV2.pdf]",
            show_default=False,
        ),
    ] = None,
    target: Annotated[
        Optional[str],
        typer.Option(
            "--target",
            metavar="TGT",
            help="Output file produced by the build command, relative to the repository "
            "root [default: inferred from the TARGET variable of the Makefile]",
            show_default=False,
        ),
    ] = None,
    cmd: Annotated[
        Optional[str],
        typer.Option(
            "--cmd",
            "-c",
            metavar="CMD",
            help="Command to build the output [default: make]",
            show_default=False,
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Include every .tex file without asking"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show external commands and other details"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            envvar="SHOWDELTA_LOGS_PATH",
            help="Also write a detailed log to LOG_DIR/showdelta.log",
        ),
    ] = None,
):
    """
    Produce a document showing the LaTeX differences between revision REV and REV2.

    Every .tex file of REV2 is offered for annotation; answer "n" to keep a
    file as it is. If the build fails, a shell is opened in the build
    directory: fix things, rebuild, and exit the shell to continue.

    Examples:\n

        $ showdelta v1.0                          # Compare v1.0 with the current tip

        $ showdelta v1.0 --to v2.0 -o review.pdf  # Explicit revisions and output

        $ showdelta 42 -c "latexmk -pdf" -y       # Mercurial, custom build, no prompts
    """
    setup_logger(
        log_dir=log_dir,
        verbose=verbose,
        extra_provenance={
            "showdelta": __version__,
            "latexdiff": default_settings()["latexdiff"]["executable"],
        },
    )

    extra_args: List[str] = list(ctx.args)
    if extra_args:
        logger.warning(f"Ignoring extra arguments: {' '.join(extra_args)}")

    request = DeltaRequest(
        rev_from=revision,
        rev_to=rev_to,
        build_cmd=cmd,
        target=target,
        output=output,
        args=[revision, *extra_args],
        assume_yes=yes,
    )

    previous_handler = signal.signal(signal.SIGTERM, _terminate)
    try:
        result = produce_delta(request)
    except ShowDeltaError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        raise typer.Exit(code=EXIT_INTERRUPTED)
    finally:
        signal.signal(signal.SIGTERM, previous_handler)

    if not result.success:
        raise typer.Exit(code=1)

    typer.echo(f"Output written to: {result.output_path}")


def run(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line and return its exit status.

    Usage errors (unknown options, missing revision) exit with status 1.
    """
    command = typer.main.get_command(app)
    try:
        command.main(args=argv, prog_name="showdelta", standalone_mode=True)
    except SystemExit as e:
        status = e.code
    else:
        status = 0

    if status is None:
        return 0
    if not isinstance(status, int):
        return 1
    return EXIT_USAGE if status == EXIT_USAGE_TYPER else status


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
