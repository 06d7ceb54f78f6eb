"""Shared fixtures: stand-ins for latexdiff and scratch git repositories."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest
from loguru import logger

from showdelta.contexts.diffing import LatexDiff

GIT_AVAILABLE = shutil.which("git") is not None
skip_if_no_git = pytest.mark.skipif(not GIT_AVAILABLE, reason="git not installed")

# Mimics the parts of latexdiff the pipeline relies on: --show-preamble
# prints an introductory comment plus the sentinel block, and a diff prints a
# marker naming the old file followed by the new file's content.
FAKE_LATEXDIFF = r"""#!/bin/sh
old=""
new=""
for arg in "$@"; do
    case "$arg" in
        --show-preamble)
            cat <<'PREAMBLE'
% Preamble commands:
%DIF PREAMBLE EXTENSION ADDED BY LATEXDIFF
\providecommand{\DIFadd}[1]{{\protect\color{blue}#1}}
%DIF END PREAMBLE EXTENSION ADDED BY LATEXDIFF
PREAMBLE
            exit 0
            ;;
        -*)
            ;;
        *)
            old="$new"
            new="$arg"
            ;;
    esac
done
if [ ! -f "$old" ]; then
    echo "latexdiff: cannot read $old" >&2
    exit 2
fi
printf '%%DIFF %s\n' "$(basename "$old")"
cat "$new"
"""


@pytest.fixture
def fake_latexdiff_path(tmp_path) -> Path:
    script = tmp_path / "bin" / "latexdiff"
    script.parent.mkdir()
    script.write_text(FAKE_LATEXDIFF)
    script.chmod(0o755)
    return script


@pytest.fixture
def fake_latexdiff(fake_latexdiff_path) -> LatexDiff:
    return LatexDiff(executable=str(fake_latexdiff_path))


def git(repo: Path, *args: str) -> str:
    """Run git in repo with a throwaway identity."""
    result = subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Keep the developer's environment and enclosing repositories out of the tests."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    for name in ("SHOWDELTA_BUILD_CMD", "SHOWDELTA_TMPDIR", "SHOWDELTA_LOGS_PATH", "LATEXDIFF"):
        monkeypatch.delenv(name, raising=False)
    return os.environ


@pytest.fixture
def paper_repo(tmp_path, isolated_env) -> Path:
    """
    A git repository with two revisions of a small paper.

    Revision v1 is tagged; HEAD changes both paper.tex and section.tex.
    """
    repo = tmp_path / "paper"
    repo.mkdir()
    git(repo, "init", "-q")

    (repo / "Makefile").write_text("TARGET=paper\n\nall:\n\tpdflatex $(TARGET).tex\n")
    (repo / "paper.tex").write_text(
        "\\documentclass{article}\n\\begin{document}\nOld intro.\n\\input{sections/method}\n\\end{document}\n"
    )
    (repo / "sections").mkdir()
    (repo / "sections" / "method.tex").write_text("Old method.\n")
    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", "First draft")
    git(repo, "tag", "v1")

    (repo / "paper.tex").write_text(
        "\\documentclass{article}\n\\begin{document}\nNew intro.\n\\input{sections/method}\n\\end{document}\n"
    )
    (repo / "sections" / "method.tex").write_text("New method.\n")
    git(repo, "commit", "-q", "-am", "Second draft")

    return repo


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks installed by a test so they do not outlive its captured streams."""
    yield
    logger.remove()
