"""Unit tests for the build step and output collection."""

import signal
from pathlib import Path

import pytest

from showdelta.contexts.rendering import (
    collect_output,
    default_output_path,
    open_recovery_shell,
    run_build,
)
from showdelta.exceptions import MissingArtifactError, OutputWriteError


@pytest.mark.unit
def test_default_output_path():
    path = default_output_path(Path("/repo"), "v1", "abc1234", "pdf")

    assert path == Path("/repo/delta.v1-abc1234.pdf")


@pytest.mark.unit
def test_default_output_path_without_extension():
    path = default_output_path(Path("/repo"), "3", "7", "")

    assert path == Path("/repo/delta.3-7")


@pytest.mark.unit
def test_collect_output_copies_bytes(tmp_path):
    build_dir = tmp_path / "B"
    (build_dir / "out").mkdir(parents=True)
    payload = bytes(range(256)) * 4
    (build_dir / "out" / "paper.pdf").write_bytes(payload)

    destination = collect_output(build_dir, "out/paper.pdf", tmp_path / "delta.pdf")

    assert destination == tmp_path / "delta.pdf"
    assert destination.read_bytes() == payload


@pytest.mark.unit
def test_collect_output_missing_artifact_writes_nothing(tmp_path):
    build_dir = tmp_path / "B"
    build_dir.mkdir()

    with pytest.raises(MissingArtifactError):
        collect_output(build_dir, "paper.pdf", tmp_path / "delta.pdf")

    assert not (tmp_path / "delta.pdf").exists()


@pytest.mark.unit
def test_run_build_success(tmp_path):
    result = run_build("echo built > paper.pdf", tmp_path, shell="false")

    assert result.success
    assert result.returncode == 0
    assert not result.recovered
    assert (tmp_path / "paper.pdf").read_text() == "built\n"


@pytest.mark.unit
def test_run_build_failure_opens_recovery_shell(tmp_path):
    # The "shell" drops a marker in its working directory and fails; its
    # status must not matter.
    shell = tmp_path / "fake-shell"
    shell.write_text("#!/bin/sh\ntouch recovered\nexit 7\n")
    shell.chmod(0o755)
    build_dir = tmp_path / "B"
    build_dir.mkdir()

    result = run_build("exit 3", build_dir, shell=str(shell))

    assert not result.success
    assert result.returncode == 3
    assert result.recovered
    assert (build_dir / "recovered").exists()


@pytest.mark.unit
def test_recovery_shell_missing_is_not_fatal(tmp_path):
    open_recovery_shell(tmp_path, shell=str(tmp_path / "no-such-shell"))


@pytest.mark.unit
def test_collect_output_into_directory(tmp_path):
    """An existing directory as output receives the artifact under its own name."""
    build_dir = tmp_path / "B"
    (build_dir / "out").mkdir(parents=True)
    (build_dir / "out" / "paper.pdf").write_bytes(b"%PDF-1.5\n")
    reviews = tmp_path / "reviews"
    reviews.mkdir()

    destination = collect_output(build_dir, "out/paper.pdf", reviews)

    assert destination == reviews / "paper.pdf"
    assert destination.read_bytes() == b"%PDF-1.5\n"


@pytest.mark.unit
def test_collect_output_unwritable_destination(tmp_path):
    build_dir = tmp_path / "B"
    build_dir.mkdir()
    (build_dir / "paper.pdf").write_bytes(b"%PDF-1.5\n")
    output = tmp_path / "missing" / "delta.pdf"

    with pytest.raises(OutputWriteError) as excinfo:
        collect_output(build_dir, "paper.pdf", output)

    assert excinfo.value.output == output
    assert not output.exists()


@pytest.mark.unit
def test_interrupt_inside_recovery_shell_is_not_fatal(tmp_path):
    """Ctrl-C at the shell prompt also reaches showdelta; the run must go on."""
    shell = tmp_path / "fake-shell"
    shell.write_text("#!/bin/sh\nkill -INT $PPID\ntouch recovered\n")
    shell.chmod(0o755)
    build_dir = tmp_path / "B"
    build_dir.mkdir()
    handler = signal.getsignal(signal.SIGINT)

    result = run_build("exit 3", build_dir, shell=str(shell))

    assert result.recovered
    assert (build_dir / "recovered").exists()
    assert signal.getsignal(signal.SIGINT) is handler
