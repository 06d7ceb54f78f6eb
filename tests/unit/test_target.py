"""Unit tests for build target discovery."""

import pytest

from showdelta.contexts.targeting import Target, infer_target
from showdelta.exceptions import TargetInferenceError


@pytest.mark.unit
@pytest.mark.parametrize(
    "declared, expected",
    [
        ("paper", "paper.pdf"),
        ("paper.tex", "paper.tex.tex"),
        ("paper.ps", "paper.ps.ps"),
    ],
)
def test_infer_target_extension(tmp_path, declared, expected):
    """Extension is appended from the value's own last dot, or pdf without one."""
    (tmp_path / "Makefile").write_text(f"# build\nTARGET={declared}\n")

    assert infer_target(tmp_path) == expected


@pytest.mark.unit
def test_infer_target_first_match_wins(tmp_path):
    (tmp_path / "Makefile").write_text("TARGET=first\nTARGET=second\n")

    assert infer_target(tmp_path) == "first.pdf"


@pytest.mark.unit
def test_infer_target_ignores_indented_and_spaced_assignments(tmp_path):
    """Only lines starting with exactly `TARGET=` count."""
    (tmp_path / "Makefile").write_text("  TARGET=indented\nTARGET = spaced\nTARGET=real\n")

    assert infer_target(tmp_path) == "real.pdf"


@pytest.mark.unit
def test_infer_target_missing_makefile(tmp_path):
    with pytest.raises(TargetInferenceError, match="No makefile found"):
        infer_target(tmp_path)


@pytest.mark.unit
def test_infer_target_undeclared(tmp_path):
    (tmp_path / "Makefile").write_text("all:\n\tlatexmk\n")

    with pytest.raises(TargetInferenceError, match="No variable TARGET= found"):
        infer_target(tmp_path)


@pytest.mark.unit
def test_infer_target_empty(tmp_path):
    (tmp_path / "Makefile").write_text("TARGET=\n")

    with pytest.raises(TargetInferenceError, match="Empty TARGET="):
        infer_target(tmp_path)


@pytest.mark.unit
def test_infer_target_custom_variable(tmp_path):
    (tmp_path / "GNUmakefile").write_text("PAPER=thesis\n")

    target = infer_target(
        tmp_path, makefile="GNUmakefile", variable="PAPER", default_extension="dvi"
    )
    assert target == "thesis.dvi"


class TestTargetDescriptor:
    """Tests for Target.from_name."""

    @pytest.mark.unit
    def test_pdf_target(self):
        target = Target.from_name("paper.pdf")

        assert target.extension == "pdf"
        assert target.main_source == "paper.tex"

    @pytest.mark.unit
    def test_nested_target(self):
        target = Target.from_name("build/paper.pdf")

        assert target.main_source == "build/paper.tex"

    @pytest.mark.unit
    def test_only_last_extension_is_stripped(self):
        target = Target.from_name("paper.tex.tex")

        assert target.extension == "tex"
        assert target.main_source == "paper.tex.tex"

    @pytest.mark.unit
    def test_target_without_extension(self):
        target = Target.from_name("paper")

        assert target.extension == ""
        assert target.main_source == "paper.tex"
