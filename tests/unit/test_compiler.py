"""Unit tests for the LaTeX compiler wrapper that need no LaTeX install."""

import pytest
from omegaconf import OmegaConf

from quill.contexts.rendering.compiler import (
    _parse_latex_log,
    _remove_artifacts,
    _stage,
    compile_latex,
    compiler_available,
)
from quill.utils.config import load_settings

SAMPLE_LOG = r"""
This is pdfTeX, Version 3.141592653
./resume.tex:42: Undefined control sequence.
! Undefined control sequence.
l.42 \foo
LaTeX Warning: Reference `sec:x' on page 1 undefined on input line 10.
Package hyperref Warning: Token not allowed in a PDF string.
Overfull \hbox (12.3pt too wide) in paragraph at lines 50--52
"""


@pytest.mark.unit
class TestParseLatexLog:
    """Test _parse_latex_log()."""

    def test_file_line_errors_not_duplicated(self):
        errors, _ = _parse_latex_log(SAMPLE_LOG)
        assert errors == ["line 42: Undefined control sequence."]

    def test_bang_and_fatal_errors(self):
        errors, _ = _parse_latex_log("! Missing $ inserted.\n*** (job aborted) Emergency stop.\n")
        assert errors == ["Missing $ inserted.", "Emergency stop"]

    def test_warnings(self):
        _, warnings = _parse_latex_log(SAMPLE_LOG)

        assert any(w.startswith("Reference `sec:x'") for w in warnings)
        assert "Token not allowed in a PDF string." in warnings
        assert "Overfull \\hbox (12.3pt too wide) in paragraph at lines 50--52" in warnings

    def test_clean_log(self):
        assert _parse_latex_log("Output written on resume.pdf (1 page).") == ([], [])


@pytest.mark.unit
class TestCompileLatexFailures:
    """compile_latex() reports problems as a failed result instead of raising."""

    def test_missing_tex_file(self, tmp_path):
        result = compile_latex(tmp_path / "missing.tex", settings=load_settings(use_env=False))

        assert result.success is False
        assert result.pdf_path is None
        assert "not found" in result.errors[0]

    def test_missing_compiler(self, tmp_path):
        tex_file = tmp_path / "resume.tex"
        tex_file.write_text("\\documentclass{article}", encoding="utf-8")
        settings = OmegaConf.merge(
            load_settings(use_env=False), {"latex": {"compiler": "no-such-latex-binary"}}
        )

        result = compile_latex(tex_file, settings=settings)

        assert result.success is False
        assert "no-such-latex-binary" in result.errors[0]

    def test_compiler_available(self):
        assert compiler_available("no-such-latex-binary") is False


@pytest.mark.unit
def test_remove_artifacts(tmp_path):
    tex_file = tmp_path / "resume.tex"
    tex_file.write_text("", encoding="utf-8")
    for ext in (".aux", ".log", ".out", ".pdf"):
        (tmp_path / f"resume{ext}").write_text("", encoding="utf-8")

    _remove_artifacts(tex_file)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["resume.pdf", "resume.tex"]


@pytest.mark.unit
def test_stage_copies_and_clears_stale_outputs(tmp_path):
    source = tmp_path / "src" / "resume.tex"
    source.parent.mkdir()
    source.write_text("\\documentclass{article}", encoding="utf-8")
    build = tmp_path / "build"
    build.mkdir()
    (build / "resume.pdf").write_text("stale", encoding="utf-8")

    staged = _stage(source, build)

    assert staged == build / "resume.tex"
    assert staged.read_text(encoding="utf-8") == "\\documentclass{article}"
    assert not (build / "resume.pdf").exists()
