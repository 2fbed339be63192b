"""
Integration tests for LaTeX export + compilation - requires pdflatex.
"""

import shutil

import pytest
from omegaconf import OmegaConf

from quill.contexts.rendering.compiler import compile_latex, compile_resume
from quill.utils.config import load_settings
from quill.utils.pdf_processing import page_count

PDFLATEX_AVAILABLE = shutil.which("pdflatex") is not None
skip_if_no_pdflatex = pytest.mark.skipif(
    not PDFLATEX_AVAILABLE,
    reason="pdflatex not installed - install TeX Live, MiKTeX, or MacTeX"
)


@pytest.fixture
def settings(tmp_path):
    return OmegaConf.merge(
        load_settings(use_env=False), {"logs_path": str(tmp_path / "logs")}
    )


@pytest.mark.integration
@pytest.mark.latex
@skip_if_no_pdflatex
@pytest.mark.parametrize("fixture_name", ["sample_resume", "special_chars_resume", "empty_data"])
def test_exported_resume_compiles(fixture_name, request, tmp_path, settings):
    """Every exported document is valid LaTeX, whatever the user typed."""
    data = request.getfixturevalue(fixture_name)

    result = compile_resume(data, tmp_path / "out", settings=settings)

    assert result.success, f"Compilation failed with errors: {result.errors}"
    assert result.pdf_path is not None
    assert result.pdf_path.exists()
    assert result.page_count >= 1
    assert not (tmp_path / "out" / "resume.aux").exists()


@pytest.mark.integration
@pytest.mark.latex
@skip_if_no_pdflatex
def test_compile_with_intentional_error(tmp_path, settings):
    """Compilation detects and reports errors."""
    broken_tex = tmp_path / "broken.tex"
    broken_tex.write_text(
        "\\documentclass{article}\n\\begin{document}\n\\undefinedcommand\n\\end{document}\n",
        encoding="utf-8",
    )

    result = compile_latex(broken_tex, num_passes=1, settings=settings)

    assert result.success is False
    assert result.errors
    assert (tmp_path / "broken.log").exists()


@pytest.mark.integration
def test_page_count_of_non_pdf(tmp_path):
    not_pdf = tmp_path / "fake.pdf"
    not_pdf.write_text("not a pdf", encoding="utf-8")

    assert page_count(not_pdf) is None
    assert page_count(tmp_path / "missing.pdf") is None
