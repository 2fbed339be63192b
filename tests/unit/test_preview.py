"""Unit tests for preview scaling and printable pages."""

import pytest
from omegaconf import OmegaConf

from quill.contexts.authoring import Profile, Project, ResumeData
from quill.contexts.rendering import TemplateId, UnknownTemplateError, render
from quill.contexts.rendering.preview import (
    PAGE_CLASS,
    clamp_scale,
    preview,
    printable_page,
    zoom_in,
    zoom_out,
)
from quill.utils.config import load_settings


@pytest.fixture
def settings():
    return load_settings(use_env=False)


@pytest.mark.unit
class TestScale:
    """Test zoom clamping."""

    @pytest.mark.parametrize(
        "scale, expected",
        [(0.1, 0.4), (0.4, 0.4), (0.8, 0.8), (1.5, 1.5), (3.0, 1.5), (-1, 0.4)],
    )
    def test_clamp(self, settings, scale, expected):
        assert clamp_scale(scale, settings) == expected

    def test_zoom_steps(self, settings):
        assert zoom_in(0.8, settings) == 0.9
        assert zoom_out(0.8, settings) == 0.7
        assert zoom_in(1.5, settings) == 1.5
        assert zoom_out(0.4, settings) == 0.4

    def test_custom_range(self, settings):
        narrow = OmegaConf.merge(settings, {"preview": {"min_scale": 0.5, "max_scale": 1.0}})
        assert clamp_scale(0.2, narrow) == 0.5
        assert clamp_scale(2.0, narrow) == 1.0


@pytest.mark.unit
class TestPreview:
    """Test the page wrapper."""

    def test_wraps_tree_unchanged(self, settings, sample_resume):
        tree = render(sample_resume, TemplateId.MODERN)
        page = preview(tree, 1.2, settings)

        assert page.children == (tree,)
        assert page.get("class") == PAGE_CLASS
        assert "transform: scale(1.2)" in page.get("style")
        assert "width: 210mm" in page.get("style")
        assert "min-height: 297mm" in page.get("style")

    def test_default_scale(self, settings, sample_resume):
        page = preview(render(sample_resume, "classic"), settings=settings)
        assert page.get("data-scale") == "0.8"

    def test_out_of_range_scale_clamped(self, settings, sample_resume):
        page = preview(render(sample_resume, "classic"), 9, settings)
        assert page.get("data-scale") == "1.5"


@pytest.mark.unit
class TestPrintablePage:
    """Test the standalone print document."""

    def test_full_document(self, settings, sample_resume):
        html = printable_page(sample_resume, "elegant", settings)

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Alex Morgan</title>" in html
        assert "@media print" in html
        assert 'data-template="elegant"' in html
        assert "transform: scale(1.0)" in html

    def test_blank_name_falls_back_to_resume_title(self, settings, empty_data):
        html = printable_page(empty_data, "bold", settings)
        assert "<title>Resume</title>" in html

    def test_unknown_template(self, settings, sample_resume):
        with pytest.raises(UnknownTemplateError):
            printable_page(sample_resume, "nope", settings)

    def test_title_escaped(self, settings):
        data = ResumeData(profile=Profile(full_name="<script>x</script>"))
        html = printable_page(data, "classic", settings)

        assert "<title>&lt;script&gt;x&lt;/script&gt;</title>" in html
        assert "<script>" not in html

    def test_print_css_not_escaped(self, settings, sample_resume):
        html = printable_page(sample_resume, "classic", settings)
        assert ".print-content > .resume-page" in html

    @pytest.mark.parametrize("template_id", [t.value for t in TemplateId])
    def test_unsafe_scheme_never_linked(self, settings, template_id):
        data = ResumeData(
            profile=Profile(full_name="Jo", website="javascript://alert(1)"),
            projects=(Project(id="p1", name="Demo", link="javascript:alert(2)"),),
        )
        html = printable_page(data, template_id, settings)

        assert 'href="javascript' not in html
