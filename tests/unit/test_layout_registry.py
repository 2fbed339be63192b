"""Unit tests for template dispatch."""

import pytest

from quill.contexts.rendering import (
    LAYOUT_REGISTRY,
    Layout,
    TemplateId,
    UnknownTemplateError,
    list_templates,
    render,
    resolve,
)
from quill.contexts.rendering.layouts import MinimalLayout, TechLayout


@pytest.mark.unit
def test_registry_is_total():
    """Every template id has exactly one layout."""
    assert set(LAYOUT_REGISTRY) == set(TemplateId)
    assert len(TemplateId) == 8
    for template_id, layout in LAYOUT_REGISTRY.items():
        assert isinstance(layout, Layout)
        assert layout.name == template_id.value


@pytest.mark.unit
def test_layouts_are_distinct():
    layouts = list(LAYOUT_REGISTRY.values())
    assert len({type(layout) for layout in layouts}) == len(layouts)


@pytest.mark.unit
@pytest.mark.parametrize("template_id", list(TemplateId), ids=lambda t: t.value)
def test_resolve_accepts_enum_and_string(template_id):
    assert resolve(template_id) is resolve(template_id.value)


@pytest.mark.unit
@pytest.mark.parametrize("bad_id", ["fancy", "", "CLASSIC", None, 3])
def test_resolve_unknown_raises(bad_id):
    """Unknown ids are rejected, never mapped to a default layout."""
    with pytest.raises(UnknownTemplateError) as exc_info:
        resolve(bad_id)

    assert isinstance(exc_info.value, ValueError)
    assert "classic" in str(exc_info.value)


@pytest.mark.unit
def test_render_unknown_raises(sample_resume):
    with pytest.raises(UnknownTemplateError):
        render(sample_resume, "does-not-exist")


@pytest.mark.unit
def test_list_templates_catalogue():
    templates = list_templates()

    assert [info.id for info in templates] == list(TemplateId)
    assert templates[0].name == "Classic"
    assert templates[0].description == "Timeless serif elegance"
    assert all(info.thumbnail_color for info in templates)


@pytest.mark.unit
def test_present_markers():
    """Layouts choose their own marker and separator."""
    assert MinimalLayout().date_range("2020", "2022", True) == "2020 — Now"
    assert TechLayout().date_range("2020", "2022", True) == "[2020 .. NOW]"
    assert TechLayout().date_range("2020", "2022", False) == "[2020 .. 2022]"
    assert resolve("classic").date_range("2020", "2022", False) == "2020 - 2022"
