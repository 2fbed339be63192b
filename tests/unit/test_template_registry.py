"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound
from jinja2.exceptions import UndefinedError

from quill.contexts.templating.registries import TemplateRegistry
from quill.utils.latex_tools import NoEscape

SECTION_TYPES = ["heading", "summary", "work_history", "education", "projects", "skills"]


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.template_base_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize("type_name", SECTION_TYPES)
def test_every_section_type_has_template(type_name):
    """Each section type used by the exporter ships a template."""
    registry = TemplateRegistry()
    assert registry.get_template_path(type_name).exists()
    assert registry.get_template(type_name) is not None


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("skills")
    assert registry.is_cached("skills")

    template2 = registry.get_template("skills")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_type")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("work_history")

    assert isinstance(path, Path)
    assert path.name == "template.tex.jinja"
    assert "work_history" in str(path)


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_template("skills")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0
    assert not registry.is_cached("skills")


@pytest.mark.unit
def test_structure_and_wrapper_templates_load():
    registry = TemplateRegistry()
    assert registry.get_structure("preamble") is not None
    assert registry.get_structure("document") is not None
    assert registry.get_wrapper("section_wrapper") is not None


@pytest.mark.unit
def test_custom_delimiters_leave_latex_braces_alone(tmp_path):
    """LaTeX braces are literal text; only <<< >>> interpolates."""
    (tmp_path / "types" / "probe").mkdir(parents=True)
    (tmp_path / "types" / "probe" / "template.tex.jinja").write_text(
        r"\textbf{<<< value >>>} {{ not_a_variable }}", encoding="utf-8"
    )
    registry = TemplateRegistry(tmp_path)

    result = registry.get_template("probe").render(value="x")
    assert result == r"\textbf{x} {{ not_a_variable }}"


@pytest.mark.unit
def test_interpolated_values_are_escaped(tmp_path):
    """Plain values are escaped by the finalize hook; NoEscape values are not."""
    (tmp_path / "types" / "probe").mkdir(parents=True)
    (tmp_path / "types" / "probe" / "template.tex.jinja").write_text(
        "<<< raw >>>|<<< literal >>>", encoding="utf-8"
    )
    registry = TemplateRegistry(tmp_path)

    result = registry.get_template("probe").render(raw="R&D_1", literal=NoEscape(r"\&"))
    assert result == r"R\&D\_1|\&"


@pytest.mark.unit
def test_undefined_variable_raises():
    """StrictUndefined surfaces missing context instead of rendering blanks."""
    registry = TemplateRegistry()
    with pytest.raises(UndefinedError):
        registry.get_template("summary").render()
