"""
Preview and print wrappers.

The preview wraps any rendered tree in an A4-sized page scaled by a uniform
zoom factor. Scaling never changes content; print output resets it.
"""

from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader
from omegaconf import DictConfig

from quill.contexts.authoring.resume_data_structure import ResumeData
from quill.contexts.rendering.document_tree import Node, element
from quill.contexts.rendering.html_writer import to_html
from quill.contexts.rendering.layout_registry import TemplateId, render
from quill.utils.config import load_settings

PAGE_CLASS = "resume-page"

PAGE_TEMPLATE_PATH = Path(__file__).parent / "template"
PRINTABLE_PAGE_TEMPLATE = "printable_page.html.jinja"

# The page template's print CSS hides host UI and drops the zoom
_page_env = Environment(
    loader=FileSystemLoader(str(PAGE_TEMPLATE_PATH)),
    autoescape=True,
    keep_trailing_newline=True,
)


def clamp_scale(scale: float, settings: Optional[DictConfig] = None) -> float:
    """
    Clamp a zoom factor to [preview.min_scale, preview.max_scale].

    Rounded to two decimals so repeated zoom steps do not drift.
    """
    settings = settings or load_settings()
    low, high = settings.preview.min_scale, settings.preview.max_scale
    return round(min(max(float(scale), low), high), 2)


def zoom_in(scale: float, settings: Optional[DictConfig] = None) -> float:
    """One preview.step larger, clamped."""
    settings = settings or load_settings()
    return clamp_scale(scale + settings.preview.step, settings)


def zoom_out(scale: float, settings: Optional[DictConfig] = None) -> float:
    """One preview.step smaller, clamped."""
    settings = settings or load_settings()
    return clamp_scale(scale - settings.preview.step, settings)


def preview(tree: Node, scale: Optional[float] = None, settings: Optional[DictConfig] = None) -> Node:
    """
    Wrap a rendered tree in a scaled page container.

    Args:
        tree: Rendered document (from render())
        scale: Zoom factor (default: preview.default_scale), clamped to the configured range
        settings: Settings to use (default: load_settings())

    Returns:
        Page Node whose only child is tree
    """
    settings = settings or load_settings()
    if scale is None:
        scale = settings.preview.default_scale
    scale = clamp_scale(scale, settings)

    style = (
        f"width: {settings.preview.page_width}; "
        f"min-height: {settings.preview.page_min_height}; "
        f"transform: scale({scale}); "
        "transform-origin: top center;"
    )
    return element("div", tree, class_name=PAGE_CLASS, style=style, data_scale=str(scale))


def printable_page(
    data: ResumeData,
    template_id: Union[TemplateId, str],
    settings: Optional[DictConfig] = None,
) -> str:
    """
    Build a standalone HTML document for printing (or "Save as PDF").

    The page comes from printable_page.html.jinja with autoescaping on; the
    rendered tree is already Markup and is inserted as-is.

    Args:
        data: Resume to render
        template_id: TemplateId or its string value

    Returns:
        Complete HTML document text

    Raises:
        UnknownTemplateError: If template_id is not a registered template
    """
    page = preview(render(data, template_id), 1.0, settings)
    template = _page_env.get_template(PRINTABLE_PAGE_TEMPLATE)
    return template.render(
        title=data.profile.full_name.strip() or "Resume",
        page=to_html(page),
    )
