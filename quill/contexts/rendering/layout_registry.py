"""
Layout Registry

Closed mapping from template identifier to layout. Every TemplateId has exactly
one layout; an unknown identifier is an error, never a silent default.

Adding a template: one TemplateId member, one Layout subclass under layouts/,
one LAYOUT_REGISTRY entry and one TEMPLATE_CATALOG entry.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union

from quill.contexts.authoring.resume_data_structure import ResumeData
from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.document_tree import Node
from quill.contexts.rendering.layouts import (
    BoldLayout,
    ClassicLayout,
    CreativeLayout,
    ElegantLayout,
    MinimalLayout,
    ModernLayout,
    SidebarLayout,
    TechLayout,
)
from quill.contexts.rendering.logger import _log_debug


class UnknownTemplateError(ValueError):
    """Raised when a template identifier is not one of the registered layouts."""

    def __init__(self, template_id):
        self.template_id = template_id
        valid = ", ".join(t.value for t in TemplateId)
        super().__init__(f"Unknown template '{template_id}'. Valid templates: {valid}")


class TemplateId(Enum):
    CLASSIC = "classic"
    MODERN = "modern"
    MINIMAL = "minimal"
    SIDEBAR = "sidebar"
    TECH = "tech"
    CREATIVE = "creative"
    ELEGANT = "elegant"
    BOLD = "bold"


@dataclass(frozen=True)
class TemplateInfo:
    """Catalogue entry shown in a template picker."""

    id: TemplateId
    name: str
    description: str
    thumbnail_color: str


LAYOUT_REGISTRY: Dict[TemplateId, Layout] = {
    TemplateId.CLASSIC: ClassicLayout(),
    TemplateId.MODERN: ModernLayout(),
    TemplateId.MINIMAL: MinimalLayout(),
    TemplateId.SIDEBAR: SidebarLayout(),
    TemplateId.TECH: TechLayout(),
    TemplateId.CREATIVE: CreativeLayout(),
    TemplateId.ELEGANT: ElegantLayout(),
    TemplateId.BOLD: BoldLayout(),
}

TEMPLATE_CATALOG: Dict[TemplateId, TemplateInfo] = {
    TemplateId.CLASSIC: TemplateInfo(
        TemplateId.CLASSIC, "Classic", "Timeless serif elegance", "bg-slate-200"
    ),
    TemplateId.MODERN: TemplateInfo(
        TemplateId.MODERN, "Modern", "Clean blue accents", "bg-blue-100"
    ),
    TemplateId.MINIMAL: TemplateInfo(
        TemplateId.MINIMAL, "Minimal", "Clean grid layout", "bg-white border"
    ),
    TemplateId.SIDEBAR: TemplateInfo(
        TemplateId.SIDEBAR, "Sidebar", "Dark sidebar contrast", "bg-slate-800"
    ),
    TemplateId.TECH: TemplateInfo(TemplateId.TECH, "Tech", "Monospace & Code", "bg-green-50"),
    TemplateId.CREATIVE: TemplateInfo(
        TemplateId.CREATIVE, "Creative", "Bold & Artistic", "bg-yellow-100"
    ),
    TemplateId.ELEGANT: TemplateInfo(
        TemplateId.ELEGANT, "Elegant", "Bordered luxury", "bg-rose-50"
    ),
    TemplateId.BOLD: TemplateInfo(
        TemplateId.BOLD, "Bold", "High impact black", "bg-black text-white"
    ),
}


def _check_registry() -> None:
    """Fail at import if any TemplateId lacks a layout or catalogue entry."""
    for template_id in TemplateId:
        if template_id not in LAYOUT_REGISTRY:
            raise RuntimeError(f"No layout registered for template '{template_id.value}'")
        if template_id not in TEMPLATE_CATALOG:
            raise RuntimeError(f"No catalogue entry for template '{template_id.value}'")
        if LAYOUT_REGISTRY[template_id].name != template_id.value:
            raise RuntimeError(
                f"Layout for '{template_id.value}' is named "
                f"'{LAYOUT_REGISTRY[template_id].name}'"
            )


_check_registry()


def resolve(template_id: Union[TemplateId, str]) -> Layout:
    """
    Look up the layout for a template identifier.

    Args:
        template_id: TemplateId or its string value (e.g., "modern")

    Returns:
        Layout instance

    Raises:
        UnknownTemplateError: If template_id is not a registered template
    """
    if not isinstance(template_id, TemplateId):
        try:
            template_id = TemplateId(template_id)
        except ValueError:
            raise UnknownTemplateError(template_id) from None
    return LAYOUT_REGISTRY[template_id]


def list_templates() -> List[TemplateInfo]:
    """All templates in catalogue order."""
    return [TEMPLATE_CATALOG[template_id] for template_id in TemplateId]


def render(data: ResumeData, template_id: Union[TemplateId, str]) -> Node:
    """
    Render resume data with the given template.

    Args:
        data: Resume to render (never modified)
        template_id: TemplateId or its string value

    Returns:
        Root Node of the rendered document

    Raises:
        UnknownTemplateError: If template_id is not a registered template
    """
    layout = resolve(template_id)
    _log_debug(f"Rendering with '{layout.name}' layout")
    return layout.render(data)
