"""
Rendering Context

Responsibilities:
- Renders ResumeData with one of eight interchangeable layouts
- Serializes document trees to HTML and wraps them for preview and print
- Compiles exported LaTeX to PDF

Owns: Template dispatch, layout rules, preview scaling, LaTeX compilation
Never: Mutates ResumeData, writes LaTeX (see templating)
"""

from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.compiler import CompilationResult, compile_latex, compile_resume
from quill.contexts.rendering.document_tree import Node, element
from quill.contexts.rendering.html_writer import to_html
from quill.contexts.rendering.layout_registry import (
    LAYOUT_REGISTRY,
    TemplateId,
    TemplateInfo,
    UnknownTemplateError,
    list_templates,
    render,
    resolve,
)
from quill.contexts.rendering.preview import clamp_scale, preview, printable_page

__all__ = [
    "CompilationResult",
    "LAYOUT_REGISTRY",
    "Layout",
    "Node",
    "TemplateId",
    "TemplateInfo",
    "UnknownTemplateError",
    "clamp_scale",
    "compile_latex",
    "compile_resume",
    "element",
    "list_templates",
    "preview",
    "printable_page",
    "render",
    "resolve",
    "to_html",
]
