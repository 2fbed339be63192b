"""
Templating Context

Responsibilities:
- Exports ResumeData as a complete LaTeX document (resume.tex)
- Owns the Jinja2 fragments and the structural LaTeX literals

Owns: LaTeX export and escaping of every user string placed in it
Never: Mutates ResumeData, compiles LaTeX (see rendering.compiler)
"""

from quill.contexts.templating.exceptions import TemplateRenderError
from quill.contexts.templating.latex_generator import (
    EXPORT_FILENAME,
    EXPORT_MIME_TYPE,
    ResumeToLaTeXConverter,
    export_document,
    export_resume,
    write_export,
)
from quill.contexts.templating.registries import TemplateRegistry

__all__ = [
    "EXPORT_FILENAME",
    "EXPORT_MIME_TYPE",
    "ResumeToLaTeXConverter",
    "TemplateRegistry",
    "TemplateRenderError",
    "export_document",
    "export_resume",
    "write_export",
]
