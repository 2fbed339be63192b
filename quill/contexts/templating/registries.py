"""
Templating Registries

Loads and caches the Jinja2 fragments used to build the LaTeX export.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from quill.utils.latex_tools import finalize_latex

load_dotenv()
TEMPLATE_PATH = Path(
    os.getenv("QUILL_LATEX_TEMPLATE_PATH") or Path(__file__).resolve().parent / "template"
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Layout under the base path:
    - types/{type_name}/template.tex.jinja: one fragment per resume section type
    - structure/{name}.tex.jinja: document skeleton pieces (preamble, document)
    - wrappers/{name}.tex.jinja: wrappers applied around rendered fragments

    Templates use custom delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>

    Every <<< var >>> output goes through escape_latex() exactly once (via the
    environment's finalize hook) unless the value is a NoEscape.
    """

    def __init__(self, template_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            template_base_path: Base path for template directories. Defaults to
                                QUILL_LATEX_TEMPLATE_PATH or the packaged templates
        """
        if template_base_path is None:
            template_base_path = TEMPLATE_PATH

        self.template_base_path = Path(template_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            finalize=finalize_latex,
            # Custom delimiters to avoid LaTeX brace conflicts
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Block tags on their own line leave no blank line (blank lines break tabular rows)
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def _load(self, relative_path: str) -> Template:
        if relative_path in self._cache:
            return self._cache[relative_path]

        try:
            template = self.env.get_template(relative_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found at {self.template_base_path / relative_path}"
            ) from e

        self._cache[relative_path] = template
        return template

    def get_template(self, type_name: str) -> Template:
        """
        Get a section type template, loading and caching it if necessary.

        Args:
            type_name: Name of the type (e.g., 'work_history')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        return self._load(f"types/{type_name}/template.tex.jinja")

    def get_structure(self, name: str) -> Template:
        """Get a document structure template (e.g., 'preamble', 'document')."""
        return self._load(f"structure/{name}.tex.jinja")

    def get_wrapper(self, name: str) -> Template:
        """Get a wrapper template (e.g., 'section_wrapper')."""
        return self._load(f"wrappers/{name}.tex.jinja")

    def get_template_path(self, type_name: str) -> Path:
        """
        Get the file path for a type's template.

        Args:
            type_name: Name of the type (e.g., 'work_history')

        Returns:
            Path to template file
        """
        return self.template_base_path / "types" / type_name / "template.tex.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        """
        Check if a section type template is in the cache.

        Args:
            type_name: Name of the type

        Returns:
            True if cached, False otherwise
        """
        return f"types/{type_name}/template.tex.jinja" in self._cache
