"""
QUILL - Quick, Uniform, Interchangeable Layouts for Resumes

Turns structured career data into one of several resume layouts, live, and
exports the same data to a compilable LaTeX document.

Architecture:
- Authoring Context: Resume data model, copy-on-write editing, seed content
- Templating Context: LaTeX escaping and export
- Rendering Context: Layout strategies, document tree, preview and PDF compilation
- Assistant Context: Optional text-completion helpers (polish, summaries, bullets)
"""

__version__ = "0.1.0"
