"""
HTML serialization of document trees.

Text and attribute values are escaped with markupsafe, so user content can
never introduce markup into the page.
"""

from markupsafe import Markup, escape

from quill.contexts.rendering.document_tree import Node

# Elements that never have children or a closing tag
VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "link", "meta"})


def _render_attrs(node: Node) -> str:
    return "".join(f' {name}="{escape(value)}"' for name, value in node.attrs)


def to_html(node: Node) -> Markup:
    """
    Serialize a Node tree to an HTML fragment.

    Args:
        node: Root of the tree

    Returns:
        Markup string (safe to embed in a larger document)

    Example:
        >>> to_html(element("p", "R&D <lead>", data_role="line"))
        Markup('<p data-role="line">R&amp;D &lt;lead&gt;</p>')
    """
    attrs = _render_attrs(node)
    if node.tag in VOID_ELEMENTS:
        return Markup(f"<{node.tag}{attrs}>")

    inner = "".join(
        str(to_html(child)) if isinstance(child, Node) else str(escape(child))
        for child in node.children
    )
    return Markup(f"<{node.tag}{attrs}>{inner}</{node.tag}>")
