"""
Document tree produced by the layouts.

A Node is an immutable element: a tag, attributes and children (Nodes or text).
Text children hold raw user strings; escaping happens only when the tree is
serialized (see html_writer).
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union

Child = Union["Node", str]


@dataclass(frozen=True)
class Node:
    """
    Immutable document element.

    Attributes:
        tag: Element name (e.g., 'section', 'h2', 'p')
        attrs: (name, value) pairs in insertion order
        children: Child nodes and text, in display order
    """

    tag: str
    attrs: Tuple[Tuple[str, str], ...] = ()
    children: Tuple[Child, ...] = ()

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return an attribute value, or default if absent."""
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    @property
    def classes(self) -> List[str]:
        return (self.get("class") or "").split()

    def iter(self) -> Iterator["Node"]:
        """Yield this node and every descendant node, depth first, in document order."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter()

    def find_all(
        self,
        tag: Optional[str] = None,
        predicate: Optional[Callable[["Node"], bool]] = None,
        **attrs: str,
    ) -> List["Node"]:
        """
        Find descendant nodes (including self) matching all given criteria.

        Attribute names use underscores for hyphens, so data_section="skills"
        matches data-section="skills".

        Example:
            >>> tree.find_all("section", data_section="experience")
        """
        wanted = {_attr_name(key): value for key, value in attrs.items()}
        matches = []
        for node in self.iter():
            if tag is not None and node.tag != tag:
                continue
            if any(node.get(key) != value for key, value in wanted.items()):
                continue
            if predicate is not None and not predicate(node):
                continue
            matches.append(node)
        return matches

    def find(self, tag: Optional[str] = None, **attrs: str) -> Optional["Node"]:
        """First match of find_all(), or None."""
        found = self.find_all(tag, **attrs)
        return found[0] if found else None

    def text_content(self) -> str:
        """Concatenated text of this node and its descendants."""
        parts = []
        for child in self.children:
            parts.append(child.text_content() if isinstance(child, Node) else child)
        return "".join(parts)


def _attr_name(key: str) -> str:
    if key == "class_name":
        return "class"
    return key.replace("_", "-")


def _flatten(children) -> Iterator[Child]:
    for child in children:
        # None and False are placeholders for conditionally omitted content
        if child is None or child is False:
            continue
        if isinstance(child, (list, tuple)):
            yield from _flatten(child)
        elif isinstance(child, Node):
            yield child
        else:
            yield str(child)


def element(tag: str, *children, **attrs: Optional[str]) -> Node:
    """
    Build a Node.

    Children may be Nodes, strings, nested lists (flattened) or None/False
    (dropped). Keyword attributes map underscores to hyphens (data_role ->
    data-role) and class_name to class; attributes set to None are dropped.

    Example:
        >>> element("h2", "Experience", class_name="title", data_role="heading")
        Node(tag='h2', attrs=(('class', 'title'), ('data-role', 'heading')), children=('Experience',))
    """
    node_attrs = tuple(
        (_attr_name(key), str(value)) for key, value in attrs.items() if value is not None
    )
    return Node(tag=tag, attrs=node_attrs, children=tuple(_flatten(children)))
