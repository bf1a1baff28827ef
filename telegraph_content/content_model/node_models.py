"""Data models for Telegraph page content nodes.

Page bodies are a list of DOM-like nodes. A node is exactly one of two
variants:

    TextNode: literal displayable text (a leaf)
    ElementNode: a tagged element with attributes and child nodes

The Node alias is the closed union of the two. ElementNode rejects any
child that is neither, so a tree built through the public constructors is
always well formed and always encodable.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Sequence, Tuple, Union


class NodeTag(Enum):
    """Tags accepted by the Telegraph API."""

    A = "a"
    ASIDE = "aside"
    B = "b"
    BLOCKQUOTE = "blockquote"
    BR = "br"
    CODE = "code"
    EM = "em"
    FIGCAPTION = "figcaption"
    FIGURE = "figure"
    H3 = "h3"
    H4 = "h4"
    HR = "hr"
    I = "i"  # noqa: E741
    IFRAME = "iframe"
    IMG = "img"
    LI = "li"
    OL = "ol"
    P = "p"
    PRE = "pre"
    S = "s"
    STRONG = "strong"
    U = "u"
    UL = "ul"
    VIDEO = "video"


class NodeAttr(Enum):
    """Attributes accepted by the Telegraph API, on any tag."""

    HREF = "href"
    SRC = "src"


# Elements that never carry children
VOID_TAGS = frozenset({NodeTag.BR.value, NodeTag.HR.value, NodeTag.IMG.value})

# Elements rendered as their own block (used when joining text content)
BLOCK_TAGS = frozenset({
    NodeTag.ASIDE.value,
    NodeTag.BLOCKQUOTE.value,
    NodeTag.FIGURE.value,
    NodeTag.FIGCAPTION.value,
    NodeTag.H3.value,
    NodeTag.H4.value,
    NodeTag.LI.value,
    NodeTag.OL.value,
    NodeTag.P.value,
    NodeTag.PRE.value,
    NodeTag.UL.value,
})


class TextNode(str):
    """A DOM text node.

    TextNode is a str, so ``TextNode("hello") == "hello"`` and it can be
    used anywhere text is expected.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"TextNode({str.__repr__(self)})"

    def get_text_content(self) -> str:
        return str(self)


@dataclass(frozen=True)
class ElementNode:
    """A DOM element node.

    Attributes:
        tag: Element name (a, p, img, ...). Unknown tags are kept as-is so
            content from a newer server version still round-trips.
        attrs: Read-only mapping of attribute name to value. Empty means the
            element has no attributes and ``attrs`` is omitted on the wire.
        children: Child nodes in document order. Empty means the element
            has no children and ``children`` is omitted on the wire.
    """

    tag: str
    attrs: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.tag, str):
            raise TypeError(f"tag must be a str, got {type(self.tag).__name__}")

        if isinstance(self.children, (str, bytes)):
            raise TypeError("children must be a sequence of nodes, not a single string")

        attrs: Dict[str, str] = {}
        for key, value in dict(self.attrs).items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(
                    f"attrs must map str to str, got {key!r}: {value!r}"
                )
            attrs[key] = value

        children = []
        for child in self.children:
            if isinstance(child, (TextNode, ElementNode)):
                children.append(child)
            elif isinstance(child, str):
                children.append(TextNode(child))
            else:
                raise TypeError(
                    f"children must be TextNode, ElementNode or str, "
                    f"got {type(child).__name__}"
                )

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "attrs", MappingProxyType(attrs))
        object.__setattr__(self, "children", tuple(children))

    def __hash__(self) -> int:
        return hash((self.tag, frozenset(self.attrs.items()), self.children))

    @property
    def href(self) -> Union[str, None]:
        """Get the href attribute, if any."""
        return self.attrs.get(NodeAttr.HREF.value)

    @property
    def src(self) -> Union[str, None]:
        """Get the src attribute, if any."""
        return self.attrs.get(NodeAttr.SRC.value)

    @property
    def is_known_tag(self) -> bool:
        """Check if the tag is part of the default Telegraph vocabulary."""
        return self.tag in _KNOWN_TAGS

    @property
    def is_block(self) -> bool:
        """Check if this element is block-level content."""
        return self.tag in BLOCK_TAGS

    def get_text_content(self) -> str:
        """Extract all text from this element and its descendants.

        Block-level children are joined with a newline, inline children are
        concatenated. ``br`` contributes a newline.

        Returns:
            Concatenated text of the subtree.
        """
        if self.tag == NodeTag.BR.value:
            return "\n"
        return text_content(self.children)

    def to_dict(self) -> Dict[str, Any]:
        """Convert this element to Telegraph JSON format.

        ``tag`` is always first; ``attrs`` and ``children`` follow only
        when non-empty.

        Returns:
            Dictionary suitable for JSON serialization
        """
        result: Dict[str, Any] = {"tag": self.tag}

        if self.attrs:
            result["attrs"] = dict(self.attrs)

        if self.children:
            result["children"] = [
                child.to_dict() if isinstance(child, ElementNode) else str(child)
                for child in self.children
            ]

        return result


Node = Union[TextNode, ElementNode]

_KNOWN_TAGS = frozenset(tag.value for tag in NodeTag)


def text_content(nodes: Sequence[Node]) -> str:
    """Concatenate the text of a node sequence.

    Args:
        nodes: Nodes to read, typically a page's content

    Returns:
        Text of all nodes; block elements are separated by newlines.
    """
    parts = []
    previous_block = False
    for node in nodes:
        is_block = isinstance(node, ElementNode) and node.is_block
        if parts and (is_block or previous_block):
            parts.append("\n")
        parts.append(node.get_text_content())
        previous_block = is_block
    return "".join(parts)


def iter_nodes(
    nodes: Sequence[Node], path: Tuple[int, ...] = ()
) -> Iterator[Tuple[Tuple[int, ...], Node]]:
    """Walk a node sequence depth-first, parents before children.

    Args:
        nodes: Nodes to walk
        path: Path prefix for the first level

    Yields:
        (path, node) pairs, where path is the chain of child indices
    """
    for index, node in enumerate(nodes):
        node_path = path + (index,)
        yield node_path, node
        if isinstance(node, ElementNode):
            yield from iter_nodes(node.children, node_path)
