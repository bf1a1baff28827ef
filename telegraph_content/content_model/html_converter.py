"""HTML and markdown conversion for content trees.

Uses BeautifulSoup to turn an HTML fragment into Telegraph nodes, renders
nodes back to HTML, and uses markdownify for a markdown view of a page.
"""

import html
import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from bs4 import (
    BeautifulSoup,
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)
from markdownify import MarkdownConverter as BaseMarkdownConverter

from .errors import ValidationError
from .node_models import VOID_TAGS, ElementNode, Node, TextNode

logger = logging.getLogger(__name__)

# Markup-only strings that never become text nodes
_NON_TEXT_STRINGS = (CData, Comment, Declaration, Doctype, ProcessingInstruction)

# Containers whose whitespace-only text is formatting, not content
_WHITESPACE_INSENSITIVE = frozenset({
    "aside", "blockquote", "figure", "ol", "ul",
})

# Names that can be written into markup without escaping
_TAG_NAME = re.compile(r"[A-Za-z][A-Za-z0-9-]*")
_ATTR_NAME = re.compile(r"[A-Za-z_:][-A-Za-z0-9_:.]*")


class HtmlConverter:
    """Converts between HTML fragments and Telegraph content nodes.

    Parsing uses Python's built-in html.parser rather than lxml, so no
    external entities are resolved.
    """

    def __init__(self):
        self.parser = "html.parser"

    def html_to_nodes(self, fragment: str) -> List[Node]:
        """Parse an HTML fragment into nodes.

        Comments, doctypes and processing instructions are dropped.
        Whitespace-only text at the top level or directly inside list,
        quote and figure containers is dropped as well.

        Args:
            fragment: HTML text, e.g. ``<p>Hello <b>world</b></p>``

        Returns:
            List of top-level nodes in document order
        """
        soup = BeautifulSoup(fragment, self.parser)
        nodes = self._convert_children(soup, None)
        logger.debug(f"Converted HTML into {len(nodes)} top-level nodes")
        return nodes

    def nodes_to_html(self, nodes: Sequence[Node]) -> str:
        """Render nodes as an HTML fragment.

        Args:
            nodes: Content nodes

        Returns:
            HTML text with text and attribute values escaped

        Raises:
            ValidationError: If a tag or attribute name is not a plain HTML
                name and so cannot be written into markup
        """
        return "".join(
            self._render(node, (index,)) for index, node in enumerate(nodes)
        )

    def _convert_children(self, parent: Tag, parent_tag: Optional[str]) -> List[Node]:
        nodes: List[Node] = []
        for child in parent.children:
            if isinstance(child, _NON_TEXT_STRINGS):
                continue
            if isinstance(child, NavigableString):
                text = str(child)
                if not text.strip() and (parent_tag is None or parent_tag in _WHITESPACE_INSENSITIVE):
                    continue
                nodes.append(TextNode(text))
            elif isinstance(child, Tag):
                nodes.append(ElementNode(
                    tag=child.name,
                    attrs=self._convert_attrs(child),
                    children=tuple(self._convert_children(child, child.name)),
                ))
        return nodes

    @staticmethod
    def _convert_attrs(element: Tag) -> Dict[str, str]:
        # Multi-valued attributes (class, rel) come back as lists
        attrs = {}
        for key, value in element.attrs.items():
            if isinstance(value, list):
                value = " ".join(value)
            attrs[key] = value
        return attrs

    def _render(self, node: Node, path: Tuple[int, ...]) -> str:
        if not isinstance(node, ElementNode):
            return html.escape(node, quote=False)

        if not _TAG_NAME.fullmatch(node.tag):
            raise ValidationError(
                f"tag {node.tag!r} cannot be rendered as HTML", path, tag=node.tag
            )
        for key in node.attrs:
            if not _ATTR_NAME.fullmatch(key):
                raise ValidationError(
                    f"attribute {key!r} cannot be rendered as HTML",
                    path,
                    tag=node.tag,
                    attribute=key,
                )

        attrs = "".join(
            f' {key}="{html.escape(value, quote=True)}"'
            for key, value in node.attrs.items()
        )
        if node.tag in VOID_TAGS and not node.children:
            return f"<{node.tag}{attrs}>"

        inner = "".join(
            self._render(child, path + (index,))
            for index, child in enumerate(node.children)
        )
        return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


class _ContentMarkdownConverter(BaseMarkdownConverter):
    """markdownify converter with settings suited to article text."""

    def __init__(self, **options):
        options.setdefault('heading_style', 'atx')
        options.setdefault('bullets', '-')
        options.setdefault('strong_em_symbol', '*')
        super().__init__(**options)


_converter = HtmlConverter()


def html_to_nodes(fragment: str) -> List[Node]:
    """Parse an HTML fragment into nodes. See HtmlConverter.html_to_nodes."""
    return _converter.html_to_nodes(fragment)


def nodes_to_html(nodes: Sequence[Node]) -> str:
    """Render nodes as HTML. See HtmlConverter.nodes_to_html."""
    return _converter.nodes_to_html(nodes)


def nodes_to_markdown(nodes: Sequence[Node]) -> str:
    """Render nodes as markdown.

    Args:
        nodes: Content nodes

    Returns:
        Markdown text with surrounding blank lines stripped
    """
    return _ContentMarkdownConverter().convert(nodes_to_html(nodes)).strip()
