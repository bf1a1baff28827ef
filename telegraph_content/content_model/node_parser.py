"""Parser and encoder for Telegraph content JSON.

Converts the wire format (``string | {tag, attrs?, children?}``) into
TextNode / ElementNode trees and back. Decoding checks structure only; tag
names are not checked here so that content using tags newer than this
library still round-trips. See validator.py for vocabulary checks.
"""

import json
import logging
from typing import Any, Dict, List, Sequence, Tuple, Union

from .errors import DecodeError
from .node_models import ElementNode, Node, TextNode

logger = logging.getLogger(__name__)

# Encoded form of a node: a plain string or a dict
NodeJson = Union[str, Dict[str, Any]]


class NodeParser:
    """Parser for Telegraph content nodes.

    Every DecodeError carries the chain of child indices leading to the
    offending value, so a bad fragment can be found in a large page without
    re-walking it.
    """

    def parse_node(self, value: Any, path: Sequence[int] = ()) -> Node:
        """Parse a single JSON-like value into a Node.

        Args:
            value: Decoded JSON value (str or dict)
            path: Child-index path of ``value``, used in error reports

        Returns:
            TextNode for strings, ElementNode for objects

        Raises:
            DecodeError: If the value is not a valid node, or nests too deep
                for the interpreter's recursion limit
        """
        path = tuple(path)
        try:
            return self._parse_node(value, path)
        except RecursionError:
            raise DecodeError("tree too deep", path) from None

    def _parse_node(self, value: Any, path: Tuple[int, ...]) -> Node:
        if isinstance(value, str):
            return TextNode(value)

        if not isinstance(value, dict):
            raise DecodeError("unsupported node shape", path)

        tag = value.get("tag")
        if not isinstance(tag, str):
            raise DecodeError("missing tag", path)

        attrs = self._parse_attrs(value.get("attrs"), path)
        children = self._parse_children(value.get("children"), path)

        return ElementNode(tag=tag, attrs=attrs, children=children)

    def parse_content(self, value: Any) -> Tuple[Node, ...]:
        """Parse a page content array.

        Args:
            value: Decoded JSON array of nodes

        Returns:
            Tuple of nodes in document order

        Raises:
            DecodeError: If value is not an array or any node is invalid
        """
        if not isinstance(value, list):
            raise DecodeError("content must be an array")

        nodes = tuple(
            self.parse_node(item, (index,)) for index, item in enumerate(value)
        )
        logger.debug(f"Parsed content with {len(nodes)} top-level nodes")
        return nodes

    def parse_from_string(self, text: str) -> Union[Node, Tuple[Node, ...]]:
        """Parse a JSON string holding either a content array or one node.

        Args:
            text: JSON text

        Returns:
            Tuple of nodes for an array, a single Node otherwise

        Raises:
            DecodeError: If the text is not valid JSON or not valid content
        """
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"invalid JSON: {e.msg}") from e
        except RecursionError as e:
            raise DecodeError("invalid JSON: nesting too deep") from e

        if isinstance(value, list):
            return self.parse_content(value)
        return self.parse_node(value)

    def _parse_attrs(self, attrs: Any, path: Tuple[int, ...]) -> Dict[str, str]:
        if attrs is None:
            return {}
        if not isinstance(attrs, dict):
            raise DecodeError("invalid attrs", path)
        for key, attr_value in attrs.items():
            if not isinstance(key, str) or not isinstance(attr_value, str):
                raise DecodeError("invalid attrs", path)
        return dict(attrs)

    def _parse_children(self, children: Any, path: Tuple[int, ...]) -> Tuple[Node, ...]:
        if children is None:
            return ()
        if not isinstance(children, list):
            raise DecodeError("invalid children", path)
        return tuple(
            self._parse_node(child, path + (index,))
            for index, child in enumerate(children)
        )


_parser = NodeParser()


def decode_node(value: Any, path: Sequence[int] = ()) -> Node:
    """Decode one JSON-like value into a Node. See NodeParser.parse_node."""
    return _parser.parse_node(value, path)


def decode_content(value: Any) -> Tuple[Node, ...]:
    """Decode a content array. See NodeParser.parse_content."""
    return _parser.parse_content(value)


def parse_from_string(text: str) -> Union[Node, Tuple[Node, ...]]:
    """Decode JSON text. See NodeParser.parse_from_string."""
    return _parser.parse_from_string(text)


def encode_node(node: Node) -> NodeJson:
    """Encode a Node to its JSON-like form.

    Args:
        node: TextNode or ElementNode

    Returns:
        Plain str for text nodes, dict for elements
    """
    if isinstance(node, ElementNode):
        return node.to_dict()
    return str(node)


def encode_content(nodes: Sequence[Node]) -> List[NodeJson]:
    """Encode a node sequence to a JSON-like list."""
    return [encode_node(node) for node in nodes]


def dumps_content(nodes: Sequence[Node]) -> str:
    """Encode nodes to compact JSON text, as sent in the ``content`` parameter.

    Args:
        nodes: Page content

    Returns:
        JSON array text without insignificant whitespace
    """
    return json.dumps(encode_content(nodes), ensure_ascii=False, separators=(",", ":"))
