"""Content node model for Telegraph page bodies.

A page body is a list of nodes; each node is either literal text or a
tagged element with attributes and children.

Key classes and functions:
    TextNode, ElementNode: The two node variants (Node is their union)
    NodeParser: Decodes wire JSON into nodes with path-accurate errors
    decode_node / encode_node: Single-node codec
    decode_content / encode_content: Whole-page codec
    validate_node / validate_content: Vocabulary checks
    Vocabulary, DEFAULT_VOCABULARY, VocabularyLoader: Allowed tags/attrs
    HtmlConverter: HTML fragments to nodes and back
"""

from .errors import (
    TelegraphError,
    ContentError,
    DecodeError,
    ValidationError,
    ConfigError,
    FilesystemError,
)
from .node_models import (
    ElementNode,
    Node,
    NodeAttr,
    NodeTag,
    TextNode,
    iter_nodes,
    text_content,
)
from .node_parser import (
    NodeParser,
    decode_content,
    decode_node,
    dumps_content,
    encode_content,
    encode_node,
    parse_from_string,
)
from .validator import validate_content, validate_node
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary
from .vocabulary_loader import VocabularyLoader
from .html_converter import (
    HtmlConverter,
    html_to_nodes,
    nodes_to_html,
    nodes_to_markdown,
)

__all__ = [
    # Errors
    "TelegraphError",
    "ContentError",
    "DecodeError",
    "ValidationError",
    "ConfigError",
    "FilesystemError",
    # Node model
    "ElementNode",
    "Node",
    "NodeAttr",
    "NodeTag",
    "TextNode",
    "iter_nodes",
    "text_content",
    # Codec
    "NodeParser",
    "decode_content",
    "decode_node",
    "dumps_content",
    "encode_content",
    "encode_node",
    "parse_from_string",
    # Validation
    "validate_content",
    "validate_node",
    "DEFAULT_VOCABULARY",
    "Vocabulary",
    "VocabularyLoader",
    # HTML
    "HtmlConverter",
    "html_to_nodes",
    "nodes_to_html",
    "nodes_to_markdown",
]
