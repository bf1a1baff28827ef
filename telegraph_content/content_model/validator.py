"""Vocabulary validation for content trees.

Validation is a separate step from decoding: a decoded tree may contain
tags the server introduced after this library was released. Callers that
publish content run it before sending so a bad tree is reported locally
with its path instead of being rejected wholesale by the API.
"""

import logging
from typing import Sequence, Tuple

from .errors import ValidationError
from .node_models import ElementNode, Node
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)


def validate_node(
    node: Node,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    path: Sequence[int] = (),
) -> None:
    """Check a node and its descendants against a vocabulary.

    Walks depth-first, parents before children, and stops at the first
    violation. For each element the tag is checked before its attributes.

    Args:
        node: Root of the tree to check
        vocabulary: Allowed tags and attributes
        path: Child-index path of ``node``, used in error reports

    Raises:
        ValidationError: On the first disallowed tag or attribute, or when
            the tree nests too deep for the interpreter's recursion limit
    """
    path = tuple(path)
    try:
        _validate_node(node, vocabulary, path)
    except RecursionError:
        raise ValidationError("tree too deep", path) from None


def _validate_node(node: Node, vocabulary: Vocabulary, path: Tuple[int, ...]) -> None:
    if not isinstance(node, ElementNode):
        return

    if not vocabulary.allows_tag(node.tag):
        raise ValidationError(f"tag '{node.tag}' is not allowed", path, tag=node.tag)

    for attr in node.attrs:
        if not vocabulary.allows_attr(attr):
            raise ValidationError(
                f"attribute '{attr}' is not allowed on '{node.tag}'",
                path,
                tag=node.tag,
                attribute=attr,
            )

    for index, child in enumerate(node.children):
        _validate_node(child, vocabulary, path + (index,))


def validate_content(
    nodes: Sequence[Node], vocabulary: Vocabulary = DEFAULT_VOCABULARY
) -> None:
    """Check every node of a page's content. See validate_node.

    Raises:
        ValidationError: On the first disallowed tag or attribute
    """
    for index, node in enumerate(nodes):
        validate_node(node, vocabulary, (index,))
    logger.debug(f"Validated {len(nodes)} top-level nodes")
