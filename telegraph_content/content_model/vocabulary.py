"""Allowed tag and attribute vocabulary for content validation.

Attribute permissions are a single flat set shared by every tag, the way
the Telegraph API documents them (``href`` and ``src`` on any element).
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from .node_models import NodeAttr, NodeTag


@dataclass(frozen=True)
class Vocabulary:
    """Set of tag names and attribute names a validator accepts.

    Attributes:
        tags: Allowed element tag names
        attrs: Allowed attribute names, on any tag
    """

    tags: FrozenSet[str]
    attrs: FrozenSet[str]

    def allows_tag(self, tag: str) -> bool:
        return tag in self.tags

    def allows_attr(self, attr: str) -> bool:
        return attr in self.attrs

    def extend(
        self,
        tags: Optional[Iterable[str]] = None,
        attrs: Optional[Iterable[str]] = None,
    ) -> "Vocabulary":
        """Return a copy accepting additional tags and attributes.

        Args:
            tags: Extra tag names to allow
            attrs: Extra attribute names to allow

        Returns:
            New Vocabulary; this one is unchanged
        """
        return Vocabulary(
            tags=self.tags | frozenset(tags or ()),
            attrs=self.attrs | frozenset(attrs or ()),
        )


DEFAULT_VOCABULARY = Vocabulary(
    tags=frozenset(tag.value for tag in NodeTag),
    attrs=frozenset(attr.value for attr in NodeAttr),
)
