"""Unit tests for content_model.node_models module."""

import dataclasses

import pytest

from telegraph_content.content_model.node_models import (
    ElementNode,
    NodeTag,
    TextNode,
    iter_nodes,
    text_content,
)


class TestTextNode:
    """Test cases for TextNode."""

    def test_equals_plain_string(self):
        """TextNode compares equal to the same str."""
        assert TextNode("hello") == "hello"

    def test_repr_names_variant(self):
        """repr makes the variant visible."""
        assert repr(TextNode("hi")) == "TextNode('hi')"

    def test_text_content(self):
        """Text content of a text node is itself."""
        assert TextNode("hi").get_text_content() == "hi"


class TestElementNode:
    """Test cases for ElementNode construction and invariants."""

    def test_defaults_are_empty(self):
        """attrs and children default to empty."""
        node = ElementNode("p")
        assert node.attrs == {}
        assert node.children == ()

    def test_plain_string_children_become_text_nodes(self):
        """str children are coerced to TextNode."""
        node = ElementNode("p", children=("hello",))
        assert isinstance(node.children[0], TextNode)

    def test_children_list_becomes_tuple(self):
        """Children are stored as a tuple."""
        node = ElementNode("p", children=["a", "b"])
        assert node.children == ("a", "b")
        assert isinstance(node.children, tuple)

    @pytest.mark.parametrize("bad_child", [5, None, {"tag": "p"}, ["x"]])
    def test_rejects_non_node_children(self, bad_child):
        """Anything that is not a node or str is rejected."""
        with pytest.raises(TypeError):
            ElementNode("p", children=(bad_child,))

    def test_rejects_non_string_tag(self):
        """tag must be a str."""
        with pytest.raises(TypeError):
            ElementNode(None)

    def test_rejects_non_string_attr_values(self):
        """Attribute values must be strings."""
        with pytest.raises(TypeError):
            ElementNode("a", {"href": 5})

    def test_attrs_are_copied(self):
        """Mutating the source mapping does not change the node."""
        attrs = {"href": "/a"}
        node = ElementNode("a", attrs)
        attrs["href"] = "/b"
        assert node.href == "/a"

    def test_is_frozen(self):
        """Fields cannot be reassigned."""
        node = ElementNode("p")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.tag = "b"

    def test_structural_equality(self):
        """Equal trees compare equal."""
        left = ElementNode("p", children=("a", ElementNode("b", children=("c",))))
        right = ElementNode("p", children=(TextNode("a"), ElementNode("b", children=("c",))))
        assert left == right

    def test_hashable(self):
        """Nodes can be used in sets."""
        nodes = {ElementNode("a", {"href": "/x"}), ElementNode("a", {"href": "/x"})}
        assert len(nodes) == 1

    def test_hash_ignores_attr_order(self):
        """Nodes equal up to attribute order hash alike."""
        first = ElementNode("a", {"href": "x", "src": "y"})
        second = ElementNode("a", {"src": "y", "href": "x"})
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_attrs_are_read_only(self):
        """attrs cannot be changed after construction."""
        node = ElementNode("a", {"href": "/x"})
        with pytest.raises(TypeError):
            node.attrs["onclick"] = "run()"
        with pytest.raises(TypeError):
            del node.attrs["href"]
        assert dict(node.attrs) == {"href": "/x"}

    def test_to_dict_returns_plain_dict(self):
        """Encoded attrs are a mutable copy."""
        node = ElementNode("a", {"href": "/x"})
        encoded = node.to_dict()
        encoded["attrs"]["href"] = "/y"
        assert type(encoded["attrs"]) is dict
        assert node.href == "/x"

    @pytest.mark.parametrize("children", ["abc", b"abc"])
    def test_rejects_bare_string_children(self, children):
        """A single string is not a sequence of children."""
        with pytest.raises(TypeError):
            ElementNode("p", children=children)

    def test_href_and_src(self):
        """href and src read the matching attributes."""
        assert ElementNode("a", {"href": "/x"}).href == "/x"
        assert ElementNode("img", {"src": "/i.png"}).src == "/i.png"
        assert ElementNode("p").href is None

    def test_is_known_tag(self):
        """Known vocabulary tags are recognized."""
        assert ElementNode("iframe").is_known_tag
        assert not ElementNode("script").is_known_tag

    def test_to_dict_omits_empty_fields(self):
        """to_dict leaves out empty attrs and children."""
        assert ElementNode("br").to_dict() == {"tag": "br"}


class TestNodeTag:
    """Test cases for the tag vocabulary enum."""

    def test_has_all_api_tags(self):
        """The enum lists the 24 tags the API accepts."""
        assert len(NodeTag) == 24
        assert NodeTag("figcaption") is NodeTag.FIGCAPTION


class TestTextContent:
    """Test cases for text extraction helpers."""

    def test_inline_text_is_concatenated(self):
        """Inline children join without separators."""
        node = ElementNode("p", children=("Hello ", ElementNode("b", children=("world",))))
        assert node.get_text_content() == "Hello world"

    def test_blocks_are_separated_by_newlines(self):
        """Block elements are separated by newlines."""
        nodes = (
            ElementNode("h3", children=("Title",)),
            ElementNode("p", children=("Body",)),
        )
        assert text_content(nodes) == "Title\nBody"

    def test_br_is_a_newline(self):
        """br contributes a newline."""
        node = ElementNode("p", children=("a", ElementNode("br"), "b"))
        assert node.get_text_content() == "a\nb"


class TestIterNodes:
    """Test cases for iter_nodes."""

    def test_preorder_with_paths(self):
        """Parents come before children, with child-index paths."""
        nodes = (
            ElementNode("p", children=("a", ElementNode("b", children=("c",)))),
            TextNode("d"),
        )
        paths = [path for path, _ in iter_nodes(nodes)]
        assert paths == [(0,), (0, 0), (0, 1), (0, 1, 0), (1,)]
