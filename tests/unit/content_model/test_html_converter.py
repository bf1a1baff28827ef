"""Unit tests for content_model.html_converter module."""

import pytest

from telegraph_content.content_model.errors import ValidationError
from telegraph_content.content_model.html_converter import (
    HtmlConverter,
    html_to_nodes,
    nodes_to_html,
    nodes_to_markdown,
)
from telegraph_content.content_model.node_models import ElementNode, TextNode
from telegraph_content.content_model.node_parser import decode_content, decode_node
from tests.fixtures.content_fixtures import ARTICLE_CONTENT


class TestHtmlToNodes:
    """Test cases for parsing HTML into nodes."""

    def test_paragraph_with_inline_markup(self):
        """Nested inline elements become nested nodes."""
        nodes = html_to_nodes("<p>Hello <b>world</b></p>")
        assert nodes == [
            ElementNode("p", children=("Hello ", ElementNode("b", children=("world",)))),
        ]

    def test_attributes_are_kept(self):
        """Element attributes are copied."""
        nodes = html_to_nodes('<a href="https://telegra.ph">link</a>')
        assert nodes[0].attrs == {"href": "https://telegra.ph"}

    def test_multi_valued_attributes_are_joined(self):
        """class lists are joined back into one string."""
        nodes = html_to_nodes('<p class="lead intro">x</p>')
        assert nodes[0].attrs == {"class": "lead intro"}

    def test_void_elements(self):
        """br and img have no children."""
        nodes = html_to_nodes('<p>a<br>b</p><img src="/a.png">')
        assert nodes[0].children == ("a", ElementNode("br"), "b")
        assert nodes[1] == ElementNode("img", {"src": "/a.png"})

    def test_comments_are_dropped(self):
        """HTML comments do not become text."""
        nodes = html_to_nodes("<!-- note --><p>x</p>")
        assert nodes == [ElementNode("p", children=("x",))]

    def test_formatting_whitespace_is_dropped(self):
        """Whitespace between blocks and list items is dropped."""
        nodes = html_to_nodes("<p>a</p>\n\n<ul>\n  <li>b</li>\n</ul>\n")
        assert len(nodes) == 2
        assert nodes[1].children == (ElementNode("li", children=("b",)),)

    def test_inline_whitespace_is_kept(self):
        """Spaces between inline elements inside a paragraph stay."""
        nodes = html_to_nodes("<p><b>a</b> <i>b</i></p>")
        assert nodes[0].children[1] == " "

    def test_top_level_text(self):
        """Top-level text becomes a TextNode."""
        nodes = html_to_nodes("plain text")
        assert nodes == [TextNode("plain text")]


class TestNodesToHtml:
    """Test cases for rendering nodes as HTML."""

    def test_renders_nested_elements(self):
        """Elements render with their children."""
        nodes = (ElementNode("p", children=("Hi ", ElementNode("em", children=("there",)))),)
        assert nodes_to_html(nodes) == "<p>Hi <em>there</em></p>"

    def test_escapes_text_and_attributes(self):
        """Text and attribute values are escaped."""
        nodes = (ElementNode("a", {"href": '/x?a=1&b="2"'}, ("<b>",)),)
        assert nodes_to_html(nodes) == '<a href="/x?a=1&amp;b=&quot;2&quot;">&lt;b&gt;</a>'

    def test_void_tags_have_no_closing_tag(self):
        """br, hr and img render without a closing tag."""
        nodes = (ElementNode("hr"), ElementNode("img", {"src": "/a.png"}))
        assert nodes_to_html(nodes) == '<hr><img src="/a.png">'

    def test_markup_in_attribute_name_is_rejected(self):
        """An attribute name that would break out of the tag is refused."""
        node = decode_node(
            {"tag": "a", "attrs": {'x" onmouseover="alert(1)': "v"}, "children": ["t"]}
        )
        with pytest.raises(ValidationError) as exc_info:
            nodes_to_html((ElementNode("p"), ElementNode("p", children=(node,))))
        assert exc_info.value.path == (1, 0)
        assert exc_info.value.attribute == 'x" onmouseover="alert(1)'

    @pytest.mark.parametrize("tag", ["img src=x onerror=alert(1)", "p>", "b\n", ""])
    def test_markup_in_tag_name_is_rejected(self, tag):
        """Tag names must be plain element names."""
        with pytest.raises(ValidationError) as exc_info:
            nodes_to_html((ElementNode(tag),))
        assert exc_info.value.tag == tag

    def test_unknown_plain_names_still_render(self):
        """Names outside the vocabulary render when they are well formed."""
        node = ElementNode("my-widget", {"data-id": "7", "xml:lang": "en"})
        assert nodes_to_html((node,)) == '<my-widget data-id="7" xml:lang="en"></my-widget>'

    def test_html_round_trip(self):
        """Rendering the article and parsing it back gives the same nodes."""
        nodes = decode_content(ARTICLE_CONTENT)
        assert tuple(html_to_nodes(nodes_to_html(nodes))) == nodes


class TestNodesToMarkdown:
    """Test cases for markdown rendering."""

    def test_headings_and_bold(self):
        """Headings use atx style and bold uses asterisks."""
        nodes = (
            ElementNode("h3", children=("Title",)),
            ElementNode("p", children=("Hello ", ElementNode("b", children=("world",)))),
        )
        markdown = nodes_to_markdown(nodes)
        assert "### Title" in markdown
        assert "Hello **world**" in markdown

    def test_links(self):
        """Anchors become markdown links."""
        nodes = (ElementNode("p", children=(ElementNode("a", {"href": "https://x.y"}, ("x",)),)),)
        assert "[x](https://x.y)" in nodes_to_markdown(nodes)


class TestHtmlConverter:
    """Test cases for the HtmlConverter class."""

    @pytest.fixture
    def converter(self):
        """Create converter instance."""
        return HtmlConverter()

    def test_uses_builtin_parser(self, converter):
        """The converter uses html.parser, not lxml."""
        assert converter.parser == "html.parser"
