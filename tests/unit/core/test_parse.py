"""Unit tests for core/parse.py"""

import pytest

from docedit.core.errors import ConversionError
from docedit.core.models import NodeKind
from docedit.core.parse import parse_markup_tree, top_level_nodes


def test_flat_tree_one_node_per_top_level_element():
    """Nested elements are folded into their top-level parent's text."""
    tree = parse_markup_tree("<h1>Title</h1><p>Hello <em>world</em></p><ul><li>a</li><li>b</li></ul>")
    assert [n.kind for n in tree] == [NodeKind.heading1, NodeKind.paragraph, NodeKind.unknown_block]
    assert [n.text for n in tree] == ["Title", "Hello world", "ab"]
    assert tree[2].tag == "ul"


@pytest.mark.parametrize("markup,expected", [
    ("<h1>x</h1>",         NodeKind.heading1),
    ("<h2>x</h2>",         NodeKind.heading2),
    ("<h3>x</h3>",         NodeKind.heading3),
    ("<p>x</p>",           NodeKind.paragraph),
    ("<strong>x</strong>", NodeKind.bold_run),
    ("<em>x</em>",         NodeKind.italic_run),
    ("<li>x</li>",         NodeKind.list_item),
    ("<table>x</table>",   NodeKind.unknown_block),
    ("<b>x</b>",           NodeKind.unknown_block),
])
def test_node_kind_mapping(markup, expected):
    """Each top-level tag maps to its NodeKind; anything unlisted is unknown_block."""
    [node] = parse_markup_tree(markup)
    assert node.kind == expected


def test_whitespace_and_comments_skipped():
    """Whitespace between blocks and comments produce no nodes."""
    tree = parse_markup_tree("\n  <p>a</p>\n<!-- note -->\n  <p>b</p>\n")
    assert [n.text for n in tree] == ["a", "b"]


def test_bare_text_is_unknown_block():
    """Non-blank text directly at top level becomes an unknown '#text' node."""
    [node] = parse_markup_tree("loose text")
    assert node.kind == NodeKind.unknown_block
    assert node.tag == "#text"


def test_full_document_unwraps_body():
    """A full HTML document is read from its <body> children."""
    html = "<!DOCTYPE html><html><head><title>t</title></head><body><h2>Sub</h2><p>x</p></body></html>"
    tree = parse_markup_tree(html)
    assert [n.tag for n in tree] == ["h2", "p"]


def test_empty_markup_has_no_nodes():
    assert top_level_nodes("") == []


def test_bytes_markup_decoded_as_utf8():
    tree = parse_markup_tree("<p>café</p>".encode("utf-8"))
    assert tree[0].text == "café"


@pytest.mark.parametrize("markup", [b"\xff\xfe<p>\x80</p>", None, 42])
def test_unparseable_markup_raises(markup):
    """Undecodable bytes or non-text input raise ConversionError."""
    with pytest.raises(ConversionError):
        parse_markup_tree(markup)


def test_empty_body_has_no_nodes():
    assert top_level_nodes("<html><body></body></html>") == []
