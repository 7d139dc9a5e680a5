"""Markup parsing into a flat, ordered sequence of top-level nodes"""

from typing import Union

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import PreformattedString

from docedit.core.errors import ConversionError
from docedit.core.models import MarkupNode, NodeKind


HTML_PARSER = "html.parser"

NODE_KIND_MAP: dict[str, NodeKind] = {
    'h1':     NodeKind.heading1,
    'h2':     NodeKind.heading2,
    'h3':     NodeKind.heading3,
    'p':      NodeKind.paragraph,
    'strong': NodeKind.bold_run,
    'em':     NodeKind.italic_run,
    'li':     NodeKind.list_item,
}

TopLevelNode = Union[Tag, NavigableString]


def _decode(markup: Union[str, bytes]) -> str:
    """Return markup as text; bytes must be UTF-8."""
    if isinstance(markup, bytes):
        try:
            return markup.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConversionError(f"Markup is not valid UTF-8: {e}") from e
    if not isinstance(markup, str):
        raise ConversionError(f"Markup must be str or bytes, got {type(markup).__name__}")
    return markup


def parse_soup(markup: Union[str, bytes]) -> BeautifulSoup:
    """Parse markup with the stdlib-backed html.parser tree builder."""
    text = _decode(markup)
    try:
        return BeautifulSoup(text, HTML_PARSER)
    except ParserRejectedMarkup as e:
        raise ConversionError(f"Could not parse markup: {e}") from e


def top_level_nodes(markup: Union[str, bytes]) -> list[TopLevelNode]:
    """Return the block-level children of the document body, in order.

    Whitespace-only text, comments, doctypes and other non-content strings are
    skipped. A full HTML document is unwrapped to its <body>.
    """
    soup = parse_soup(markup)
    root = soup.body if soup.body is not None else soup
    nodes: list[TopLevelNode] = []
    for child in root.children:
        if isinstance(child, Tag):
            nodes.append(child)
        elif isinstance(child, PreformattedString):
            continue
        elif isinstance(child, NavigableString) and child.strip():
            nodes.append(child)
    return nodes


def node_tag(node: TopLevelNode) -> str:
    return node.name if isinstance(node, Tag) else "#text"


def node_text(node: TopLevelNode) -> str:
    """Full text content of a node, descendants included."""
    return node.get_text() if isinstance(node, Tag) else str(node)


def parse_markup_tree(markup: Union[str, bytes]) -> list[MarkupNode]:
    """Parse markup into the flat markup tree: one MarkupNode per top-level node."""
    return [
        MarkupNode(
            kind=NODE_KIND_MAP.get(node_tag(node), NodeKind.unknown_block),
            tag=node_tag(node),
            text=node_text(node),
        )
        for node in top_level_nodes(markup)
    ]
