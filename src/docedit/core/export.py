"""Export transcoder: editor markup to the structured document model"""

import logging
from typing import Any, Iterator, Optional, Union

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from docedit.core.models import DocumentModel, NodeKind, Paragraph, Run
from docedit.core.parse import NODE_KIND_MAP, TopLevelNode, node_tag, node_text, top_level_nodes


logger = logging.getLogger(__name__)

# kind -> (heading level, base run style); first match wins, no fallback
BLOCK_MAP: dict[NodeKind, tuple[Optional[int], dict[str, Any]]] = {
    NodeKind.heading1:   (1,    {"bold": True, "size": 32}),
    NodeKind.heading2:   (2,    {"bold": True, "size": 28}),
    NodeKind.paragraph:  (None, {}),
    NodeKind.bold_run:   (None, {"bold": True}),
    NodeKind.italic_run: (None, {"italic": True}),
}

INLINE_STYLE_MAP: dict[str, dict[str, Any]] = {
    'strong': {"bold": True},
    'b':      {"bold": True},
    'em':     {"italic": True},
    'i':      {"italic": True},
}


def _inline_runs(node: Tag, style: dict[str, Any]) -> Iterator[Run]:
    """Walk the inline tree under node, yielding one Run per text leaf.

    Uses an explicit stack of (children, style) so nesting depth is unbounded.
    """
    stack = [(iter(node.children), style)]
    while stack:
        children, current = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
        elif isinstance(child, Tag):
            if child.name == 'br':
                yield Run(text="\n", **current)
            else:
                stack.append((iter(child.children), {**current, **INLINE_STYLE_MAP.get(child.name, {})}))
        elif isinstance(child, PreformattedString):
            continue
        elif isinstance(child, NavigableString):
            yield Run(text=str(child), **current)


def merge_runs(runs: list[Run]) -> list[Run]:
    """Drop empty runs and join neighbours that share a style."""
    merged: list[Run] = []
    for run in runs:
        if not run.text:
            continue
        if merged and merged[-1].same_style(run):
            merged[-1] = merged[-1].model_copy(update={"text": merged[-1].text + run.text})
        else:
            merged.append(run)
    return merged


def block_runs(node: TopLevelNode, style: dict[str, Any], preserve_inline: bool = True) -> list[Run]:
    """Runs for a recognised block: one flat run, or the styled inline walk."""
    if not preserve_inline or not isinstance(node, Tag):
        return [Run(text=node_text(node), **style)]
    return merge_runs(list(_inline_runs(node, style))) or [Run(text="", **style)]


def node_to_paragraph(node: TopLevelNode, preserve_inline: bool = True) -> Optional[Paragraph]:
    """Map one top-level node to a Paragraph, or None when its tag is unsupported."""
    kind = NODE_KIND_MAP.get(node_tag(node), NodeKind.unknown_block)
    if kind not in BLOCK_MAP:
        return None
    heading, style = BLOCK_MAP[kind]
    return Paragraph(heading=heading, runs=block_runs(node, style, preserve_inline))


def html_to_document(markup: Union[str, bytes], preserve_inline: bool = True) -> DocumentModel:
    """Transcode editor markup into a DocumentModel.

    Each top-level node yields zero or one Paragraph, in input order. Nodes
    outside h1/h2/p/strong/em are dropped and their tags recorded on the
    model. With preserve_inline=False the whole text of a block becomes a
    single run, ignoring nested bold/italic.
    """
    paragraphs: list[Paragraph] = []
    dropped: list[str] = []
    for node in top_level_nodes(markup):
        paragraph = node_to_paragraph(node, preserve_inline)
        if paragraph is None:
            dropped.append(node_tag(node))
            logger.debug("Dropped unsupported block <%s>", node_tag(node))
            continue
        paragraphs.append(paragraph)

    if dropped:
        logger.info("Export dropped %d unsupported block(s): %s", len(dropped), ", ".join(dropped))
    return DocumentModel(paragraphs=paragraphs, dropped=dropped)
