"""Associates code blocks with the heading that governs them."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..logging import get_logger
from .document import MarkdownDocument, Node

_LOGGER = get_logger("markdown.headings")


def get_all_code_block_nodes(document: MarkdownDocument) -> List[Node]:
    """Return every code block in document order."""
    return [node for node in document.walk() if node.type == "code_block"]


def node_heading(document: MarkdownDocument, start: Node) -> Optional[Node]:
    """Return the nearest heading before ``start``, searching siblings then parents."""
    current: Optional[Node] = start
    while current is not None and current.type != "heading":
        current = document.prev(current) or document.parent(current)
    return current


def get_heading_literal(document: MarkdownDocument, heading: Node) -> str:
    """Return the first text inside ``heading``, or an empty string."""
    for node in document.walk(heading):
        if node.type == "text":
            return node.literal or ""
    return ""


def get_code_blocks_and_headings(document: MarkdownDocument) -> Dict[str, Node]:
    """Map heading labels to the code block that follows them.

    Code blocks without a heading above them are skipped. When several blocks
    share a label the last one in document order wins.
    """
    mapping: Dict[str, Node] = {}
    for block in get_all_code_block_nodes(document):
        heading = node_heading(document, block)
        if heading is None:
            _LOGGER.debug("Skipping code block %d without a heading", block.index)
            continue
        label = get_heading_literal(document, heading)
        if not label:
            continue
        mapping[label] = block
    return mapping


__all__ = [
    "get_all_code_block_nodes",
    "get_code_blocks_and_headings",
    "get_heading_literal",
    "node_heading",
]
