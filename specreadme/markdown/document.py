"""Markdown tree built on markdown-it-py tokens.

Nodes live in a flat arena owned by :class:`MarkdownDocument` and refer to
each other by index (``parent``, ``prev``, ``next``, ``first_child`` and
``last_child``). Node types follow the CommonMark reference names, so both
fenced and indented code blocks surface as ``code_block`` nodes.

Serialization never re-renders markdown. The document keeps its source text
and only rewrites the content lines of code blocks whose ``literal`` was
changed, which keeps every other byte of the file intact.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

_PARSER = MarkdownIt("commonmark")

_CONTAINER_TYPES: Dict[str, str] = {
    "blockquote": "block_quote",
    "bullet_list": "list",
    "ordered_list": "list",
    "list_item": "item",
    "em": "emph",
    "s": "strikethrough",
}

_LEAF_TYPES: Dict[str, str] = {
    "fence": "code_block",
    "code_block": "code_block",
    "hr": "thematic_break",
    "text_special": "text",
    "code_inline": "code",
    "hardbreak": "linebreak",
}

_LITERAL_TYPES = {"code_block", "html_block", "text", "code", "html_inline"}
_NON_PREFIX = re.compile(r"[^>\s]")
# Same line breaks markdown-it-py normalizes before numbering lines.
_LINE = re.compile(r"[^\r\n]*(?:\r\n?|\n)|[^\r\n]+\Z")
_EOL = re.compile(r"(?:\r\n?|\n)\Z")


@dataclass
class Node:
    """Single node of a parsed markdown document."""

    index: int
    type: str
    literal: Optional[str] = None
    info: str = ""
    level: Optional[int] = None
    parent: Optional[int] = None
    prev: Optional[int] = None
    next: Optional[int] = None
    first_child: Optional[int] = None
    last_child: Optional[int] = None


@dataclass(frozen=True)
class _BlockSpan:
    """Source location of a code block's content lines."""

    node: int
    content_start: int
    content_end: int
    prefix: str
    eol: str
    original: str

    def render(self, literal: Optional[str]) -> List[str]:
        if not literal:
            return []
        body = literal[:-1] if literal.endswith("\n") else literal
        rendered: List[str] = []
        for line in body.split("\n"):
            if line:
                rendered.append(f"{self.prefix}{line}{self.eol}")
            else:
                rendered.append(f"{self.prefix.rstrip()}{self.eol}")
        return rendered


class MarkdownDocument:
    """Parsed markdown document with index-addressed nodes."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._lines = _split_lines(source)
        self._nodes: List[Node] = [Node(index=0, type="document")]
        self._spans: Dict[int, _BlockSpan] = {}

    @property
    def source(self) -> str:
        """Text the document was parsed from."""
        return self._source

    @property
    def root(self) -> Node:
        return self._nodes[0]

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, index: int) -> Node:
        return self._nodes[index]

    def parent(self, node: Node) -> Optional[Node]:
        return self._lookup(node.parent)

    def prev(self, node: Node) -> Optional[Node]:
        return self._lookup(node.prev)

    def next(self, node: Node) -> Optional[Node]:
        return self._lookup(node.next)

    def children(self, node: Node) -> Iterator[Node]:
        child = self._lookup(node.first_child)
        while child is not None:
            yield child
            child = self._lookup(child.next)

    def walk(self, start: Node | None = None) -> Iterator[Node]:
        """Yield ``start`` and its descendants depth-first, in document order."""
        first = start if start is not None else self.root
        stack = [first.index]
        while stack:
            node = self._nodes[stack.pop()]
            yield node
            stack.extend(reversed([child.index for child in self.children(node)]))

    def to_string(self) -> str:
        """Serialize the document, rewriting only code blocks whose literal changed."""
        changed = [
            span
            for span in sorted(self._spans.values(), key=lambda item: item.content_start)
            if self._nodes[span.node].literal != span.original
        ]
        if not changed:
            return self._source

        output: List[str] = []
        cursor = 0
        for span in changed:
            output.extend(self._lines[cursor : span.content_start])
            output.extend(span.render(self._nodes[span.node].literal))
            cursor = span.content_end
        output.extend(self._lines[cursor:])
        return "".join(output)

    # ------------------------------------------------------------------
    # Construction

    def _lookup(self, index: Optional[int]) -> Optional[Node]:
        return self._nodes[index] if index is not None else None

    def _append(self, parent_index: int, node_type: str, **attrs: object) -> Node:
        parent = self._nodes[parent_index]
        node = Node(index=len(self._nodes), type=node_type, parent=parent_index, **attrs)  # type: ignore[arg-type]
        if parent.last_child is None:
            parent.first_child = node.index
        else:
            node.prev = parent.last_child
            self._nodes[parent.last_child].next = node.index
        parent.last_child = node.index
        self._nodes.append(node)
        return node

    def _append_block(self, parent_index: int, token: Token) -> None:
        node_type = _LEAF_TYPES.get(token.type, token.type)
        if node_type == "code_block":
            node = self._append(
                parent_index, node_type, literal=token.content, info=token.info.strip()
            )
            if token.map is not None:
                self._spans[node.index] = self._span_for(node, token)
        elif node_type in _LITERAL_TYPES:
            self._append(parent_index, node_type, literal=token.content)
        else:
            self._append(parent_index, node_type)

    def _append_inline(self, parent_index: int, tokens: Sequence[Token]) -> None:
        stack = [parent_index]
        for token in tokens:
            if token.nesting == 1:
                stack.append(self._append(stack[-1], _container_type(token)).index)
                continue
            if token.nesting == -1:
                stack.pop()
                continue
            node_type = _LEAF_TYPES.get(token.type, token.type)
            if node_type == "text":
                last = self._lookup(self._nodes[stack[-1]].last_child)
                if last is not None and last.type == "text":
                    last.literal = f"{last.literal or ''}{token.content}"
                    continue
            if node_type in _LITERAL_TYPES:
                node = self._append(stack[-1], node_type, literal=token.content)
            else:
                node = self._append(stack[-1], node_type)
            if token.children:
                self._append_inline(node.index, token.children)

    def _span_for(self, node: Node, token: Token) -> _BlockSpan:
        start, end = token.map  # type: ignore[misc]
        opening = self._lines[start] if start < len(self._lines) else ""
        content = token.content
        line_count = content.count("\n")
        if content and not content.endswith("\n"):
            line_count += 1

        if token.type == "fence":
            content_start = start + 1
            fence_prefix = opening[: max(opening.find(token.markup), 0)]
            fallback_prefix = _NON_PREFIX.sub(" ", fence_prefix)
        else:
            content_start = start
            fallback_prefix = ""
        content_end = min(content_start + line_count, max(end, content_start))

        prefix = fallback_prefix
        if line_count and content_start < len(self._lines):
            first_source = _strip_eol(self._lines[content_start])
            first_content = content.split("\n", 1)[0]
            if first_content and first_source.endswith(first_content):
                prefix = first_source[: len(first_source) - len(first_content)]

        return _BlockSpan(
            node=node.index,
            content_start=content_start,
            content_end=content_end,
            prefix=prefix,
            eol=_eol(opening) or "\n",
            original=content,
        )


def parse(text: str) -> MarkdownDocument:
    """Parse CommonMark ``text`` into a :class:`MarkdownDocument`."""
    document = MarkdownDocument(text)
    stack = [document.root.index]
    for token in _PARSER.parse(text):
        if token.nesting == 1:
            level = int(token.tag[1:]) if token.type == "heading_open" else None
            stack.append(document._append(stack[-1], _container_type(token), level=level).index)
        elif token.nesting == -1:
            stack.pop()
        elif token.type == "inline":
            document._append_inline(stack[-1], token.children or [])
        else:
            document._append_block(stack[-1], token)
    return document


def _container_type(token: Token) -> str:
    name = token.type[: -len("_open")] if token.type.endswith("_open") else token.type
    return _CONTAINER_TYPES.get(name, name)


def _split_lines(text: str) -> List[str]:
    return _LINE.findall(text)


def _eol(line: str) -> str:
    match = _EOL.search(line)
    return match.group(0) if match else ""


def _strip_eol(line: str) -> str:
    return line[: len(line) - len(_eol(line))]


__all__ = ["MarkdownDocument", "Node", "parse"]
