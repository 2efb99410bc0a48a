"""Base64 helpers for readme content returned by the GitHub contents API."""

from __future__ import annotations

import base64

from .markdown.document import MarkdownDocument, parse


def base64_to_string(content: str) -> str:
    return base64.b64decode(content).decode("utf-8")


def string_to_base64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_to_document(content: str) -> MarkdownDocument:
    """Decode base64 readme content and parse it."""
    return parse(base64_to_string(content))


__all__ = ["base64_to_document", "base64_to_string", "string_to_base64"]
