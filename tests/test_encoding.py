"""Tests for base64 readme helpers."""

from __future__ import annotations

import base64

from specreadme.encoding import base64_to_document, base64_to_string, string_to_base64

from tests._fixtures.readmes import CDN_README


def test_base64_helpers_handle_utf8() -> None:
    text = "# Überblick\n\nGrüße ✓\n"

    encoded = string_to_base64(text)

    assert encoded == base64.b64encode(text.encode("utf-8")).decode("ascii")
    assert base64_to_string(encoded) == text


def test_base64_to_document_parses_readme() -> None:
    document = base64_to_document(base64.b64encode(CDN_README.encode("utf-8")).decode("ascii"))

    assert document.to_string() == CDN_README
    assert any(node.type == "heading" for node in document.walk())
