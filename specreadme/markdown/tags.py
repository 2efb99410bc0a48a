"""Tag settings declared by ``$(tag) == '<name>'`` code blocks."""

from __future__ import annotations

import re
from typing import Any, Dict, Iterator, List, Mapping, Optional

import yaml

from ..logging import get_logger
from .document import MarkdownDocument
from .headings import get_all_code_block_nodes
from .yaml_block import get_yaml_from_node

_LOGGER = get_logger("markdown.tags")

# Text after the `$(tag)` marker up to the first quoted token.
TAG_PATTERN = re.compile(r"""\$\(tag\)[^'"]*['"](.*?)['"]""")

INPUT_FILE_KEY = "input-file"

TagSettings = Dict[str, Any]


def tag_name(info: str) -> Optional[str]:
    """Extract the tag name from a fence info string."""
    match = TAG_PATTERN.search(info)
    if match is None or not match.group(1):
        return None
    return match.group(1)


def get_tags_to_settings_mapping(document: MarkdownDocument) -> Dict[str, TagSettings]:
    """Map tag names to the YAML settings of their conditional code blocks."""
    mapping: Dict[str, TagSettings] = {}
    for node in get_all_code_block_nodes(document):
        if not node.literal or not node.info:
            continue
        try:
            settings = get_yaml_from_node(node)
        except (yaml.YAMLError, ValueError) as exc:
            _LOGGER.debug("Skipping code block %d with invalid YAML: %s", node.index, exc)
            continue
        name = tag_name(node.info)
        if name is None:
            continue
        if not isinstance(settings, dict) or INPUT_FILE_KEY not in settings:
            continue
        mapping[name] = settings
    return mapping


def input_file(settings: Mapping[str, Any]) -> List[str]:
    """Return the ``input-file`` entry of ``settings`` as a list."""
    value = settings[INPUT_FILE_KEY]
    if isinstance(value, str):
        return [value]
    if value is None:
        return []
    return list(value)


def get_input_files(document: MarkdownDocument) -> Iterator[str]:
    """Yield the input files of every tag in the document."""
    for settings in get_tags_to_settings_mapping(document).values():
        yield from input_file(settings)


def get_input_files_for_tag(document: MarkdownDocument, tag: str) -> Optional[List[str]]:
    """Return the input files of ``tag``, or ``None`` when the tag is not declared."""
    settings = get_tags_to_settings_mapping(document).get(tag)
    if settings is None:
        return None
    return input_file(settings)


__all__ = [
    "INPUT_FILE_KEY",
    "TAG_PATTERN",
    "get_input_files",
    "get_input_files_for_tag",
    "get_tags_to_settings_mapping",
    "input_file",
    "tag_name",
]
