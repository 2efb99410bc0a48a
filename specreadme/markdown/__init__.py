"""Markdown parsing and code block queries for readme files."""

from .document import MarkdownDocument, Node, parse
from .headings import (
    get_all_code_block_nodes,
    get_code_blocks_and_headings,
    get_heading_literal,
    node_heading,
)
from .tags import (
    get_input_files,
    get_input_files_for_tag,
    get_tags_to_settings_mapping,
    input_file,
    tag_name,
)
from .yaml_block import dump_yaml, get_yaml_from_node, update_yaml_for_node

__all__ = [
    "MarkdownDocument",
    "Node",
    "dump_yaml",
    "get_all_code_block_nodes",
    "get_code_blocks_and_headings",
    "get_heading_literal",
    "get_input_files",
    "get_input_files_for_tag",
    "get_tags_to_settings_mapping",
    "get_yaml_from_node",
    "input_file",
    "node_heading",
    "parse",
    "tag_name",
    "update_yaml_for_node",
]
