"""Read and update the configuration embedded in API specification readmes."""

from .builder import ReadMeBuilder
from .encoding import base64_to_document, base64_to_string, string_to_base64
from .errors import ConfigError, GitRepositoryError, ReadMeNotFoundError, StructuralError
from .files import find_readme
from .manipulator import (
    ReadMeManipulator,
    add_suppression,
    has_suppression_block,
)
from .markdown import (
    MarkdownDocument,
    Node,
    get_code_blocks_and_headings,
    get_input_files,
    get_input_files_for_tag,
    get_tags_to_settings_mapping,
    get_yaml_from_node,
    input_file,
    parse,
)
from .models import Suppression, SuppressionItem

__all__ = [
    "ConfigError",
    "GitRepositoryError",
    "MarkdownDocument",
    "Node",
    "ReadMeBuilder",
    "ReadMeManipulator",
    "ReadMeNotFoundError",
    "StructuralError",
    "Suppression",
    "SuppressionItem",
    "add_suppression",
    "base64_to_document",
    "base64_to_string",
    "find_readme",
    "get_code_blocks_and_headings",
    "get_input_files",
    "get_input_files_for_tag",
    "get_tags_to_settings_mapping",
    "get_yaml_from_node",
    "has_suppression_block",
    "input_file",
    "parse",
    "string_to_base64",
]
