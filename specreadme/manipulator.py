"""Operations applied to readme files that configure API specifications."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, NoReturn, Protocol, Sequence, Union

import yaml

from .errors import StructuralError
from .markdown.document import MarkdownDocument
from .markdown.headings import get_code_blocks_and_headings
from .markdown.tags import INPUT_FILE_KEY, get_tags_to_settings_mapping, input_file
from .markdown.yaml_block import get_yaml_from_node, update_yaml_for_node
from .models import SuppressionItem

BASIC_INFORMATION_HEADING = "Basic Information"
SUPPRESSION_HEADING = "Suppression"
TAG_SECTION_MARKER = "### Tag"


class Logger(Protocol):
    def error(self, message: str) -> None:
        ...


class FragmentBuilder(Protocol):
    def version_definition(self, yaml_body: Any, tag: str) -> str:
        ...

    def suppression_section(self) -> str:
        ...


SuppressionEntry = Union[SuppressionItem, Mapping[str, Any]]


class ReadMeManipulator:
    """Provides operations that can be applied to readme files."""

    def __init__(self, logger: Logger, readme_builder: FragmentBuilder) -> None:
        self.logger = logger
        self.readme_builder = readme_builder

    def update_latest_tag(self, document: MarkdownDocument, new_tag: str) -> str:
        """Point the ``Basic Information`` block at ``new_tag`` and return the new text."""
        block = get_code_blocks_and_headings(document).get(BASIC_INFORMATION_HEADING)
        if block is None:
            self._fail(f"Couldn't find a '{BASIC_INFORMATION_HEADING}' code block")

        try:
            definition = get_yaml_from_node(block)
        except (yaml.YAMLError, ValueError) as exc:
            self._fail(f"Couldn't parse the '{BASIC_INFORMATION_HEADING}' code block: {exc}")
        if not isinstance(definition, dict) or "tag" not in definition:
            self._fail(f"The '{BASIC_INFORMATION_HEADING}' code block has no 'tag' field")

        definition["tag"] = new_tag
        update_yaml_for_node(block, definition)
        return document.to_string()

    def insert_tag_definition(
        self, readme_content: str, tag_files: Sequence[str], new_tag: str
    ) -> str:
        """Insert a new tag section ahead of the existing ones."""
        fragment = self.readme_builder.version_definition(
            create_tag_definition_yaml(tag_files), new_tag
        )
        return splice_into_top_of_versions(readme_content, fragment)

    def add_suppression_block(self, readme: str) -> str:
        """Append an empty suppression section. Callers check for an existing one first."""
        return f"{readme}\n\n{self.readme_builder.suppression_section()}"

    def get_tags_for_files_changed(
        self, document: MarkdownDocument, changed_paths: Iterable[str]
    ) -> List[str]:
        """Return the tags whose input files occur inside any of ``changed_paths``."""
        paths = list(changed_paths)
        affected: List[str] = []
        for tag, settings in get_tags_to_settings_mapping(document).items():
            files = input_file(settings)
            if any(name in path for name in files for path in paths):
                affected.append(tag)
        return affected

    def get_all_tags(self, document: MarkdownDocument) -> List[str]:
        return list(get_tags_to_settings_mapping(document))

    def has_suppression_block(self, document: MarkdownDocument) -> bool:
        return has_suppression_block(document)

    def add_suppression(self, document: MarkdownDocument, item: SuppressionEntry) -> None:
        try:
            add_suppression(document, item)
        except StructuralError as exc:
            self.logger.error(str(exc))
            raise

    def _fail(self, message: str) -> NoReturn:
        self.logger.error(message)
        raise StructuralError(message)


def has_suppression_block(document: MarkdownDocument) -> bool:
    return SUPPRESSION_HEADING in get_code_blocks_and_headings(document)


def add_suppression(document: MarkdownDocument, item: SuppressionEntry) -> None:
    """Append ``item`` to the suppression directives; no-op when the section is missing."""
    node = get_code_blocks_and_headings(document).get(SUPPRESSION_HEADING)
    if node is None:
        return

    try:
        block = get_yaml_from_node(node)
    except (yaml.YAMLError, ValueError) as exc:
        raise StructuralError(f"Couldn't parse the '{SUPPRESSION_HEADING}' code block: {exc}") from exc
    if block is None:
        block = {}
    if not isinstance(block, dict):
        raise StructuralError(f"The '{SUPPRESSION_HEADING}' code block must be a mapping")

    directive = block.get("directive") or []
    if not isinstance(directive, list):
        raise StructuralError(f"The '{SUPPRESSION_HEADING}' directive must be a list")

    entry = item.to_dict() if isinstance(item, SuppressionItem) else dict(item)
    update_yaml_for_node(node, {**block, "directive": [*directive, entry]})


def create_tag_definition_yaml(files: Sequence[str]) -> Dict[str, List[str]]:
    return {INPUT_FILE_KEY: list(files)}


def splice_into_top_of_versions(readme: str, fragment: str) -> str:
    """Insert ``fragment`` before the first tag heading, or at the top if there is none."""
    index = readme.find(TAG_SECTION_MARKER)
    if index == -1:
        return fragment + readme
    return readme[:index] + fragment + readme[index:]


__all__ = [
    "BASIC_INFORMATION_HEADING",
    "FragmentBuilder",
    "Logger",
    "ReadMeManipulator",
    "SUPPRESSION_HEADING",
    "add_suppression",
    "create_tag_definition_yaml",
    "has_suppression_block",
    "splice_into_top_of_versions",
]
