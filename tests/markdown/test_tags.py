"""Tests for tag settings extraction."""

from __future__ import annotations

import pytest

from specreadme.markdown.document import parse
from specreadme.markdown.tags import (
    get_input_files,
    get_input_files_for_tag,
    get_tags_to_settings_mapping,
    input_file,
    tag_name,
)

from tests._fixtures.readmes import CDN_README, SUBSCRIPTIONS_README


@pytest.mark.parametrize(
    ("info", "expected"),
    [
        ("yaml $(tag) == 'package-a'", "package-a"),
        ('yaml $(tag) == "package-b"', "package-b"),
        ("yaml $(tag)=='package-c'", "package-c"),
        # Mixed quotes are not validated: the first quote opens, the next one closes.
        ("yaml $(tag) == 'package-d\"", "package-d"),
        ("yaml $(tag) == 'package-e' && $(go)", "package-e"),
        ("yaml $(tag) == 'package-f' || $(tag) == 'package-g'", "package-f"),
        ("yaml $(go) && $(tag) == 'package-h'", "package-h"),
        ("yaml $(tag) == ''", None),
        ("yaml $(TAG) == 'package-i'", None),
        ("yaml $(tag) == package-j", None),
        ("yaml $(go)", None),
        ("yaml", None),
    ],
)
def test_tag_name_pattern(info: str, expected: str | None) -> None:
    assert tag_name(info) == expected


def test_mapping_lists_tags_in_document_order() -> None:
    mapping = get_tags_to_settings_mapping(parse(CDN_README))

    assert list(mapping) == ["package-2017-10", "package-2017-04"]
    assert mapping["package-2017-10"] == {
        "input-file": ["Microsoft.Cdn/stable/2017-10-12/cdn.json"]
    }


def test_mapping_skips_blocks_that_are_not_tag_settings() -> None:
    text = (
        "# Tags\n\n"
        "```yaml $(tag) == 'broken'\ninput-file: [unclosed\n```\n\n"
        "```yaml $(tag) == 'no-files'\nopenapi-type: arm\n```\n\n"
        "```yaml $(tag) == 'scalar'\njust text\n```\n\n"
        "```yaml $(tag) == 'empty'\n```\n\n"
        "```yaml\ninput-file: untagged.json\n```\n\n"
        "```yaml $(tag) == 'good'\ninput-file: good.json\n```\n"
    )

    mapping = get_tags_to_settings_mapping(parse(text))

    assert mapping == {"good": {"input-file": "good.json"}}


def test_duplicate_tags_keep_last_settings_and_first_position() -> None:
    text = (
        "```yaml $(tag) == 'a'\ninput-file: first.json\n```\n\n"
        "```yaml $(tag) == 'b'\ninput-file: b.json\n```\n\n"
        "```yaml $(tag) == 'a'\ninput-file: second.json\n```\n"
    )

    mapping = get_tags_to_settings_mapping(parse(text))

    assert list(mapping) == ["a", "b"]
    assert mapping["a"] == {"input-file": "second.json"}


def test_input_file_normalises_to_list() -> None:
    assert input_file({"input-file": "single.json"}) == ["single.json"]
    assert input_file({"input-file": ["a.json", "b.json"]}) == ["a.json", "b.json"]


def test_get_input_files_is_lazy_and_restartable() -> None:
    document = parse(CDN_README)

    files = get_input_files(document)

    assert not isinstance(files, list)
    assert list(files) == [
        "Microsoft.Cdn/stable/2017-10-12/cdn.json",
        "Microsoft.Cdn/stable/2017-04-02/cdn.json",
    ]
    assert list(files) == []
    assert len(list(get_input_files(document))) == 2


def test_get_input_files_for_tag_distinguishes_missing_from_empty() -> None:
    text = CDN_README + "\n```yaml $(tag) == 'none'\ninput-file: []\n```\n"
    document = parse(text)

    assert get_input_files_for_tag(document, "package-2017-04") == [
        "Microsoft.Cdn/stable/2017-04-02/cdn.json"
    ]
    assert get_input_files_for_tag(document, "none") == []
    assert get_input_files_for_tag(document, "missing") is None


def test_indented_input_file_list_is_read() -> None:
    files = get_input_files_for_tag(parse(SUBSCRIPTIONS_README), "package-2015-11-01")

    assert files is not None
    assert len(files) == 3
    assert files[0] == "Microsoft.Subscriptions.Admin/preview/2015-11-01/Subscriptions.json"


def test_mapping_sees_mutated_block() -> None:
    document = parse(CDN_README)
    block = next(node for node in document.walk() if node.info == "yaml $(tag) == 'package-2017-04'")

    block.literal = "input-file: moved.json\n"

    assert get_input_files_for_tag(document, "package-2017-04") == ["moved.json"]


def test_mapping_skips_blocks_with_invalid_dates() -> None:
    document = parse(
        "```yaml $(tag) == 'a'\ninput-file: a.json\n```\n\n"
        "```yaml\ncreated: 2019-13-45\n```\n\n"
        "```yaml $(tag) == 'b'\ninput-file: b.json\nreleased: 2019-02-30\n```\n"
    )

    assert get_tags_to_settings_mapping(document) == {"a": {"input-file": "a.json"}}
