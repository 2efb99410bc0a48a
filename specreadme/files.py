"""Locating, reading and writing readme files on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .errors import ReadMeNotFoundError
from .logging import get_logger
from .markdown.document import MarkdownDocument, parse

DEFAULT_README_NAME = "readme.md"

_LOGGER = get_logger("files")


def find_readme(directory: Path | str, name: str = DEFAULT_README_NAME) -> Optional[Path]:
    """Return the closest ``name`` file in ``directory`` or one of its parents."""
    current = Path(directory).expanduser().resolve()
    while True:
        candidate = current / name
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def resolve_readme(path: Path | str, name: str = DEFAULT_README_NAME) -> Path:
    """Return ``path`` when it is a file, otherwise search upwards from it."""
    target = Path(path).expanduser()
    if target.is_file():
        return target.resolve()
    found = find_readme(target, name)
    if found is None:
        raise ReadMeNotFoundError(f"No {name} found at or above {target}")
    return found


def read_readme(path: Path) -> str:
    # newline="" keeps CRLF files byte-identical on write back.
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def load_document(path: Path) -> MarkdownDocument:
    return parse(read_readme(path))


def write_document_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)
    _LOGGER.info("Updated %s", path)


__all__ = [
    "DEFAULT_README_NAME",
    "find_readme",
    "load_document",
    "read_readme",
    "resolve_readme",
    "write_document_text",
]
