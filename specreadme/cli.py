"""CLI entrypoints for specreadme commands."""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import Callable, Dict, List

from .builder import ReadMeBuilder
from .config import SpecReadmeConfig, load_config
from .errors import ConfigError, GitRepositoryError, StructuralError
from .files import load_document, read_readme, resolve_readme, write_document_text
from .git.diff import ChangedFilesCollector, with_path_prefix
from .logging import configure_logging, get_logger
from .manipulator import ReadMeManipulator
from .markdown.document import parse
from .markdown.tags import get_input_files, get_input_files_for_tag
from .models import SuppressionItem

CommandHandler = Callable[[argparse.Namespace, SpecReadmeConfig, ReadMeManipulator, Path], None]


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Readme file, or a directory to search upwards from (defaults to current directory).",
    )


def _add_dry_run_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the updated readme instead of writing it.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="specreadme",
        description="Query and update the YAML configuration embedded in API specification readmes.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .specreadme.yml or the directory holding it (defaults to current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tags_parser = subparsers.add_parser("tags", help="List the tags declared in a readme.")
    _add_verbose_option(tags_parser, suppress_default=True)
    _add_path_argument(tags_parser)

    files_parser = subparsers.add_parser(
        "input-files",
        help="List the input files of every tag, or of a single tag.",
    )
    _add_verbose_option(files_parser, suppress_default=True)
    _add_path_argument(files_parser)
    files_parser.add_argument("--tag", help="Only list the input files of this tag.")

    affected_parser = subparsers.add_parser(
        "affected-tags",
        help="List the tags whose input files were changed.",
    )
    _add_verbose_option(affected_parser, suppress_default=True)
    _add_path_argument(affected_parser)
    affected_parser.add_argument(
        "--changed",
        action="append",
        default=[],
        metavar="PATH",
        help="Changed file path; may be repeated. Skips git when given.",
    )
    affected_parser.add_argument(
        "--diff-base",
        default=None,
        help="Commit or ref to compare against when reading changes from git.",
    )
    affected_parser.add_argument(
        "--repo",
        default=".",
        help="Git repository used to compute changed files (defaults to current directory).",
    )

    update_parser = subparsers.add_parser(
        "update-tag",
        help="Set the default tag in the Basic Information block.",
    )
    _add_verbose_option(update_parser, suppress_default=True)
    update_parser.add_argument("tag", help="New default tag.")
    _add_path_argument(update_parser)
    _add_dry_run_option(update_parser)

    add_tag_parser = subparsers.add_parser(
        "add-tag",
        help="Insert a new tag section above the existing ones.",
    )
    _add_verbose_option(add_tag_parser, suppress_default=True)
    add_tag_parser.add_argument("tag", help="Name of the new tag.")
    _add_path_argument(add_tag_parser)
    add_tag_parser.add_argument(
        "--input-file",
        dest="input_files",
        action="append",
        required=True,
        metavar="FILE",
        help="Input file of the new tag; may be repeated.",
    )
    _add_dry_run_option(add_tag_parser)

    suppression_parser = subparsers.add_parser(
        "add-suppression",
        help="Append a suppression directive, creating the Suppression section if needed.",
    )
    _add_verbose_option(suppression_parser, suppress_default=True)
    _add_path_argument(suppression_parser)
    suppression_parser.add_argument("--suppress", required=True, help="Rule to suppress.")
    suppression_parser.add_argument(
        "--where",
        action="append",
        required=True,
        help="JSON path the suppression applies to; may be repeated.",
    )
    suppression_parser.add_argument("--reason", help="Why the rule is suppressed.")
    suppression_parser.add_argument(
        "--from",
        dest="from_",
        action="append",
        default=None,
        help="File the suppression applies to; may be repeated.",
    )
    suppression_parser.add_argument("--text-matches", help="Only suppress messages matching this text.")
    _add_dry_run_option(suppression_parser)

    return parser


def _run_tags(
    args: argparse.Namespace,
    config: SpecReadmeConfig,
    manipulator: ReadMeManipulator,
    readme_path: Path,
) -> None:
    for tag in manipulator.get_all_tags(load_document(readme_path)):
        print(tag)


def _run_input_files(
    args: argparse.Namespace,
    config: SpecReadmeConfig,
    manipulator: ReadMeManipulator,
    readme_path: Path,
) -> None:
    document = load_document(readme_path)
    if args.tag:
        files = get_input_files_for_tag(document, args.tag)
        if files is None:
            raise StructuralError(f"Tag {args.tag} is not defined in {readme_path}")
    else:
        files = list(get_input_files(document))
    for name in files:
        print(name)


def _run_affected_tags(
    args: argparse.Namespace,
    config: SpecReadmeConfig,
    manipulator: ReadMeManipulator,
    readme_path: Path,
) -> None:
    changed: List[str] = list(args.changed)
    if not changed:
        diff_base = args.diff_base or config.git.diff_base
        changed = with_path_prefix(
            ChangedFilesCollector().collect(args.repo, diff_base), config.git.path_prefix
        )
    for tag in manipulator.get_tags_for_files_changed(load_document(readme_path), changed):
        print(tag)


def _run_update_tag(
    args: argparse.Namespace,
    config: SpecReadmeConfig,
    manipulator: ReadMeManipulator,
    readme_path: Path,
) -> None:
    updated = manipulator.update_latest_tag(load_document(readme_path), args.tag)
    _emit(readme_path, updated, dry_run=bool(args.dry_run))


def _run_add_tag(
    args: argparse.Namespace,
    config: SpecReadmeConfig,
    manipulator: ReadMeManipulator,
    readme_path: Path,
) -> None:
    readme = read_readme(readme_path)
    if args.tag in manipulator.get_all_tags(parse(readme)):
        raise StructuralError(f"Tag {args.tag} is already defined in {readme_path}")
    updated = manipulator.insert_tag_definition(readme, args.input_files, args.tag)
    _emit(readme_path, updated, dry_run=bool(args.dry_run))


def _run_add_suppression(
    args: argparse.Namespace,
    config: SpecReadmeConfig,
    manipulator: ReadMeManipulator,
    readme_path: Path,
) -> None:
    readme = read_readme(readme_path)
    document = parse(readme)
    if not manipulator.has_suppression_block(document):
        document = parse(manipulator.add_suppression_block(readme))

    item = SuppressionItem(
        suppress=args.suppress,
        where=_single_or_list(args.where),
        reason=args.reason,
        from_=_single_or_list(args.from_) if args.from_ else None,
        text_matches=args.text_matches,
    )
    manipulator.add_suppression(document, item)
    _emit(readme_path, document.to_string(), dry_run=bool(args.dry_run))


_COMMANDS: Dict[str, CommandHandler] = {
    "tags": _run_tags,
    "input-files": _run_input_files,
    "affected-tags": _run_affected_tags,
    "update-tag": _run_update_tag,
    "add-tag": _run_add_tag,
    "add-suppression": _run_add_suppression,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for specreadme commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    configure_logging(
        verbose=bool(args.verbose) or config.logging.verbose,
        log_file=config.logging.file,
    )
    manipulator = ReadMeManipulator(
        get_logger("manipulator"), ReadMeBuilder(config.templates_dir)
    )

    try:
        readme_path = resolve_readme(args.path, config.readme_name)
        _COMMANDS[args.command](args, config, manipulator, readme_path)
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except (StructuralError, ConfigError) as exc:
        parser.exit(1, f"specreadme {args.command} failed: {exc}\n")
    except GitRepositoryError as exc:
        parser.exit(1, f"{exc}\nPass --repo or --changed to choose the changed files.\n")
    except subprocess.CalledProcessError as exc:
        parser.exit(1, f"git failed: {exc}\nRun with --verbose for more details.\n")


def _emit(readme_path: Path, text: str, *, dry_run: bool) -> None:
    if dry_run:
        sys.stdout.write(text)
        return
    write_document_text(readme_path, text)
    print(f"Readme updated at {_relativize(readme_path)}")


def _single_or_list(values: List[str]) -> str | List[str]:
    return values[0] if len(values) == 1 else list(values)


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
