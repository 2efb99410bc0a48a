"""Tests for changed file collection from git."""

from __future__ import annotations

from pathlib import Path

import pytest

from specreadme.errors import GitRepositoryError
from specreadme.git.diff import ChangedFilesCollector, with_path_prefix


def _make_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / ".git").mkdir()
    return repo


def test_collector_merges_diff_and_status(tmp_path: Path) -> None:
    repo = _make_repo(tmp_path)
    calls: list[tuple[list[str], Path]] = []

    def runner(args, cwd, capture_output=False):  # type: ignore[no-untyped-def]
        calls.append((list(args), Path(cwd)))
        if args[:3] == ["git", "diff", "--name-only"]:
            return "specification/cdn/resource-manager/Microsoft.Cdn/stable/2017-10-12/cdn.json\n"
        if args[:2] == ["git", "status"]:
            return (
                " M specification/cdn/resource-manager/Microsoft.Cdn/stable/2017-10-12/cdn.json\n"
                "?? specification/cdn/resource-manager/readme.md\n"
                "R  old.json -> specification/cdn/new.json\n"
            )
        return ""

    files = ChangedFilesCollector(runner=runner).collect(repo, "origin/main")

    assert files == [
        "specification/cdn/resource-manager/Microsoft.Cdn/stable/2017-10-12/cdn.json",
        "specification/cdn/resource-manager/readme.md",
        "specification/cdn/new.json",
    ]
    assert calls[0][0] == ["git", "diff", "--name-only", "origin/main...HEAD"]
    assert calls[0][1] == repo


def test_collector_requires_git_repository(tmp_path: Path) -> None:
    collector = ChangedFilesCollector(runner=lambda *args, **kwargs: "")

    with pytest.raises(RuntimeError):
        collector.collect(tmp_path, "origin/main")


def test_collector_raises_git_repository_error(tmp_path: Path) -> None:
    collector = ChangedFilesCollector(runner=lambda *args, **kwargs: "")

    with pytest.raises(GitRepositoryError, match="not a Git repository"):
        collector.collect(tmp_path / "plain", "origin/main")


def test_with_path_prefix_joins_repository_relative_paths() -> None:
    paths = [
        "Microsoft.Cdn/stable/2017-04-02/cdn.json",
        "/readme.md",
        "specification/cdn/resource-manager/readme.go.md",
    ]

    assert with_path_prefix(paths, "specification/cdn/resource-manager/") == [
        "specification/cdn/resource-manager/Microsoft.Cdn/stable/2017-04-02/cdn.json",
        "specification/cdn/resource-manager/readme.md",
        "specification/cdn/resource-manager/readme.go.md",
    ]
    assert with_path_prefix(paths, None) == paths
