"""Changed file discovery from git."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List

from ..errors import GitRepositoryError
from ..logging import get_logger

_LOGGER = get_logger("git.diff")


class ChangedFilesCollector:
    """Lists files changed against a base ref, including uncommitted changes."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner

    def collect(self, repo_path: str | Path, diff_base: str) -> List[str]:
        repo = Path(repo_path)
        if not (repo / ".git").exists():
            raise GitRepositoryError(f"{repo_path} is not a Git repository")

        args = ["git", "diff", "--name-only", f"{diff_base}...HEAD"]
        output = self._run(args, cwd=repo, capture_output=True)
        files = [line.strip().replace("\\", "/") for line in output.splitlines() if line.strip()]
        # Include staged and unstaged changes relative to HEAD.
        status = self._run(["git", "status", "--short"], cwd=repo, capture_output=True)
        for line in status.splitlines():
            stripped = line.strip()
            if not stripped:
                continue
            path = stripped.split(maxsplit=1)[-1]
            if " -> " in path:
                path = path.split(" -> ", 1)[1]
            path = path.replace("\\", "/")
            if path not in files:
                files.append(path)
        _LOGGER.debug("Collected %d changed files against %s", len(files), diff_base)
        return files

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        return self._runner(args, cwd=cwd, capture_output=capture_output)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        import subprocess

        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
        return completed.stdout if capture_output else ""


def with_path_prefix(paths: Iterable[str], prefix: str | None) -> List[str]:
    """Prepend ``prefix`` to each path that does not already start with it."""
    if not prefix:
        return list(paths)
    base = prefix.rstrip("/") + "/"
    return [path if path.startswith(base) else f"{base}{path.lstrip('/')}" for path in paths]


__all__ = ["ChangedFilesCollector", "with_path_prefix"]
