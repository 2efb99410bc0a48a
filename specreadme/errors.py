"""Exception types raised by specreadme."""

from __future__ import annotations


class StructuralError(RuntimeError):
    """Raised when a required readme section is missing or has the wrong shape."""


class ConfigError(RuntimeError):
    """Raised when the configuration file or a template cannot be loaded."""


class ReadMeNotFoundError(FileNotFoundError):
    """Raised when no readme can be located for a path."""


class GitRepositoryError(RuntimeError):
    """Raised when changed files are requested from a directory that is not a git checkout."""


__all__ = ["ConfigError", "GitRepositoryError", "ReadMeNotFoundError", "StructuralError"]
