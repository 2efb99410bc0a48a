"""Configuration loading for specreadme (.specreadme.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .files import DEFAULT_README_NAME

CONFIG_FILE_NAME = ".specreadme.yml"


@dataclass
class GitConfig:
    """Settings used when changed files are read from git."""

    diff_base: str = "origin/main"
    path_prefix: Optional[str] = None


@dataclass
class LoggingConfig:
    """Log sinks for CLI runs."""

    verbose: bool = False
    file: Optional[Path] = None


@dataclass
class SpecReadmeConfig:
    """Represents the settings defined in .specreadme.yml."""

    root: Path
    readme_name: str = DEFAULT_README_NAME
    templates_dir: Optional[Path] = None
    git: GitConfig = field(default_factory=GitConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Path) -> SpecReadmeConfig:
    """Load configuration from disk, falling back to defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SpecReadmeConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    config = SpecReadmeConfig(root=root)
    readme_name = _as_str(data.get("readme_name"))
    if readme_name:
        config.readme_name = readme_name

    templates_data = _as_dict(data.get("templates"))
    templates_dir = _as_str(templates_data.get("dir"))
    if templates_dir:
        config.templates_dir = root / templates_dir

    git_data = _as_dict(data.get("git"))
    diff_base = _as_str(git_data.get("diff_base"))
    if diff_base:
        config.git.diff_base = diff_base
    path_prefix = _as_str(git_data.get("path_prefix"))
    if path_prefix:
        config.git.path_prefix = path_prefix

    logging_data = _as_dict(data.get("logging"))
    config.logging.verbose = _as_bool(logging_data.get("verbose")) or False
    log_file = _as_str(logging_data.get("file"))
    if log_file:
        config.logging.file = root / log_file

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    if config_path.name != CONFIG_FILE_NAME:
        return (config_path.parent / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILE_NAME", "GitConfig", "LoggingConfig", "SpecReadmeConfig", "load_config"]
