"""Config loading and normalization for skillsync runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillsync.config.model import SyncConfig
from skillsync.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    DEFAULT_COMMUNITY_DIR,
    DEFAULT_TARGET,
)
from skillsync.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillsync.constants.table import (
    DEFAULT_LINK_PREFIX,
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    DEFAULT_SECTION_HEADING,
    MIN_DESCRIPTION_LENGTH,
)
from skillsync.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> SyncConfig:
    """Load and validate config from ``skillsync.yaml`` or an explicit path."""
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Root directory does not exist: {root}")

    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        raw: Any = {}
    else:
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    max_length = raw.get("max_description_length", DEFAULT_MAX_DESCRIPTION_LENGTH)
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < MIN_DESCRIPTION_LENGTH:
        raise ConfigError(f"max_description_length must be an integer >= {MIN_DESCRIPTION_LENGTH}")

    return SyncConfig(
        root=root,
        community_dir=_resolve_path(root, _ensure_string(raw, "community_dir", DEFAULT_COMMUNITY_DIR)),
        target=_resolve_path(root, _ensure_string(raw, "target", DEFAULT_TARGET)),
        section_heading=_ensure_string(raw, "section_heading", DEFAULT_SECTION_HEADING),
        link_prefix=_ensure_string(raw, "link_prefix", DEFAULT_LINK_PREFIX, allow_empty=True),
        skill_filename=_ensure_string(raw, "skill_filename", SKILL_MARKDOWN_FILENAME),
        max_description_length=max_length,
        strict=_ensure_bool(raw, "strict", False),
        use_git=_ensure_bool(raw, "use_git", True),
    )


def _ensure_string(raw: dict[str, Any], key_name: str, default: str, *, allow_empty: bool = False) -> str:
    """Read a string value, raising ConfigError on type mismatch."""
    value = raw.get(key_name, default)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    if not allow_empty and not value.strip():
        raise ConfigError(f"{key_name} must not be empty")
    return value.strip()


def _ensure_bool(raw: dict[str, Any], key_name: str, default: bool) -> bool:
    value = raw.get(key_name, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value


def _resolve_path(root: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else (root / path)
