"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillsync.yaml"

DEFAULT_COMMUNITY_DIR: str = "community"
DEFAULT_TARGET: str = "README.md"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset(
    {
        "community_dir",
        "target",
        "section_heading",
        "link_prefix",
        "skill_filename",
        "max_description_length",
        "strict",
        "use_git",
    }
)

TARGET_TEMP_PREFIX: str = ".tmp-"
TARGET_TEMP_SUFFIX: str = ".md"
