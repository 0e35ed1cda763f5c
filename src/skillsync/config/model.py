"""Config data model for skillsync runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillsync.constants.config import DEFAULT_COMMUNITY_DIR, DEFAULT_TARGET
from skillsync.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillsync.constants.table import (
    DEFAULT_LINK_PREFIX,
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    DEFAULT_SECTION_HEADING,
)


@dataclass(frozen=True)
class SyncConfig:
    """Resolved synchronization config.

    ``community_dir`` and ``target`` are absolute once produced by
    :func:`skillsync.config.load_config`.
    """

    root: Path = Path(".")
    community_dir: Path = Path(DEFAULT_COMMUNITY_DIR)
    target: Path = Path(DEFAULT_TARGET)
    section_heading: str = DEFAULT_SECTION_HEADING
    link_prefix: str = DEFAULT_LINK_PREFIX
    skill_filename: str = SKILL_MARKDOWN_FILENAME
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH
    strict: bool = False
    use_git: bool = True
