"""Discovery of community skill folders."""

from __future__ import annotations

import logging
from pathlib import Path

from skillsync.constants.discovery import HIDDEN_DIR_PREFIX, SKILL_MARKDOWN_FILENAME
from skillsync.exceptions import SyncError

logger = logging.getLogger(__name__)


def discover_skill_documents(
    community_dir: Path,
    skill_filename: str = SKILL_MARKDOWN_FILENAME,
) -> list[tuple[str, Path]]:
    """Return ``(folder_name, skill_file)`` pairs sorted by folder name.

    Only immediate subdirectories are considered. Folders without the
    skill file, and hidden folders, are skipped. A community directory that
    exists but cannot be listed raises ``SyncError``.
    """
    if not community_dir.is_dir():
        logger.warning("Community directory not found: %s", community_dir)
        return []

    discovered: list[tuple[str, Path]] = []
    try:
        entries = list(community_dir.iterdir())
    except OSError as exc:
        raise SyncError(f"Failed to list {community_dir}: {exc}") from exc

    for entry in entries:
        if entry.name.startswith(HIDDEN_DIR_PREFIX) or not entry.is_dir():
            continue
        skill_file = entry / skill_filename
        if skill_file.is_file():
            discovered.append((entry.name, skill_file))

    return sorted(discovered, key=lambda item: item[0])
