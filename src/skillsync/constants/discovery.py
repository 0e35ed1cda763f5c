"""Constants for skill discovery and author resolution."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
HIDDEN_DIR_PREFIX: str = "."

AUTHOR_FALLBACK: str = "Community"
GIT_EXECUTABLE: str = "git"
GIT_LOG_TIMEOUT_SECONDS: float = 10.0
