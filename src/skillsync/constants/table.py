"""Constants for README table rendering and splicing."""

from __future__ import annotations

import re

TABLE_HEADER: str = "| Skill | Description | Author |"
TABLE_SEPARATOR: str = "|-------|-------------|--------|"
PLACEHOLDER_ROW: str = "| *Coming soon* | Be the first to contribute! | - |"

DEFAULT_MAX_DESCRIPTION_LENGTH: int = 80
MIN_DESCRIPTION_LENGTH: int = 4
TRUNCATION_MARKER: str = "..."

CELL_ESCAPES: tuple[tuple[str, str], ...] = (("|", "\\|"),)

DEFAULT_SECTION_HEADING: str = "## Community Skills"
DEFAULT_LINK_PREFIX: str = "community"

TABLE_ROW_PREFIX: str = "|"
TABLE_HEADER_PATTERN = re.compile(
    r"^\|\s*Skill\s*\|\s*Description\s*\|\s*Author\s*\|(?:[^|\n]*\|)?\s*$"
)
HEADING_PATTERN = re.compile(r"^(#{1,6})\s")
