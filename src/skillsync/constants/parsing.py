"""Constants for SKILL.md metadata parsing."""

from __future__ import annotations

import re

FRONTMATTER_DELIMITER: str = "---"
BYTE_ORDER_MARK: str = "\ufeff"

NAME_FIELD: str = "name"
DESCRIPTION_FIELD: str = "description"
METADATA_FIELD: str = "metadata"
AUTHOR_FIELD: str = "author"

DESCRIPTION_FALLBACK: str = "Community contributed skill"
TRIGGER_MARKER: str = "Trigger:"

FIELD_LINE_PATTERN = re.compile(r"^\s*([A-Za-z0-9_-]+):\s?(.*)$")
TOP_LEVEL_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+:")
BLOCK_SCALAR_PATTERN = re.compile(r"^[>|][+-]?\d*$")
WHITESPACE_RUN_PATTERN = re.compile(r"\s+")
