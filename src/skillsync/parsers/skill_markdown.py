"""Metadata extraction for SKILL.md files with a frontmatter block.

Extraction never raises on document content. A missing block, a missing
field or YAML that does not parse all degrade to documented fallbacks:
the folder name for ``name``, a placeholder sentence for ``description``
and ``None`` for ``author`` (resolved later by :func:`resolve_author`).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeAlias

import yaml

from skillsync.constants.discovery import AUTHOR_FALLBACK
from skillsync.constants.parsing import (
    AUTHOR_FIELD,
    BLOCK_SCALAR_PATTERN,
    BYTE_ORDER_MARK,
    DESCRIPTION_FALLBACK,
    DESCRIPTION_FIELD,
    FIELD_LINE_PATTERN,
    FRONTMATTER_DELIMITER,
    METADATA_FIELD,
    NAME_FIELD,
    TOP_LEVEL_KEY_PATTERN,
    TRIGGER_MARKER,
    WHITESPACE_RUN_PATTERN,
)
from skillsync.model import SkillMetadata
from skillsync.vcs import AuthorLookup

RawFields: TypeAlias = dict[str, str | None]


def split_frontmatter(text: str) -> tuple[list[str] | None, list[str]]:
    """Split *text* into frontmatter lines and body lines.

    The block exists only when the first line is the delimiter; the next
    delimiter line closes it. An unterminated block counts as absent.
    """
    lines = text.lstrip(BYTE_ORDER_MARK).splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None, lines

    end = _find_frontmatter_end(lines)
    if end is None:
        return None, lines
    return lines[1:end], lines[end + 1 :]


def extract_skill_metadata(text: str, *, folder_name: str) -> SkillMetadata:
    """Extract name, description and declared author from SKILL.md text."""
    block, _ = split_frontmatter(text)
    fields = _read_fields(block) if block is not None else {}

    name = (fields.get(NAME_FIELD) or "").strip() or folder_name
    description = normalize_description(fields.get(DESCRIPTION_FIELD))
    author = _clean_author(fields.get(AUTHOR_FIELD))
    return SkillMetadata(name=name, description=description, author=author)


def normalize_description(raw: str | None) -> str:
    """Collapse whitespace and drop the trailing ``Trigger:`` clause."""
    if raw is None:
        return DESCRIPTION_FALLBACK
    text = WHITESPACE_RUN_PATTERN.sub(" ", raw).strip()
    marker = text.find(TRIGGER_MARKER)
    if marker != -1:
        text = text[:marker].rstrip()
    return text or DESCRIPTION_FALLBACK


def resolve_author(
    metadata: SkillMetadata,
    path: Path,
    lookup: AuthorLookup | None = None,
) -> str:
    """Return the declared author, else the last committer, else the fallback."""
    if metadata.author:
        return metadata.author
    if lookup is not None:
        found = _clean_author(lookup(path))
        if found:
            return found
    return AUTHOR_FALLBACK


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() == FRONTMATTER_DELIMITER:
            return index
    return None


def _read_fields(block: list[str]) -> RawFields:
    block_text = "\n".join(block)
    if not block_text.strip():
        return {}
    try:
        payload = yaml.safe_load(block_text)
    except yaml.YAMLError:
        return _scan_fields(block)
    if not isinstance(payload, dict):
        return _scan_fields(block)

    metadata = payload.get(METADATA_FIELD)
    return {
        NAME_FIELD: _scalar(payload.get(NAME_FIELD)),
        DESCRIPTION_FIELD: _scalar(payload.get(DESCRIPTION_FIELD)),
        AUTHOR_FIELD: _scalar(metadata.get(AUTHOR_FIELD)) if isinstance(metadata, dict) else None,
    }


def _scan_fields(block: list[str]) -> RawFields:
    """Line-oriented reading for blocks that are not valid YAML."""
    name: str | None = None
    author: str | None = None
    description_parts: list[str] | None = None
    collecting = False
    in_metadata = False

    for line in block:
        top_level = TOP_LEVEL_KEY_PATTERN.match(line) is not None
        if collecting:
            if not top_level:
                description_parts.append(line.strip())
                continue
            collecting = False
        if top_level:
            in_metadata = False

        match = FIELD_LINE_PATTERN.match(line)
        if match is None:
            continue
        key, value = match.group(1), match.group(2).strip()

        if in_metadata:
            if key == AUTHOR_FIELD and author is None:
                author = _unquote(value)
        elif key == NAME_FIELD and name is None:
            name = _unquote(value)
        elif top_level and key == DESCRIPTION_FIELD and description_parts is None:
            description_parts = [] if BLOCK_SCALAR_PATTERN.match(value) else [_unquote(value)]
            collecting = True
        elif top_level and key == METADATA_FIELD:
            in_metadata = True

    description = " ".join(description_parts) if description_parts is not None else None
    return {NAME_FIELD: name, DESCRIPTION_FIELD: description, AUTHOR_FIELD: author}


def _scalar(value: Any) -> str | None:
    if value is None or isinstance(value, (list, dict)):
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def _clean_author(raw: str | None) -> str | None:
    if raw is None:
        return None
    cleaned = raw.strip().lstrip("@").strip()
    return cleaned or None
