"""Parsers for SKILL.md documents."""

from .skill_markdown import (
    extract_skill_metadata,
    normalize_description,
    resolve_author,
    split_frontmatter,
)

__all__ = [
    "extract_skill_metadata",
    "normalize_description",
    "resolve_author",
    "split_frontmatter",
]
