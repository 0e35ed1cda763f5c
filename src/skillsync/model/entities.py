"""Immutable value types passed between extraction, rendering and splicing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SkillMetadata:
    """Metadata extracted from one SKILL.md.

    ``author`` is ``None`` when the document does not declare one; the
    orchestrator resolves the fallback chain afterwards.
    """

    name: str
    description: str
    author: str | None = None


@dataclass(frozen=True)
class TableRow:
    """One rendered README table row before escaping."""

    folder: str
    name: str
    description: str
    author: str


@dataclass(frozen=True)
class SpliceResult:
    """Outcome of replacing the skills table inside a document."""

    text: str
    matched: bool


@dataclass(frozen=True)
class SkippedDocument:
    """A skill document that could not be read."""

    path: Path
    reason: str


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a full synchronization run."""

    target: Path
    rows: tuple[TableRow, ...]
    matched: bool
    changed: bool
    written: bool
    text: str
    skipped: tuple[SkippedDocument, ...] = ()
