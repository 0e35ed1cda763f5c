"""Core data models for skillsync."""

from .entities import SkillMetadata, SkippedDocument, SpliceResult, SyncResult, TableRow

__all__ = [
    "SkillMetadata",
    "SkippedDocument",
    "SpliceResult",
    "SyncResult",
    "TableRow",
]
