"""Skill discovery and end-to-end synchronization."""

from .discovery import discover_skill_documents
from .orchestrator import build_table_rows, default_author_lookup, sync_readme

__all__ = ["build_table_rows", "default_author_lookup", "discover_skill_documents", "sync_readme"]
