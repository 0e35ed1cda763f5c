"""Exceptions raised while reading or writing the target document."""

from __future__ import annotations

from skillsync.exceptions.base import SkillsyncError


class SyncError(SkillsyncError, OSError):
    """Raised when the target document cannot be read or replaced."""
