"""Root exception type."""

from __future__ import annotations


class SkillsyncError(Exception):
    """Base class for all skillsync errors."""
