"""Configuration-related exceptions."""

from __future__ import annotations

from skillsync.exceptions.base import SkillsyncError


class ConfigError(SkillsyncError, ValueError):
    """Raised when sync configuration is invalid."""
