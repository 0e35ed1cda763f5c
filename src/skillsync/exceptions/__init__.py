"""Shared exception hierarchy for skillsync."""

from __future__ import annotations

from .base import SkillsyncError
from .config import ConfigError
from .sync import SyncError

__all__ = [
    "ConfigError",
    "SkillsyncError",
    "SyncError",
]
