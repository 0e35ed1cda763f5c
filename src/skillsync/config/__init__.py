"""Configuration loading and normalization for skillsync runs."""

from __future__ import annotations

from skillsync.config.loader import load_config
from skillsync.config.model import SyncConfig

__all__ = ["SyncConfig", "load_config"]
