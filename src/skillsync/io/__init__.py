"""Shared file I/O helpers."""

from .text_io import write_text_atomic

__all__ = ["write_text_atomic"]
