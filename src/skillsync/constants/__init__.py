"""Shared constants for skillsync."""
