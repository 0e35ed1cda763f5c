"""Process exit codes for the CLI."""

from __future__ import annotations

EXIT_OK: int = 0
EXIT_SYNC_ERROR: int = 1
EXIT_STALE: int = 1
EXIT_CONFIG_ERROR: int = 2
EXIT_SECTION_NOT_FOUND: int = 3
