"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLSYNC"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: regenerate the community skills table in a README"
SCANNING_MESSAGE: str = "Scanning community skills..."
UPDATED_MESSAGE: str = "{target} updated successfully!"
UNCHANGED_MESSAGE: str = "{target} already up to date."
STALE_MESSAGE: str = "{target} is out of date; run skillsync to regenerate the table."
DONE_MESSAGE: str = "Done!"
