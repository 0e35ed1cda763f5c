"""End-to-end README synchronization."""

from __future__ import annotations

import logging
from pathlib import Path

from skillsync.config import SyncConfig
from skillsync.constants.config import TARGET_TEMP_PREFIX, TARGET_TEMP_SUFFIX
from skillsync.exceptions import SyncError
from skillsync.io import write_text_atomic
from skillsync.model import SkippedDocument, SyncResult, TableRow
from skillsync.parsers import extract_skill_metadata, resolve_author
from skillsync.reporting import render_table, splice_table
from skillsync.scanner.discovery import discover_skill_documents
from skillsync.vcs import AuthorLookup, GitAuthorLookup, NullAuthorLookup

logger = logging.getLogger(__name__)


def sync_readme(
    config: SyncConfig,
    *,
    author_lookup: AuthorLookup | None = None,
    write: bool = True,
) -> SyncResult:
    """Regenerate the skills table in ``config.target``.

    The target is written only when the section matched, the content
    changed and *write* is true. A missing section is not an error here;
    the caller decides how to report ``SyncResult.matched``.
    """
    lookup = author_lookup if author_lookup is not None else default_author_lookup(config)
    rows, skipped = build_table_rows(config, lookup)
    table = render_table(
        rows,
        max_length=config.max_description_length,
        link_prefix=config.link_prefix,
    )

    original = _read_target(config.target)
    spliced = splice_table(original, table, section_heading=config.section_heading)
    changed = spliced.matched and spliced.text != original

    written = False
    if changed and write:
        try:
            write_text_atomic(
                path=config.target,
                content=spliced.text,
                temp_prefix=TARGET_TEMP_PREFIX,
                temp_suffix=TARGET_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise SyncError(f"Failed to write {config.target}: {exc}") from exc
        written = True
        logger.debug("Wrote %d row(s) to %s", len(rows), config.target)

    return SyncResult(
        target=config.target,
        rows=tuple(rows),
        matched=spliced.matched,
        changed=changed,
        written=written,
        text=spliced.text,
        skipped=tuple(skipped),
    )


def build_table_rows(
    config: SyncConfig,
    author_lookup: AuthorLookup,
) -> tuple[list[TableRow], list[SkippedDocument]]:
    """Extract one row per readable skill document, ordered by folder name."""
    rows: list[TableRow] = []
    skipped: list[SkippedDocument] = []

    for folder_name, skill_file in discover_skill_documents(config.community_dir, config.skill_filename):
        try:
            text = skill_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping unreadable skill document %s: %s", skill_file, exc)
            skipped.append(SkippedDocument(path=skill_file, reason=str(exc)))
            continue

        metadata = extract_skill_metadata(text, folder_name=folder_name)
        rows.append(
            TableRow(
                folder=folder_name,
                name=metadata.name,
                description=metadata.description,
                author=resolve_author(metadata, skill_file, author_lookup),
            )
        )

    return rows, skipped


def default_author_lookup(config: SyncConfig) -> AuthorLookup:
    """Return the git-backed lookup unless git is disabled in *config*."""
    if config.use_git:
        return GitAuthorLookup(config.root)
    return NullAuthorLookup()


def _read_target(path: Path) -> str:
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SyncError(f"Failed to read {path}: {exc}") from exc
