"""Markdown table rendering for discovered skills."""

from __future__ import annotations

from collections.abc import Sequence

from skillsync.constants.table import (
    CELL_ESCAPES,
    DEFAULT_LINK_PREFIX,
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    PLACEHOLDER_ROW,
    TABLE_HEADER,
    TABLE_SEPARATOR,
    TRUNCATION_MARKER,
)
from skillsync.model import TableRow


def render_table(
    rows: Sequence[TableRow],
    *,
    max_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
    link_prefix: str = DEFAULT_LINK_PREFIX,
) -> str:
    """Render the header plus one line per row, newline-terminated.

    Rows are emitted in the order given; callers pass them sorted by
    folder name. An empty sequence renders the placeholder row.
    """
    lines = [TABLE_HEADER, TABLE_SEPARATOR]
    if rows:
        lines.extend(render_row(row, max_length=max_length, link_prefix=link_prefix) for row in rows)
    else:
        lines.append(PLACEHOLDER_ROW)
    return "\n".join(lines) + "\n"


def render_row(
    row: TableRow,
    *,
    max_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
    link_prefix: str = DEFAULT_LINK_PREFIX,
) -> str:
    """Render a single ``| [name](link) | description | @author |`` line."""
    link = f"{link_prefix.rstrip('/')}/{row.folder}" if link_prefix else row.folder
    name = escape_cell(row.name)
    description = truncate_cell(escape_cell(row.description), max_length)
    author = escape_cell(row.author)
    return f"| [{name}]({link}) | {description} | @{author} |"


def escape_cell(value: str) -> str:
    """Make *value* safe inside a single markdown table cell."""
    escaped = " ".join(value.splitlines())
    for raw, replacement in CELL_ESCAPES:
        escaped = escaped.replace(raw, replacement)
    return escaped


def truncate_cell(value: str, max_length: int) -> str:
    """Cut *value* to *max_length* characters including the marker.

    A cut that would separate a backslash from the pipe it escapes drops
    the backslash too.
    """
    if len(value) <= max_length:
        return value
    keep = max_length - len(TRUNCATION_MARKER)
    head = value[:keep]
    if head.endswith("\\") and value[keep] == "|":
        head = head[:-1]
    return head + TRUNCATION_MARKER
