"""Replace the skills table inside a markdown document.

The splicer walks the document line by line through three states:

``OUTSIDE_SECTION``
    Copy lines until the section heading appears. Trailing text after the
    heading, such as a count or an emoji, still counts as the section.
``SEEKING_HEADER``
    Copy lines until a table header appears. A heading of the same or a
    higher level closes the section without a match.
``IN_TABLE``
    Drop old table rows until the first line that is not a row, which is
    copied and ends the replacement.

Only the first matching table is replaced. When nothing matches the input
is returned unchanged.
"""

from __future__ import annotations

import logging
from enum import Enum

from skillsync.constants.table import (
    DEFAULT_SECTION_HEADING,
    HEADING_PATTERN,
    TABLE_HEADER_PATTERN,
    TABLE_ROW_PREFIX,
)
from skillsync.model import SpliceResult

logger = logging.getLogger(__name__)


class SpliceState(Enum):
    OUTSIDE_SECTION = "outside_section"
    SEEKING_HEADER = "seeking_header"
    IN_TABLE = "in_table"


def splice_table(
    document: str,
    table: str,
    *,
    section_heading: str = DEFAULT_SECTION_HEADING,
) -> SpliceResult:
    """Return *document* with the section's table replaced by *table*."""
    heading = section_heading.strip()
    section_level = _heading_level(heading)

    output: list[str] = []
    state = SpliceState.OUTSIDE_SECTION
    matched = False

    for line in document.splitlines(keepends=True):
        content = line.rstrip("\r\n")

        if state is SpliceState.IN_TABLE:
            if content.startswith(TABLE_ROW_PREFIX):
                continue
            output.append(line)
            state = SpliceState.OUTSIDE_SECTION
            continue

        if state is SpliceState.SEEKING_HEADER:
            if TABLE_HEADER_PATTERN.match(content):
                output.append(table)
                matched = True
                state = SpliceState.IN_TABLE
                continue
            level = _heading_level(content)
            if level is not None and section_level is not None and level <= section_level:
                state = SpliceState.OUTSIDE_SECTION
            output.append(line)
            continue

        if not matched and _is_section_heading(content, heading):
            state = SpliceState.SEEKING_HEADER
        output.append(line)

    if not matched:
        logger.warning("Section %r with a skills table header not found; document left unchanged", heading)
        return SpliceResult(text=document, matched=False)

    return SpliceResult(text="".join(output), matched=True)


def _is_section_heading(line: str, heading: str) -> bool:
    if not line.startswith(heading):
        return False
    rest = line[len(heading) :]
    return not rest or rest[0].isspace()


def _heading_level(line: str) -> int | None:
    match = HEADING_PATTERN.match(line)
    if match is None:
        return None
    return len(match.group(1))
