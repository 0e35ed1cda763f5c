"""Tests for markdown table rendering."""

from __future__ import annotations

import pytest

from skillsync.constants.table import PLACEHOLDER_ROW, TABLE_HEADER, TABLE_SEPARATOR
from skillsync.model import TableRow
from skillsync.reporting import escape_cell, render_row, render_table, truncate_cell


def _row(folder: str = "alpha", description: str = "Does alpha things.", **kwargs: str) -> TableRow:
    return TableRow(
        folder=folder,
        name=kwargs.get("name", folder),
        description=description,
        author=kwargs.get("author", "alice"),
    )


def test_render_table_empty_input_emits_placeholder() -> None:
    rendered = render_table([])

    assert rendered.splitlines() == [TABLE_HEADER, TABLE_SEPARATOR, PLACEHOLDER_ROW]
    assert rendered.endswith("\n")


def test_render_table_matches_scenario_rows() -> None:
    rows = [
        _row("alpha", name="Alpha Skill"),
        _row("beta", description="Community contributed skill", author="Community"),
    ]

    lines = render_table(rows).splitlines()

    assert lines[2:] == [
        "| [Alpha Skill](community/alpha) | Does alpha things. | @alice |",
        "| [beta](community/beta) | Community contributed skill | @Community |",
    ]


def test_render_table_is_deterministic() -> None:
    rows = [_row("a"), _row("b")]

    assert render_table(rows) == render_table(list(rows))


def test_render_row_custom_link_prefix() -> None:
    assert render_row(_row(), link_prefix="skills/community/").startswith("| [alpha](skills/community/alpha) |")
    assert render_row(_row(), link_prefix="").startswith("| [alpha](alpha) |")


def test_render_row_escapes_pipes_in_every_cell() -> None:
    row = TableRow(folder="pipe", name="A|B", description="x | y", author="o|p")

    assert render_row(row) == "| [A\\|B](community/pipe) | x \\| y | @o\\|p |"


def test_escape_cell_flattens_newlines() -> None:
    assert escape_cell("one\ntwo\r\nthree") == "one two three"


def test_truncate_long_description_to_exact_length() -> None:
    description = "x" * 120

    cell = truncate_cell(description, 80)

    assert len(cell) == 80
    assert cell.endswith("...")
    assert cell == "x" * 77 + "..."


@pytest.mark.parametrize("length", [0, 1, 79, 80])
def test_short_description_rendered_verbatim(length: int) -> None:
    description = "y" * length

    assert truncate_cell(description, 80) == description


def test_truncate_never_splits_escaped_pipe() -> None:
    escaped = escape_cell("a" * 6 + "|" + "b" * 10)

    cell = truncate_cell(escaped, 10)

    assert cell == "aaaaaa..."
    assert not cell.replace("...", "").endswith("\\")


def test_render_row_truncates_description_cell() -> None:
    row = _row(description="word " * 40)

    description_cell = render_row(row, max_length=20).split(" | ")[1]

    assert len(description_cell) == 20
    assert description_cell.endswith("...")
