"""Tests for replacing the skills table inside a markdown document."""

from __future__ import annotations

import logging

import pytest

from skillsync.reporting import splice_table

NEW_TABLE = "| Skill | Description | Author |\n|-------|-------------|--------|\n| [a](community/a) | A | @x |\n"

DOCUMENT = """# Title

## Community Skills

Intro paragraph.

| Skill | Description | Author |
|-------|-------------|--------|
| [old](community/old) | Old | @y |
| [older](community/older) | Older | @z |

## Next Section

Trailing content.
"""


def test_replaces_table_and_preserves_surroundings() -> None:
    result = splice_table(DOCUMENT, NEW_TABLE)

    assert result.matched is True
    before, _, after = DOCUMENT.partition("| Skill | Description | Author |")
    assert result.text.startswith(before)
    assert result.text == before + NEW_TABLE + "\n## Next Section\n\nTrailing content.\n"


def test_splice_is_idempotent() -> None:
    once = splice_table(DOCUMENT, NEW_TABLE).text
    twice = splice_table(once, NEW_TABLE).text

    assert once == twice


def test_legacy_four_column_header_is_replaced() -> None:
    document = (
        "## Community Skills\n"
        "| Skill | Description | Author | Status |\n"
        "|---|---|---|---|\n"
        "| [a](community/a) | A | @x | beta |\n"
        "after\n"
    )

    result = splice_table(document, NEW_TABLE)

    assert result.matched is True
    assert result.text == "## Community Skills\n" + NEW_TABLE + "after\n"


def test_table_at_end_of_document() -> None:
    document = "## Community Skills\n\n| Skill | Description | Author |\n|---|---|---|\n| [a](a) | A | @x |"

    result = splice_table(document, NEW_TABLE)

    assert result.text == "## Community Skills\n\n" + NEW_TABLE


def test_crlf_line_endings_outside_table_are_preserved() -> None:
    document = "Top\r\n## Community Skills\r\n| Skill | Description | Author |\r\n|---|\r\nAfter\r\n"

    result = splice_table(document, NEW_TABLE)

    assert result.text == "Top\r\n## Community Skills\r\n" + NEW_TABLE + "After\r\n"


def test_only_first_table_in_section_is_replaced() -> None:
    document = (
        "## Community Skills\n"
        "| Skill | Description | Author |\n"
        "| row |\n"
        "\n"
        "| Skill | Description | Author |\n"
        "| untouched |\n"
    )

    result = splice_table(document, NEW_TABLE)

    assert result.text == "## Community Skills\n" + NEW_TABLE + "\n| Skill | Description | Author |\n| untouched |\n"


def test_custom_section_heading() -> None:
    document = "### Contributed\n| Skill | Description | Author |\n| x |\n"

    result = splice_table(document, NEW_TABLE, section_heading="### Contributed")

    assert result.matched is True
    assert result.text == "### Contributed\n" + NEW_TABLE


@pytest.mark.parametrize(
    "document",
    [
        "# Title\n\nNo section here.\n",
        "## Community Skills\n\nNo table yet.\n",
        "## Community Skills\n\n## Other\n| Skill | Description | Author |\n| keep |\n",
        "## Curated Skills\n| Skill | Description | Author |\n| keep |\n",
        "",
    ],
    ids=["no_section", "no_header", "header_in_next_section", "header_in_other_section", "empty"],
)
def test_missing_section_or_header_is_a_noop(document: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="skillsync.reporting.splice"):
        result = splice_table(document, NEW_TABLE)

    assert result.matched is False
    assert result.text == document
    assert any("not found" in record.getMessage() for record in caplog.records)


def test_subsection_does_not_end_search() -> None:
    document = "## Community Skills\n### Listing\n| Skill | Description | Author |\n| x |\n"

    result = splice_table(document, NEW_TABLE)

    assert result.matched is True
    assert result.text == "## Community Skills\n### Listing\n" + NEW_TABLE


@pytest.mark.parametrize(
    "heading_line",
    ["## Community Skills 🌍", "## Community Skills (12)", "## Community Skills\t"],
    ids=["emoji", "count", "trailing_tab"],
)
def test_heading_with_trailing_text_matches(heading_line: str) -> None:
    document = f"{heading_line}\n\n| Skill | Description | Author |\n|---|---|---|\n| old |\n"

    result = splice_table(document, NEW_TABLE)

    assert result.matched is True
    assert result.text == f"{heading_line}\n\n" + NEW_TABLE


def test_heading_prefix_of_longer_word_does_not_match() -> None:
    document = "## Community SkillsExtra\n| Skill | Description | Author |\n| keep |\n"

    result = splice_table(document, NEW_TABLE)

    assert result.matched is False
    assert result.text == document
