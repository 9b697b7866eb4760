"""Unit tests for title, description, and header extraction."""

from __future__ import annotations

import pytest

from llmstxt_pages.generator import (
    LinkOptions,
    extract_description,
    extract_title,
    generate_metadata,
)


def test_frontmatter_title_wins_over_heading() -> None:
    """A front-matter ``title`` takes precedence over the first heading."""
    content = "# Body Heading\n\nText."
    assert extract_title(content, {"title": "Front Title"}) == "Front Title"


def test_title_falls_back_to_first_level_one_heading() -> None:
    """Without front-matter the first ``#`` heading is used, trimmed."""
    content = "Intro line\n\n## Second level\n\n#   Real Title   \n\nBody"
    assert extract_title(content, {}) == "Real Title"


def test_title_missing_returns_none() -> None:
    """Pages without a title source yield ``None``; filenames are never used."""
    assert extract_title("Just prose.\n\n## Only h2", None) is None
    assert extract_title("", {"title": ""}) is None


def test_title_non_string_frontmatter_is_stringified() -> None:
    """Scalar front-matter titles are rendered as text."""
    assert extract_title("", {"title": 2024}) == "2024"


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("Welcome here.", "Welcome here."),
        ("# Home\n\nWelcome here. More text.", "Welcome here."),
        ("Does it work? Yes.", "Does it work?"),
        ("Wow! Another.", "Wow!"),
        ("First line\ncontinues here. Next.", "First line\ncontinues here."),
        ("\n\n  Leading blank lines. Then more.", "Leading blank lines."),
        ("# Title\nIntro sentence here.\n\nLater para.", "Intro sentence here."),
        ("# Title\n## Sub\nBody text. More.", "Body text."),
    ],
)
def test_description_is_first_sentence(content: str, expected: str) -> None:
    """The description is the shortest leading sentence of the first paragraph."""
    assert extract_description(content) == expected


@pytest.mark.parametrize(
    "content",
    ["", "   \n\n  ", "# Only a heading", "No terminator here", "# H\n\nStill none"],
)
def test_description_absent(content: str) -> None:
    """Missing paragraphs or terminators produce no description."""
    assert extract_description(content) is None


def test_description_only_reads_first_paragraph() -> None:
    """A terminator in a later paragraph is not borrowed."""
    assert extract_description("No stop here\n\nSecond paragraph.") is None


def test_description_keeps_abbreviation_quirk() -> None:
    """Abbreviations end the sentence early; the heuristic is kept as is."""
    assert extract_description("Use tools, e.g. linters.") == "Use tools, e."


def test_generate_metadata_header() -> None:
    """The per-page header carries the title and normalized source link."""
    header = generate_metadata("Guide", "guide/intro.md", LinkOptions())
    assert header == "# Guide\n\nSource: /guide/intro.md"


def test_generate_metadata_with_domain_and_clean_urls() -> None:
    """Link options flow through to the source line."""
    options = LinkOptions(domain="https://docs.example.com/", clean_urls=True)
    header = generate_metadata("Home", "index.md", options)
    assert header.endswith("Source: https://docs.example.com/")
