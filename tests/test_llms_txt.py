"""Unit tests for llms.txt orchestration.

These tests cover variable precedence (site defaults, explicit values, and
index front-matter backfill), TOC suppression, and recovery from unreadable
index documents.
"""

from __future__ import annotations

import logging
import typing as typ
from textwrap import dedent

import pytest

from llmstxt_pages._constants import DEFAULT_LLMS_TXT_TEMPLATE
from llmstxt_pages.generator import (
    LlmsTxtOptions,
    PreparedFile,
    TemplateVariables,
    TocSetting,
    generate_llms_txt,
)
from llmstxt_pages.generator.llms_txt import resolve_template_variables

if typ.TYPE_CHECKING:
    from pathlib import Path

PAGES = [
    PreparedFile("docs/index.md", "Home", "# Home\n\nWelcome here."),
    PreparedFile("docs/guide.md", "Guide", "# Guide\n\nLearn more."),
]


@pytest.fixture
def index_md(tmp_path: Path) -> Path:
    """Write an index page whose front-matter carries a title and description."""
    path = tmp_path / "index.md"
    path.write_text(
        dedent(
            """\
            ---
            title: Index Title
            description: Index description
            ---

            # Home
            """
        ),
        encoding="utf-8",
    )
    return path


def test_default_template_renders_all_sections() -> None:
    """The default template carries title, description, details, and TOC."""
    options = LlmsTxtOptions(
        src_dir="docs",
        site_title="Handbook",
        site_description="All the docs",
        template_variables=TemplateVariables(details="Extra details."),
    )
    actual = generate_llms_txt(PAGES, options)
    assert actual == dedent(
        """\
        # Handbook

        > All the docs

        Extra details.

        ## Table of Contents

        - [Home](/): Welcome here.
        - [Guide](/guide.md): Learn more.
        """
    )
    assert options.template == DEFAULT_LLMS_TXT_TEMPLATE


def test_index_frontmatter_backfills_title_and_description(index_md: Path) -> None:
    """Index front-matter replaces site-level defaults."""
    options = LlmsTxtOptions(
        src_dir="docs", index_md=index_md, site_title="Site", site_description="Desc"
    )
    variables = resolve_template_variables(options)
    assert variables.title == "Index Title"
    assert variables.description == "Index description"


def test_explicit_values_beat_index_frontmatter(index_md: Path) -> None:
    """Explicitly supplied title and description are never overwritten."""
    options = LlmsTxtOptions(
        src_dir="docs",
        index_md=index_md,
        template="{title}|{description}",
        template_variables=TemplateVariables(title="Mine", description="Also mine"),
    )
    assert generate_llms_txt(PAGES, options) == "Mine|Also mine"


def test_partial_explicit_values_backfill_the_rest(index_md: Path) -> None:
    """Only fields the caller left unset are taken from the index page."""
    options = LlmsTxtOptions(
        src_dir="docs",
        index_md=index_md,
        template="{title}|{description}",
        template_variables=TemplateVariables(title="Mine"),
    )
    assert generate_llms_txt(PAGES, options) == "Mine|Index description"


def test_missing_index_is_logged_and_ignored(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """A missing index document is a warning, not an error."""
    options = LlmsTxtOptions(
        src_dir="docs",
        index_md=tmp_path / "absent.md",
        template="{title}",
        site_title="Fallback",
    )
    with caplog.at_level(logging.WARNING):
        actual = generate_llms_txt(PAGES, options)
    assert actual == "Fallback"
    assert "Failed to read index.md" in caplog.text


def test_unparsable_index_is_logged_and_ignored(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Malformed index front-matter keeps the existing variables."""
    path = tmp_path / "index.md"
    path.write_text("---\ntitle: [broken\n---\n", encoding="utf-8")
    options = LlmsTxtOptions(
        src_dir="docs", index_md=path, template="{title}", site_title="Fallback"
    )
    with caplog.at_level(logging.WARNING):
        assert generate_llms_txt(PAGES, options) == "Fallback"
    assert "Failed to read index.md" in caplog.text


def test_disabled_toc_is_not_generated() -> None:
    """``toc: false`` suppresses generation and leaves ``{toc}`` empty."""
    options = LlmsTxtOptions(
        src_dir="docs",
        template="[{toc}]",
        template_variables=TemplateVariables(toc=TocSetting.disabled()),
    )
    assert generate_llms_txt(PAGES, options) == "[]"


def test_literal_toc_placeholder_is_regenerated() -> None:
    """A literal ``toc`` value is overwritten by the generated TOC."""
    options = LlmsTxtOptions(
        src_dir="docs",
        template="{toc}",
        template_variables=TemplateVariables(toc=TocSetting.literal("stale")),
    )
    actual = generate_llms_txt(PAGES, options)
    assert actual.startswith("- [Home](/)")
    assert "stale" not in actual


def test_empty_collection_renders_empty_toc_section() -> None:
    """With no pages the TOC section is present but empty."""
    options = LlmsTxtOptions(src_dir="docs", template="## TOC\n{toc}")
    assert generate_llms_txt([], options) == "## TOC\n"


def test_custom_variables_are_expanded() -> None:
    """Arbitrary custom keys reach the template."""
    options = LlmsTxtOptions(
        src_dir="docs",
        template="{product} v{version}",
        template_variables=TemplateVariables.from_mapping(
            {"product": "Widget", "version": "3"}
        ),
    )
    assert generate_llms_txt(PAGES, options) == "Widget v3"
