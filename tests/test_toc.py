"""Unit tests for the llms.txt table of contents generator."""

from __future__ import annotations

import typing as typ

from llmstxt_pages.generator import LinkOptions, PreparedFile, generate_toc

if typ.TYPE_CHECKING:
    from pathlib import Path


def _page(path: str, title: str, content: str) -> PreparedFile:
    return PreparedFile(path=path, title=title, content=content)


def test_toc_end_to_end_default_options() -> None:
    """Index pages link to the root; descriptions are first sentences."""
    pages = [
        _page("docs/index.md", "Home", "# Home\n\nWelcome here."),
        _page("docs/guide.md", "Guide", "# Guide\n\nLearn more."),
    ]
    actual = generate_toc(pages, src_dir="docs")
    assert actual == (
        "- [Home](/): Welcome here.\n"
        "- [Guide](/guide.md): Learn more."
    )


def test_toc_preserves_input_order() -> None:
    """Entries follow the supplied order without sorting."""
    pages = [
        _page("docs/b.md", "B", "Bee."),
        _page("docs/a.md", "A", "Ay."),
    ]
    lines = generate_toc(pages, src_dir="docs").splitlines()
    assert lines == ["- [B](/b.md): Bee.", "- [A](/a.md): Ay."]


def test_toc_omits_missing_descriptions() -> None:
    """Pages without a terminated first sentence get no ``: description``."""
    pages = [_page("docs/ref/api.md", "API", "# API\n\nno terminator")]
    assert generate_toc(pages, src_dir="docs") == "- [API](/ref/api.md)"


def test_toc_applies_link_options() -> None:
    """Domain and clean-URL settings shape every link."""
    pages = [
        _page("docs/index.md", "Home", "Hi."),
        _page("docs/guide/index.md", "Guide", "Start."),
        _page("docs/guide/setup.md", "Setup", "Install it."),
    ]
    options = LinkOptions(domain="https://x.com/", clean_urls=True)
    lines = generate_toc(pages, src_dir="docs", link_options=options).splitlines()
    assert lines == [
        "- [Home](https://x.com/): Hi.",
        "- [Guide](https://x.com/guide): Start.",
        "- [Setup](https://x.com/guide/setup): Install it.",
    ]


def test_toc_accepts_absolute_paths(tmp_path: Path) -> None:
    """Absolute page paths are made relative to ``src_dir``."""
    docs = tmp_path / "docs"
    page = _page(str(docs / "guide" / "intro.md"), "Intro", "Read me.")
    options = LinkOptions(links_extension=".html")
    actual = generate_toc([page], src_dir=docs, link_options=options)
    assert actual == "- [Intro](/guide/intro.html): Read me."


def test_toc_empty_collection() -> None:
    """No pages means an empty table of contents."""
    assert generate_toc([], src_dir="docs") == ""
