r"""Derive page titles, short descriptions, and per-page headers.

Titles come from front-matter first and the first level-one heading second;
descriptions are the first sentence of the first prose paragraph. Both are
heuristics tuned for documentation pages, not general Markdown analysis.

Example
-------
>>> from llmstxt_pages.generator.metadata import extract_description, extract_title
>>> extract_title("# Install\n\nRun the installer.")
'Install'
>>> extract_description("# Install\n\nRun the installer. Then reboot.")
'Run the installer.'
"""

from __future__ import annotations

import re
import typing as typ

from .paths import normalize_link

if typ.TYPE_CHECKING:
    from .models import LinkOptions

TITLE_PATTERN = re.compile(r"^#\s+(.*?)$", re.MULTILINE)
PARAGRAPH_SPLIT_PATTERN = re.compile(r"\n[ \t]*\n")
HEADING_BLOCK_PATTERN = re.compile(r"^#{1,6}(?:\s|$)")
FIRST_SENTENCE_PATTERN = re.compile(r"^[^.!?]+[.!?]")


def extract_title(
    content: str, frontmatter: typ.Mapping[str, typ.Any] | None = None
) -> str | None:
    """Return the page title from front-matter or the first ``#`` heading.

    Parameters
    ----------
    content : str
        Markdown body of the page.
    frontmatter : Mapping[str, Any], optional
        Parsed front-matter; a truthy ``title`` entry takes precedence.

    Returns
    -------
    str or None
        The resolved title, or ``None`` when neither source provides one.
    """
    if frontmatter and frontmatter.get("title"):
        return str(frontmatter["title"])

    match = TITLE_PATTERN.search(content or "")
    if match:
        return match.group(1).strip()
    return None


def _first_paragraph(content: str) -> str | None:
    """Return the first block with prose once its leading headings are dropped."""
    for block in PARAGRAPH_SPLIT_PATTERN.split(content):
        lines = block.strip().splitlines()
        while lines and HEADING_BLOCK_PATTERN.match(lines[0].lstrip()):
            lines.pop(0)
        candidate = "\n".join(lines).strip()
        if candidate:
            return candidate
    return None


def extract_description(content: str) -> str | None:
    """Return the first sentence of the page's first paragraph, if any.

    A sentence is the shortest leading run of text ending in ``.``, ``!`` or
    ``?``; paragraphs without such a terminator yield ``None`` rather than a
    truncated fragment.
    """
    paragraph = _first_paragraph(content or "")
    if not paragraph:
        return None
    match = FIRST_SENTENCE_PATTERN.match(paragraph)
    if not match:
        return None
    return match.group(0).strip() or None


def generate_metadata(title: str, relative_path: str, options: LinkOptions) -> str:
    """Render the header placed above each page in ``llms-full.txt``."""
    link = normalize_link(relative_path, options)
    return f"# {title}\n\nSource: {link}"


__all__ = [
    "FIRST_SENTENCE_PATTERN",
    "TITLE_PATTERN",
    "extract_description",
    "extract_title",
    "generate_metadata",
]
