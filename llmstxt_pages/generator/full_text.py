"""Assemble ``llms-full.txt`` from every prepared page.

Each page becomes a section made of a metadata header (title and source
link) followed by its normalized body. Bodies are normalized concurrently in
worker threads; sections are always joined in the order the pages were
supplied. A page whose normalization fails keeps its raw content and is
reported with a warning, leaving the remaining pages untouched.

Example
-------
>>> import asyncio
>>> from llmstxt_pages.generator import PreparedFile, generate_llms_full_txt
>>> page = PreparedFile("docs/guide.md", "Guide", "Read *this*.")
>>> print(asyncio.run(generate_llms_full_txt([page], src_dir="docs")))
# Guide
<BLANKLINE>
Source: /guide.md
<BLANKLINE>
Read *this*.
"""

from __future__ import annotations

import asyncio
import logging
import typing as typ

from llmstxt_pages._constants import SECTION_DIVIDER

from .metadata import generate_metadata
from .models import LinkOptions, PageBody, PageSection
from .renderer import MarkdownTextNormalizer
from .toc import relative_source_path

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import os

    from .models import PreparedFile

logger = logging.getLogger(__name__)


async def normalize_page_body(
    file: PreparedFile, normalizer: MarkdownTextNormalizer
) -> PageBody:
    """Normalize one page body, falling back to the raw content on failure."""
    try:
        text = await asyncio.to_thread(normalizer.normalize, file.content)
    except Exception as exc:  # noqa: BLE001 - any page failure degrades to raw text
        logger.warning("Failed to process HTML in %s: %s", file.path, exc)
        return PageBody(text=file.content, fell_back=True, error=str(exc))
    return PageBody(text=text)


async def render_page_sections(
    files: cabc.Sequence[PreparedFile],
    *,
    src_dir: str | os.PathLike[str],
    link_options: LinkOptions | None = None,
    normalizer: MarkdownTextNormalizer | None = None,
) -> list[PageSection]:
    """Return one :class:`PageSection` per page, in input order.

    Parameters
    ----------
    files : Sequence[PreparedFile]
        Pages to assemble.
    src_dir : str or PathLike
        Documentation root used to compute source links.
    link_options : LinkOptions, optional
        Domain, extension, and clean-URL settings for the source links.
    normalizer : MarkdownTextNormalizer, optional
        Body normalizer; a default instance that strips HTML is used when
        omitted.

    Returns
    -------
    list[PageSection]
        Sections whose ``body.fell_back`` flag records normalization failures.
    """
    options = link_options or LinkOptions()
    active = normalizer or MarkdownTextNormalizer()
    bodies = await asyncio.gather(
        *(normalize_page_body(file, active) for file in files)
    )
    return [
        PageSection(
            file=file,
            header=generate_metadata(
                file.title, relative_source_path(file, src_dir), options
            ),
            body=body,
        )
        for file, body in zip(files, bodies, strict=True)
    ]


async def generate_llms_full_txt(
    files: cabc.Sequence[PreparedFile],
    *,
    src_dir: str | os.PathLike[str],
    link_options: LinkOptions | None = None,
    normalizer: MarkdownTextNormalizer | None = None,
) -> str:
    """Return the full-content document with sections separated by ``---``."""
    logger.info("Generating full content file")
    sections = await render_page_sections(
        files, src_dir=src_dir, link_options=link_options, normalizer=normalizer
    )
    return SECTION_DIVIDER.join(section.render() for section in sections)


__all__ = ["generate_llms_full_txt", "normalize_page_body", "render_page_sections"]
