"""Build the ``llms.txt`` table of contents from prepared pages."""

from __future__ import annotations

import os
import typing as typ

from .metadata import extract_description
from .models import LinkOptions
from .paths import normalize_link

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import PreparedFile


def relative_source_path(file: PreparedFile, src_dir: str | os.PathLike[str]) -> str:
    """Return ``file.path`` relative to ``src_dir``."""
    return os.path.relpath(file.path, os.fspath(src_dir))


def render_toc_entry(
    file: PreparedFile, src_dir: str | os.PathLike[str], options: LinkOptions
) -> str:
    """Render a single ``- [title](link): description`` line."""
    link = normalize_link(relative_source_path(file, src_dir), options)
    entry = f"- [{file.title}]({link})"
    description = extract_description(file.content)
    if description:
        entry = f"{entry}: {description}"
    return entry


def generate_toc(
    files: cabc.Iterable[PreparedFile],
    *,
    src_dir: str | os.PathLike[str],
    link_options: LinkOptions | None = None,
) -> str:
    """Return one TOC line per page, in the order the pages were supplied.

    Parameters
    ----------
    files : Iterable[PreparedFile]
        Pages in navigational order; no sorting or grouping is applied.
    src_dir : str or PathLike
        Documentation root used to compute each page's relative path.
    link_options : LinkOptions, optional
        Domain, extension, and clean-URL settings for the rendered links.

    Returns
    -------
    str
        Newline-joined Markdown list entries.
    """
    options = link_options or LinkOptions()
    return "\n".join(render_toc_entry(file, src_dir, options) for file in files)


__all__ = ["generate_toc", "relative_source_path", "render_toc_entry"]
