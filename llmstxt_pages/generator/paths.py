"""Helpers for turning source-relative Markdown paths into public links."""

from __future__ import annotations

import posixpath
import typing as typ

from llmstxt_pages._constants import DEFAULT_LINKS_EXTENSION, INDEX_FILENAME

if typ.TYPE_CHECKING:
    from .models import LinkOptions


def strip_ext(file_path: str) -> str:
    """Return ``file_path`` without its final extension.

    Only the last suffix is removed, so ``"a.b.md"`` becomes ``"a.b"``.
    Paths without an extension are returned unchanged.
    """
    root, _extension = posixpath.splitext(file_path)
    return root


def normalize_path(
    file_path: str,
    *,
    domain: str | None = None,
    links_extension: str = DEFAULT_LINKS_EXTENSION,
    clean_urls: bool = False,
) -> str:
    """Normalize a source-relative path for use in generated links.

    Parameters
    ----------
    file_path : str
        Path relative to the documentation root. Windows separators are
        accepted.
    domain : str, optional
        Origin prepended to the result; a trailing slash is dropped first.
    links_extension : str, optional
        Extension that replaces (or is appended to) the path's extension.
        Defaults to ``".md"``.
    clean_urls : bool, optional
        Strip the extension entirely instead of applying ``links_extension``.

    Returns
    -------
    str
        Root-relative link (always starting with ``/``) or, when ``domain`` is
        given, an absolute URL.

    Examples
    --------
    >>> normalize_path("guide/intro.md")
    '/guide/intro.md'
    >>> normalize_path("index.md")
    '/'
    >>> normalize_path("guide\\\\setup.md", clean_urls=True)
    '/guide/setup'
    >>> normalize_path("api/index.md", domain="https://example.com/")
    'https://example.com/api.md'
    """
    result = file_path.replace("\\", "/")

    if posixpath.basename(result) == INDEX_FILENAME:
        result = posixpath.dirname(result)
        if result == ".":
            result = ""

    if clean_urls:
        result = strip_ext(result)
    elif posixpath.splitext(result)[1]:
        result = strip_ext(result) + links_extension
    elif result and result != "/":
        result += links_extension

    if not result.startswith("/"):
        result = f"/{result}"

    if domain:
        result = domain.rstrip("/") + result

    return result


def normalize_link(file_path: str, options: LinkOptions) -> str:
    """Normalize ``file_path`` using the values carried by ``options``."""
    return normalize_path(
        file_path,
        domain=options.domain,
        links_extension=options.links_extension,
        clean_urls=options.clean_urls,
    )


__all__ = ["normalize_link", "normalize_path", "strip_ext"]
