"""Discover Markdown pages and prepare them for llms.txt generation."""

from __future__ import annotations

import fnmatch
import logging
import typing as typ
from pathlib import Path

import frontmatter
import yaml

from ._constants import INDEX_FILENAME, UNTITLED_PAGE
from .generator.metadata import extract_title
from .generator.models import PreparedFile

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)


def _page_sort_key(relative: Path) -> tuple[tuple[str, ...], int, str]:
    """Order pages by directory, then ``index.md`` first, then by name."""
    name = relative.name.lower()
    return (relative.parent.parts, 0 if name == INDEX_FILENAME else 1, name)


def _is_ignored(relative: str, patterns: cabc.Sequence[str]) -> bool:
    return any(fnmatch.fnmatch(relative, pattern) for pattern in patterns)


def discover_markdown_files(
    work_dir: Path, ignore_files: cabc.Sequence[str] = ()
) -> list[Path]:
    """Return the Markdown pages under ``work_dir`` in navigational order.

    Parameters
    ----------
    work_dir : Path
        Documentation root searched recursively for ``*.md`` files.
    ignore_files : Sequence[str], optional
        ``fnmatch`` patterns matched against each page's POSIX path relative
        to ``work_dir`` (``*`` also crosses directory separators).

    Returns
    -------
    list[Path]
        Paths to the pages that survived filtering, ``index.md`` first within
        each directory.

    Raises
    ------
    FileNotFoundError
        If ``work_dir`` does not exist.
    """
    if not work_dir.is_dir():
        msg = f"Documentation directory '{work_dir}' not found."
        raise FileNotFoundError(msg)

    patterns = [pattern.replace("\\", "/") for pattern in ignore_files]
    found: list[Path] = []
    for path in work_dir.rglob("*.md"):
        if not path.is_file():
            continue
        relative = path.relative_to(work_dir)
        if _is_ignored(relative.as_posix(), patterns):
            logger.debug("Ignoring %s", relative.as_posix())
            continue
        found.append(relative)
    return [work_dir / relative for relative in sorted(found, key=_page_sort_key)]


def prepare_file(path: Path) -> PreparedFile:
    """Parse ``path`` into a :class:`PreparedFile`.

    Raises
    ------
    OSError
        If the page cannot be read.
    UnicodeDecodeError
        If the page is not valid UTF-8.
    yaml.YAMLError
        If the front-matter block is malformed.
    """
    post = frontmatter.loads(path.read_text(encoding="utf-8"))
    metadata = dict(post.metadata)
    title = extract_title(post.content, metadata) or UNTITLED_PAGE
    return PreparedFile(
        path=str(path), title=title, content=post.content, frontmatter=metadata
    )


def _raw_page(path: Path) -> PreparedFile:
    """Keep a page whose front-matter cannot be parsed as unprocessed text."""
    text = path.read_text(encoding="utf-8")
    return PreparedFile(
        path=str(path), title=extract_title(text) or UNTITLED_PAGE, content=text
    )


def prepare_files(paths: cabc.Iterable[Path]) -> list[PreparedFile]:
    """Prepare every page in ``paths``, preserving their order.

    A page with malformed front-matter is kept with its raw text; a page that
    cannot be read or decoded as UTF-8 is skipped. Both cases log a warning
    instead of aborting the remaining pages.
    """
    prepared: list[PreparedFile] = []
    for path in paths:
        try:
            prepared.append(prepare_file(path))
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping unreadable page %s: %s", path, exc)
        except (yaml.YAMLError, ValueError, TypeError) as exc:
            logger.warning("Failed to parse front-matter in %s: %s", path, exc)
            prepared.append(_raw_page(path))
    logger.info("Prepared %d markdown files", len(prepared))
    return prepared


__all__ = ["discover_markdown_files", "prepare_file", "prepare_files"]
