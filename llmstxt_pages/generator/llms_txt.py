"""High-level orchestration for the ``llms.txt`` document.

:func:`generate_llms_txt` resolves the template variables (site defaults,
explicit overrides, and values backfilled from the index page's
front-matter), regenerates the table of contents unless it was switched off,
and expands the ``llms.txt`` template.

Example
-------
>>> from llmstxt_pages.generator import LlmsTxtOptions, PreparedFile, generate_llms_txt
>>> page = PreparedFile("docs/guide.md", "Guide", "Learn more.")
>>> options = LlmsTxtOptions(src_dir="docs", template="{title}\\n{toc}",
...                          site_title="Handbook")
>>> print(generate_llms_txt([page], options))
Handbook
- [Guide](/guide.md): Learn more.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import typing as typ
from pathlib import Path

import frontmatter
import yaml

from llmstxt_pages._constants import DEFAULT_LLMS_TXT_TEMPLATE

from .models import LinkOptions, TemplateVariables, TocSetting
from .template import expand_template
from .toc import generate_toc

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import PreparedFile

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class LlmsTxtOptions:
    """Inputs for :func:`generate_llms_txt`.

    Attributes
    ----------
    src_dir : str or PathLike
        Documentation root used for relative links.
    index_md : str or PathLike or None
        Primary document whose front-matter backfills ``title`` and
        ``description``; ``None`` skips the lookup.
    template : str
        ``llms.txt`` template with ``{name}`` placeholders.
    template_variables : TemplateVariables
        Explicit values; these always win over derived ones.
    site_title, site_description : str or None
        Site-level fallbacks used before any override.
    link_options : LinkOptions
        Domain, extension, and clean-URL settings for TOC links.
    """

    src_dir: str | os.PathLike[str]
    index_md: str | os.PathLike[str] | None = None
    template: str = DEFAULT_LLMS_TXT_TEMPLATE
    template_variables: TemplateVariables = dc.field(default_factory=TemplateVariables)
    site_title: str | None = None
    site_description: str | None = None
    link_options: LinkOptions = dc.field(default_factory=LinkOptions)


def _read_index_metadata(index_md: str | os.PathLike[str]) -> dict[str, typ.Any]:
    """Return the front-matter of ``index_md``; raise when it cannot be read."""
    path = Path(index_md)
    logger.info("Reading index.md from: %s", path)
    post = frontmatter.loads(path.read_text(encoding="utf-8"))
    return dict(post.metadata)


def resolve_template_variables(options: LlmsTxtOptions) -> TemplateVariables:
    """Merge site defaults, explicit overrides, and index front-matter."""
    explicit = options.template_variables
    variables = TemplateVariables(
        title=options.site_title,
        description=options.site_description,
        toc=TocSetting.literal(""),
    ).overlay(explicit)

    if not options.index_md:
        return variables
    try:
        metadata = _read_index_metadata(options.index_md)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        logger.warning("Failed to read index.md: %s", exc)
        return variables

    backfill: dict[str, str | None] = {}
    if metadata.get("title") and not explicit.title:
        backfill["title"] = str(metadata["title"])
    if metadata.get("description") and not explicit.description:
        backfill["description"] = str(metadata["description"])
    if backfill:
        variables = dc.replace(variables, **backfill)
    return variables


def generate_llms_txt(
    files: cabc.Sequence[PreparedFile], options: LlmsTxtOptions
) -> str:
    """Return the contents of ``llms.txt`` for ``files``.

    Parameters
    ----------
    files : Sequence[PreparedFile]
        Pages in navigational order.
    options : LlmsTxtOptions
        Template, variables, and link settings.

    Returns
    -------
    str
        The expanded template. A disabled table of contents leaves ``{toc}``
        empty.
    """
    logger.info("Generating toc...")
    variables = resolve_template_variables(options)

    toc = variables.toc or TocSetting.auto()
    if toc.enabled:
        logger.info("Generating TOC from prepared files")
        generated = generate_toc(
            files, src_dir=options.src_dir, link_options=options.link_options
        )
        variables = dc.replace(variables, toc=TocSetting.literal(generated))

    return expand_template(options.template, variables)


__all__ = ["LlmsTxtOptions", "generate_llms_txt", "resolve_template_variables"]
