"""Typed dataclasses describing llmstxt configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from llmstxt_pages._constants import (
    DEFAULT_LINKS_EXTENSION,
    DEFAULT_LLMS_TXT_TEMPLATE,
    INDEX_FILENAME,
)
from llmstxt_pages.generator.models import (
    LinkOptions,
    TemplateValue,
    TemplateVariables,
    TocSetting,
)


class SiteConfigError(ValueError):
    """Raised when the llmstxt configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteInfo:
    """Site-level fallbacks used when no explicit title or description is set."""

    title: str | None = None
    description: str | None = None


@dc.dataclass(slots=True)
class LlmstxtSettings:
    """A fully resolved llmstxt configuration.

    Attributes
    ----------
    work_dir : Path
        Directory scanned for Markdown pages and used as the link root.
    output_dir : Path
        Directory receiving ``llms.txt`` and ``llms-full.txt``.
    index_md : Path or None
        Primary document whose front-matter backfills the title and
        description; defaults to ``<work_dir>/index.md``.
    domain : str or None
        Origin prepended to generated links.
    links_extension : str
        Extension used in generated links.
    clean_urls : bool
        Omit extensions from generated links.
    generate_llms_txt, generate_llms_full_txt : bool
        Toggle each output document.
    strip_html : bool
        Remove leftover HTML tags from page bodies in ``llms-full.txt``.
    title, description, details : str or None
        Explicit template values.
    toc : TocSetting or None
        Explicit table-of-contents setting; ``None`` means generate.
    custom_template : str
        Template used for ``llms.txt``.
    custom_template_variables : dict[str, str | bool]
        Extra template placeholders.
    ignore_files : list[str]
        Glob patterns, relative to ``work_dir``, for pages to skip.
    site : SiteInfo
        Site-level fallback title and description.
    """

    work_dir: Path = Path("docs")
    output_dir: Path = Path("public")
    index_md: Path | None = None
    domain: str | None = None
    links_extension: str = DEFAULT_LINKS_EXTENSION
    clean_urls: bool = False
    generate_llms_txt: bool = True
    generate_llms_full_txt: bool = True
    strip_html: bool = True
    title: str | None = None
    description: str | None = None
    details: str | None = None
    toc: TocSetting | None = None
    custom_template: str = DEFAULT_LLMS_TXT_TEMPLATE
    custom_template_variables: dict[str, TemplateValue] = dc.field(
        default_factory=dict
    )
    ignore_files: list[str] = dc.field(default_factory=list)
    site: SiteInfo = dc.field(default_factory=SiteInfo)

    @property
    def index_path(self) -> Path:
        """Return the configured index document or ``<work_dir>/index.md``."""
        return self.index_md or self.work_dir / INDEX_FILENAME

    @property
    def link_options(self) -> LinkOptions:
        return LinkOptions(
            domain=self.domain,
            links_extension=self.links_extension,
            clean_urls=self.clean_urls,
        )

    @property
    def template_variables(self) -> TemplateVariables:
        """Return the explicit template values, custom variables included."""
        custom = TemplateVariables.from_mapping(self.custom_template_variables)
        return custom.overlay(
            TemplateVariables(
                title=self.title,
                description=self.description,
                details=self.details,
                toc=self.toc,
            )
        )


__all__ = ["LlmstxtSettings", "SiteConfigError", "SiteInfo"]
