"""Load llmstxt configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from llmstxt_pages._constants import DEFAULT_LINKS_EXTENSION, DEFAULT_LLMS_TXT_TEMPLATE

from .helpers import (
    _as_bool,
    _build_site_info,
    _normalize_extension,
    _optional_str,
    _parse_toc,
    _resolve_path,
    _string_list,
    _template_variables,
)
from .models import LlmstxtSettings, SiteConfigError


def load_settings(path: Path) -> LlmstxtSettings:
    """Load the YAML configuration describing llms.txt generation.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``llmstxt.yaml``). Relative paths inside the file resolve against
        its directory.

    Returns
    -------
    LlmstxtSettings
        Parsed settings with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a field holds a value of the wrong shape (for example, a non-list
        ``ignore_files`` or a non-scalar template variable).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from llmstxt_pages.config import load_settings
    >>> settings = load_settings(Path("llmstxt.yaml"))  # doctest: +SKIP
    >>> settings.link_options.links_extension  # doctest: +SKIP
    '.md'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_settings(dict(loaded), base_dir=path.parent)


def build_settings(
    raw: typ.Mapping[str, typ.Any], *, base_dir: Path | None = None
) -> LlmstxtSettings:
    """Build :class:`LlmstxtSettings` from an already parsed mapping."""
    base = base_dir or Path()
    work_dir = _resolve_path(base, raw.get("work_dir"), "docs")
    output_dir = _resolve_path(base, raw.get("output_dir"), "public")
    index_raw = _optional_str(raw.get("index_md"))
    index_md = _resolve_path(base, index_raw, index_raw) if index_raw else None

    template_path = _optional_str(raw.get("custom_template_path"))
    if template_path:
        template = _resolve_path(base, template_path, template_path).read_text(
            encoding="utf-8"
        )
    else:
        template = raw.get("custom_template") or DEFAULT_LLMS_TXT_TEMPLATE
    if not isinstance(template, str):
        msg = "'custom_template' must be a string."
        raise SiteConfigError(msg)

    return LlmstxtSettings(
        work_dir=work_dir,
        output_dir=output_dir,
        index_md=index_md,
        domain=_optional_str(raw.get("domain")),
        links_extension=_normalize_extension(
            raw.get("links_extension"), DEFAULT_LINKS_EXTENSION
        ),
        clean_urls=_as_bool("clean_urls", raw.get("clean_urls"), default=False),
        generate_llms_txt=_as_bool(
            "generate_llms_txt", raw.get("generate_llms_txt"), default=True
        ),
        generate_llms_full_txt=_as_bool(
            "generate_llms_full_txt", raw.get("generate_llms_full_txt"), default=True
        ),
        strip_html=_as_bool("strip_html", raw.get("strip_html"), default=True),
        title=_optional_str(raw.get("title")),
        description=_optional_str(raw.get("description")),
        details=_optional_str(raw.get("details")),
        toc=_parse_toc(raw.get("toc")),
        custom_template=template,
        custom_template_variables=_template_variables(
            raw.get("custom_template_variables")
        ),
        ignore_files=_string_list("ignore_files", raw.get("ignore_files")),
        site=_build_site_info(raw.get("site")),
    )


__all__ = ["build_settings", "load_settings"]
