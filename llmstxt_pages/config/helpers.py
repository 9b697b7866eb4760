"""Utility helpers shared by the llmstxt configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from llmstxt_pages.generator.models import TemplateValue, TocSetting

from .models import SiteConfigError, SiteInfo


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_bool(key: str, value: object, default: bool) -> bool:
    """Return ``value`` as a bool, rejecting anything that is not one."""
    match value:
        case None:
            return default
        case bool():
            return value
        case _:
            msg = f"'{key}' must be true or false, got {value!r}."
            raise SiteConfigError(msg)


def _resolve_path(base_dir: Path, value: object | None, default: str) -> Path:
    """Resolve a configured path relative to the configuration file."""
    raw = _optional_str(value) or default
    path = Path(raw).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _normalize_extension(value: object | None, default: str) -> str:
    """Return the links extension with a leading dot."""
    text = _optional_str(value)
    if not text:
        return default
    return text if text.startswith(".") else f".{text}"


def _parse_toc(value: object) -> TocSetting | None:
    """Return the configured TOC setting; ``None`` leaves it to the default."""
    if value is None:
        return None
    try:
        return TocSetting.from_value(typ.cast("TemplateValue", value))
    except TypeError as exc:
        msg = f"'toc' must be true, false, or a string, got {value!r}."
        raise SiteConfigError(msg) from exc


def _string_list(key: str, value: object | None) -> list[str]:
    """Normalize a list of glob patterns into non-empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        msg = f"'{key}' must be a list of strings."
        raise SiteConfigError(msg)
    normalized: list[str] = []
    for item in value:
        text = str(item).strip()
        if text:
            normalized.append(text)
    return normalized


def _template_variables(value: object | None) -> dict[str, TemplateValue]:
    """Validate custom template variables as a flat scalar mapping."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = "'custom_template_variables' must be a mapping."
        raise SiteConfigError(msg)
    variables: dict[str, TemplateValue] = {}
    for key, item in value.items():
        match item:
            case bool() | str():
                variables[str(key)] = item
            case int() | float():
                variables[str(key)] = str(item)
            case None:
                continue
            case _:
                msg = f"Template variable '{key}' must be a string or boolean."
                raise SiteConfigError(msg)
    return variables


def _build_site_info(payload: object | None) -> SiteInfo:
    """Build the site-level fallback title and description."""
    if payload is None:
        return SiteInfo()
    if not isinstance(payload, dict):
        msg = "'site' must be a mapping."
        raise SiteConfigError(msg)
    return SiteInfo(
        title=_optional_str(payload.get("title")),
        description=_optional_str(payload.get("description")),
    )


__all__ = [
    "_as_bool",
    "_build_site_info",
    "_normalize_extension",
    "_optional_str",
    "_parse_toc",
    "_resolve_path",
    "_string_list",
    "_template_variables",
]
