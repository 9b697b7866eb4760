"""Shared dataclasses used by the llms.txt generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ
from types import MappingProxyType

from llmstxt_pages._constants import DEFAULT_LINKS_EXTENSION

TemplateValue = str | bool


@dc.dataclass(frozen=True, slots=True)
class LinkOptions:
    """Settings that control how source paths become public links.

    Attributes
    ----------
    domain : str or None
        Optional origin prepended to every link (for example
        ``"https://example.com"``).
    links_extension : str
        Extension used in place of the source extension, ``".md"`` by default.
    clean_urls : bool
        When ``True`` links carry no extension at all.
    """

    domain: str | None = None
    links_extension: str = DEFAULT_LINKS_EXTENSION
    clean_urls: bool = False


@dc.dataclass(frozen=True, slots=True)
class PreparedFile:
    """A documentation page resolved and parsed by the host.

    Attributes
    ----------
    path : str
        Source path of the page; made relative to ``src_dir`` when links are
        rendered.
    title : str
        Title extracted from front-matter or the first heading.
    content : str
        Markdown body with the front-matter block removed.
    frontmatter : Mapping[str, Any]
        Parsed front-matter metadata.
    """

    path: str
    title: str
    content: str
    frontmatter: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.frontmatter, MappingProxyType):
            object.__setattr__(
                self, "frontmatter", MappingProxyType(dict(self.frontmatter))
            )


class TocMode(enum.Enum):
    """How the ``{toc}`` placeholder is populated."""

    DISABLED = "disabled"
    AUTO = "auto"
    LITERAL = "literal"


@dc.dataclass(frozen=True, slots=True)
class TocSetting:
    """Tagged ``toc`` value: disabled, generated, or a literal placeholder."""

    mode: TocMode = TocMode.AUTO
    text: str = ""

    @classmethod
    def disabled(cls) -> TocSetting:
        return cls(TocMode.DISABLED)

    @classmethod
    def auto(cls) -> TocSetting:
        return cls(TocMode.AUTO)

    @classmethod
    def literal(cls, text: str) -> TocSetting:
        return cls(TocMode.LITERAL, text)

    @classmethod
    def from_value(cls, value: TemplateValue | TocSetting | None) -> TocSetting:
        """Build a setting from the raw ``bool | str`` configuration form.

        ``False`` disables the table of contents, ``None`` and ``True`` request
        generation, and any string (including ``""``) is kept as a literal.
        """
        match value:
            case TocSetting():
                return value
            case False:
                return cls.disabled()
            case None | True:
                return cls.auto()
            case str() as text:
                return cls.literal(text)
            case _:
                msg = f"toc must be a bool or a string, got {type(value).__name__}"
                raise TypeError(msg)

    @property
    def enabled(self) -> bool:
        """Return ``True`` unless the table of contents is switched off."""
        return self.mode is not TocMode.DISABLED


_FIXED_KEYS = ("title", "description", "details", "toc")


@dc.dataclass(frozen=True, slots=True)
class TemplateVariables:
    """Values substituted into the ``llms.txt`` template.

    The fixed fields cover the default template; ``custom`` carries any extra
    placeholders supplied by the user. ``None`` marks a value as unset.
    """

    title: str | None = None
    description: str | None = None
    details: str | None = None
    toc: TocSetting | None = None
    custom: typ.Mapping[str, TemplateValue] = dc.field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_mapping(
        cls, values: typ.Mapping[str, TemplateValue | None] | None
    ) -> TemplateVariables:
        """Split a flat ``name -> value`` mapping into fixed and custom fields."""
        if not values:
            return cls()
        custom = {
            key: value
            for key, value in values.items()
            if key not in _FIXED_KEYS and value is not None
        }
        toc = values.get("toc")
        return cls(
            title=_optional_text(values.get("title")),
            description=_optional_text(values.get("description")),
            details=_optional_text(values.get("details")),
            toc=TocSetting.from_value(toc) if "toc" in values else None,
            custom=MappingProxyType(custom),
        )

    def overlay(self, other: TemplateVariables) -> TemplateVariables:
        """Return a copy where every value explicitly set on ``other`` wins."""
        custom = dict(self.custom)
        custom.update(other.custom)
        return TemplateVariables(
            title=other.title if other.title is not None else self.title,
            description=(
                other.description
                if other.description is not None
                else self.description
            ),
            details=other.details if other.details is not None else self.details,
            toc=other.toc if other.toc is not None else self.toc,
            custom=MappingProxyType(custom),
        )

    def as_mapping(self) -> dict[str, TemplateValue]:
        """Return the unified lookup used by the template expander."""
        resolved: dict[str, TemplateValue] = dict(self.custom)
        for key in ("title", "description", "details"):
            value = getattr(self, key)
            if value is not None:
                resolved[key] = value
            else:
                resolved.pop(key, None)
        toc = self.toc or TocSetting.auto()
        if toc.enabled:
            resolved["toc"] = toc.text
        else:
            resolved.pop("toc", None)
        return resolved


def render_template_value(value: object) -> str:
    """Return the text substituted for ``value``; booleans render lowercase."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _optional_text(value: TemplateValue | None) -> str | None:
    if value is None:
        return None
    return render_template_value(value)


@dc.dataclass(frozen=True, slots=True)
class PageBody:
    """Outcome of normalizing one page body.

    ``fell_back`` is ``True`` when normalization failed and ``text`` holds the
    unprocessed content instead; ``error`` then carries the failure message.
    """

    text: str
    fell_back: bool = False
    error: str | None = None


@dc.dataclass(frozen=True, slots=True)
class PageSection:
    """One page of ``llms-full.txt``: metadata header plus normalized body."""

    file: PreparedFile
    header: str
    body: PageBody

    def render(self) -> str:
        return f"{self.header}\n\n{self.body.text}"


__all__ = [
    "LinkOptions",
    "PageBody",
    "PageSection",
    "PreparedFile",
    "TemplateValue",
    "TemplateVariables",
    "TocMode",
    "TocSetting",
    "render_template_value",
]
