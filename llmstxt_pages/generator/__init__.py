"""Utilities for deriving llms.txt and llms-full.txt from prepared pages."""

from .full_text import generate_llms_full_txt, render_page_sections
from .llms_txt import LlmsTxtOptions, generate_llms_txt
from .metadata import extract_description, extract_title, generate_metadata
from .models import (
    LinkOptions,
    PageBody,
    PageSection,
    PreparedFile,
    TemplateVariables,
    TocMode,
    TocSetting,
)
from .paths import normalize_link, normalize_path, strip_ext
from .renderer import MarkdownTextNormalizer
from .template import expand_template
from .toc import generate_toc

__all__ = [
    "LinkOptions",
    "LlmsTxtOptions",
    "MarkdownTextNormalizer",
    "PageBody",
    "PageSection",
    "PreparedFile",
    "TemplateVariables",
    "TocMode",
    "TocSetting",
    "expand_template",
    "extract_description",
    "extract_title",
    "generate_llms_full_txt",
    "generate_llms_txt",
    "generate_metadata",
    "generate_toc",
    "normalize_link",
    "normalize_path",
    "render_page_sections",
    "strip_ext",
]
