"""Normalize Markdown page bodies into token-efficient text."""

from __future__ import annotations

import re

import frontmatter
from markdown import Markdown
from markdownify import ATX, markdownify

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
EXCESS_BLANK_LINES_PATTERN = re.compile(r"\n{3,}")


class MarkdownTextNormalizer:
    """Parse Markdown and re-emit it as plain Markdown text.

    The body is parsed with Python-Markdown and written back out with
    markdownify, which settles heading, list, and emphasis syntax into a
    single style. A leading front-matter block is recognized and dropped.
    Any angle-bracket markup left afterwards is removed with a literal tag
    pattern, so code samples containing ``<`` and ``>`` may lose text.
    """

    def __init__(self, *, strip_html: bool = True) -> None:
        """Initialize the normalizer.

        Parameters
        ----------
        strip_html : bool, optional
            Remove leftover ``<...>`` tags from the re-emitted Markdown.
            Defaults to ``True``.
        """
        self.strip_html = strip_html
        self._extensions = ["fenced_code", "tables", "sane_lists"]

    def normalize(self, text: str) -> str:
        """Return ``text`` as normalized Markdown without front-matter.

        Raises
        ------
        yaml.YAMLError
            When the front-matter block cannot be parsed.
        """
        body = frontmatter.loads(text).content
        normalized = self._normalize_fenced_blocks(body)
        if not normalized.strip():
            return ""
        md = Markdown(extensions=self._extensions, output_format="html")
        html = md.convert(normalized)
        rendered = markdownify(
            html,
            heading_style=ATX,
            bullets="-",
            escape_asterisks=False,
            escape_underscores=False,
            escape_misc=False,
        )
        if self.strip_html:
            rendered = HTML_TAG_PATTERN.sub("", rendered)
        return EXCESS_BLANK_LINES_PATTERN.sub("\n\n", rendered).strip()

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            return f"{fence}{language or ''}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["HTML_TAG_PATTERN", "MarkdownTextNormalizer"]
