"""Write ``llms.txt`` and ``llms-full.txt`` for a documentation tree.

:class:`LlmsTxtBuilder` ties the pieces together: it discovers the Markdown
pages under the configured ``work_dir``, prepares them, runs the generators
that are enabled in :class:`~llmstxt_pages.config.LlmstxtSettings`, and writes
the results to ``output_dir``.

>>> from pathlib import Path
>>> from llmstxt_pages.config import load_settings
>>> from llmstxt_pages.builder import LlmsTxtBuilder
>>> settings = load_settings(Path("llmstxt.yaml"))  # doctest: +SKIP
>>> LlmsTxtBuilder(settings).run()  # doctest: +SKIP
[PosixPath('public/llms.txt'), PosixPath('public/llms-full.txt')]
"""

from __future__ import annotations

import asyncio
import logging
import typing as typ

from ._constants import LLMS_FULL_TXT_FILENAME, LLMS_TXT_FILENAME
from .discovery import discover_markdown_files, prepare_files
from .generator import (
    LlmsTxtOptions,
    MarkdownTextNormalizer,
    generate_llms_full_txt,
    generate_llms_txt,
)
from .stats import estimate_tokens, human_readable_size

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import LlmstxtSettings
    from .generator import PreparedFile

logger = logging.getLogger(__name__)


class LlmsTxtBuilder:
    """Render the LLM-oriented documents described by ``settings``."""

    def __init__(self, settings: LlmstxtSettings) -> None:
        self.settings = settings
        self.normalizer = MarkdownTextNormalizer(strip_html=settings.strip_html)

    def run(self) -> list[Path]:
        """Generate every enabled document and return the written paths."""
        files = self.prepare()
        written: list[Path] = []
        if self.settings.generate_llms_txt:
            written.append(self._write(LLMS_TXT_FILENAME, self.render_llms_txt(files)))
        if self.settings.generate_llms_full_txt:
            content = asyncio.run(self.render_llms_full_txt(files))
            written.append(self._write(LLMS_FULL_TXT_FILENAME, content))
        return written

    def prepare(self) -> list[PreparedFile]:
        """Discover and parse the pages under ``work_dir``."""
        paths = discover_markdown_files(
            self.settings.work_dir, self.settings.ignore_files
        )
        return prepare_files(paths)

    def llms_txt_options(self) -> LlmsTxtOptions:
        settings = self.settings
        return LlmsTxtOptions(
            src_dir=settings.work_dir,
            index_md=settings.index_path,
            template=settings.custom_template,
            template_variables=settings.template_variables,
            site_title=settings.site.title,
            site_description=settings.site.description,
            link_options=settings.link_options,
        )

    def render_llms_txt(self, files: list[PreparedFile]) -> str:
        return generate_llms_txt(files, self.llms_txt_options())

    async def render_llms_full_txt(self, files: list[PreparedFile]) -> str:
        return await generate_llms_full_txt(
            files,
            src_dir=self.settings.work_dir,
            link_options=self.settings.link_options,
            normalizer=self.normalizer,
        )

    def _write(self, filename: str, content: str) -> Path:
        output_path = self.settings.output_dir / filename
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if not content.endswith("\n"):
            content += "\n"
        output_path.write_text(content, encoding="utf-8")
        size = len(content.encode("utf-8"))
        logger.info(
            "Generated %s (%s, ~%d tokens)",
            output_path,
            human_readable_size(size),
            estimate_tokens(content),
        )
        return output_path


__all__ = ["LlmsTxtBuilder"]
