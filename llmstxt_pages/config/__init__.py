"""Load and validate llmstxt configuration YAML.

This subpackage parses the project's ``llmstxt.yaml`` file, applies defaults,
resolves paths relative to the file, and produces a typed
:class:`LlmstxtSettings` that the builder and CLI consume. The primary entry
point is :func:`load_settings`.

Examples
--------
>>> from pathlib import Path
>>> from llmstxt_pages.config import load_settings
>>> settings = load_settings(Path("llmstxt.yaml"))  # doctest: +SKIP
>>> settings.work_dir  # doctest: +SKIP
PosixPath('docs')
"""

from .loader import build_settings, load_settings
from .models import LlmstxtSettings, SiteConfigError, SiteInfo

__all__ = [
    "LlmstxtSettings",
    "SiteConfigError",
    "SiteInfo",
    "build_settings",
    "load_settings",
]
