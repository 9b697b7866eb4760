"""Derive llms.txt and llms-full.txt from a tree of Markdown pages.

This package exposes the CLI entry points used by ``llmstxt generate`` to
write a linked table of contents (``llms.txt``) and a full-content
concatenation (``llms-full.txt``) for Large Language Model consumption.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from llmstxt_pages import main
>>> main()  # doctest: +SKIP
>>> from llmstxt_pages import app
>>> app.name[0]
'llmstxt'
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
