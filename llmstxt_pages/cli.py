"""Cyclopts CLI entrypoint for generating llms.txt artifacts.

The ``llmstxt`` console script defined here reads ``llmstxt.yaml``, discovers
the Markdown pages under the configured documentation directory, and writes
``llms.txt`` (a linked table of contents) and ``llms-full.txt`` (every page's
normalized content). Every option can also be supplied through an
``LLMSTXT_``-prefixed environment variable, which keeps CI usage short.

Examples
--------
Generate both documents for the default configuration:

>>> from llmstxt_pages.cli import main
>>> main()  # doctest: +SKIP

Preview the table of contents with absolute links:

>>> from llmstxt_pages.cli import app
>>> app(["toc", "--domain", "https://example.com"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILENAME
from .builder import LlmsTxtBuilder
from .config import LlmstxtSettings, load_settings
from .generator import generate_toc

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILENAME)

app = App(name="llmstxt", config=cyclopts.config.Env("LLMSTXT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(
    config: Path,
    *,
    work_dir: Path | None = None,
    output_dir: Path | None = None,
    domain: str | None = None,
    clean_urls: bool | None = None,
) -> LlmstxtSettings:
    """Load ``config`` (or defaults when absent) and apply CLI overrides."""
    if config.exists():
        settings = load_settings(config)
    elif config == DEFAULT_CONFIG:
        settings = LlmstxtSettings()
    else:
        msg = f"Configuration file '{config}' not found."
        raise FileNotFoundError(msg)

    overrides: dict[str, typ.Any] = {}
    if work_dir is not None:
        overrides["work_dir"] = work_dir
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if domain is not None:
        overrides["domain"] = domain
    if clean_urls is not None:
        overrides["clean_urls"] = clean_urls
    return dc.replace(settings, **overrides) if overrides else settings


@app.command(help="Generate llms.txt and llms-full.txt from Markdown sources.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to llmstxt config", env_var="LLMSTXT_CONFIG")
    ] = DEFAULT_CONFIG,
    work_dir: typ.Annotated[
        Path | None, Parameter(help="Override the documentation directory")
    ] = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    domain: typ.Annotated[
        str | None, Parameter(help="Domain prepended to generated links")
    ] = None,
    clean_urls: typ.Annotated[
        bool | None, Parameter(help="Omit extensions from generated links")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log progress at INFO level")] = False,
) -> None:
    """Generate the LLM-oriented documents for the configured docs tree.

    Parameters
    ----------
    config : Path, optional
        Path to the ``llmstxt.yaml`` configuration file (overridable via
        ``LLMSTXT_CONFIG``). The default file may be absent, in which case
        built-in defaults apply.
    work_dir : Path or None, optional
        Override the directory scanned for Markdown pages.
    output_dir : Path or None, optional
        Override the directory receiving the generated files.
    domain : str or None, optional
        Override the domain used for absolute links.
    clean_urls : bool or None, optional
        Override whether links omit their extension.
    verbose : bool, optional
        Emit INFO-level progress logs.

    Returns
    -------
    None
        Writes the enabled documents and prints their paths.

    Raises
    ------
    FileNotFoundError
        If an explicitly requested config file or the docs directory is
        missing.
    """
    _configure_logging(verbose)
    settings = _load(
        config,
        work_dir=work_dir,
        output_dir=output_dir,
        domain=domain,
        clean_urls=clean_urls,
    )
    written = LlmsTxtBuilder(settings).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the generated table of contents to stdout.")
def toc(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to llmstxt config", env_var="LLMSTXT_CONFIG")
    ] = DEFAULT_CONFIG,
    work_dir: typ.Annotated[
        Path | None, Parameter(help="Override the documentation directory")
    ] = None,
    domain: typ.Annotated[
        str | None, Parameter(help="Domain prepended to generated links")
    ] = None,
    clean_urls: typ.Annotated[
        bool | None, Parameter(help="Omit extensions from generated links")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log progress at INFO level")] = False,
) -> None:
    """Print the table of contents that ``generate`` would embed in llms.txt."""
    _configure_logging(verbose)
    settings = _load(config, work_dir=work_dir, domain=domain, clean_urls=clean_urls)
    files = LlmsTxtBuilder(settings).prepare()
    print(
        generate_toc(
            files, src_dir=settings.work_dir, link_options=settings.link_options
        )
    )


def main() -> None:
    """Invoke the Cyclopts application that powers the `llmstxt` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
