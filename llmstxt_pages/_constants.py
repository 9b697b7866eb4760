"""Common literal values used across llmstxt_pages.

These constants keep output filenames, the default ``llms.txt`` template and
the section divider centralized so generators, the CLI, and tests import the
same values without drifting. Intended for internal use within the
llmstxt_pages package.

Examples
--------
>>> from llmstxt_pages import _constants
>>> _constants.LLMS_TXT_FILENAME
'llms.txt'
>>> "{toc}" in _constants.DEFAULT_LLMS_TXT_TEMPLATE
True
"""

LLMS_TXT_FILENAME = "llms.txt"
LLMS_FULL_TXT_FILENAME = "llms-full.txt"
DEFAULT_CONFIG_FILENAME = "llmstxt.yaml"
DEFAULT_LINKS_EXTENSION = ".md"
INDEX_FILENAME = "index.md"
UNTITLED_PAGE = "Untitled"
SECTION_DIVIDER = "\n\n---\n\n"

DEFAULT_LLMS_TXT_TEMPLATE = """\
# {title}

> {description}

{details}

## Table of Contents

{toc}
"""
