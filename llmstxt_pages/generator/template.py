"""Expand ``{name}`` placeholders in the ``llms.txt`` template."""

from __future__ import annotations

import re
import typing as typ

from .models import TemplateVariables, render_template_value

PLACEHOLDER_PATTERN = re.compile(r"\{([^}]+)\}")


def expand_template(
    template: str,
    variables: TemplateVariables | typ.Mapping[str, object],
) -> str:
    """Replace every ``{name}`` in ``template`` with its variable value.

    Unknown names and ``None`` values expand to an empty string. Substituted
    values are not scanned again, and there is no escape for literal braces.

    Examples
    --------
    >>> expand_template("{a}-{b}", {"a": "1"})
    '1-'
    """
    lookup = (
        variables.as_mapping()
        if isinstance(variables, TemplateVariables)
        else variables
    )

    def _replace(match: re.Match[str]) -> str:
        value = lookup.get(match.group(1))
        return "" if value is None else render_template_value(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


__all__ = ["PLACEHOLDER_PATTERN", "expand_template"]
