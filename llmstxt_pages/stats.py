"""Size and token estimates reported for generated documents."""

from __future__ import annotations

import re

TOKEN_PATTERN = re.compile(r"\w+|[^\s\w]", re.UNICODE)
SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def human_readable_size(num_bytes: int, decimals: int = 1) -> str:
    """Format ``num_bytes`` using 1024-based units, for example ``"2.5 KB"``.

    Examples
    --------
    >>> human_readable_size(0)
    '0 Bytes'
    >>> human_readable_size(2560)
    '2.5 KB'
    >>> human_readable_size(1024)
    '1 KB'
    """
    if num_bytes <= 0:
        return "0 Bytes"
    digits = max(decimals, 0)
    value = float(num_bytes)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS) - 1:
        value /= 1024
        index += 1
    value = round(value, digits)
    text = f"{value:.{digits}f}".rstrip("0").rstrip(".") if digits else f"{value:.0f}"
    return f"{text} {SIZE_UNITS[index]}"


def estimate_tokens(text: str) -> int:
    """Approximate a token count by counting word and punctuation runs."""
    return len(TOKEN_PATTERN.findall(text))


__all__ = ["estimate_tokens", "human_readable_size"]
