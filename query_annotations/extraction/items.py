"""Split delimited lists like "abc, def, ghi" into their items."""

import re

from ..errors import InvalidArgumentError


def extract_items(query: str, separator: str) -> list[str]:
    """
    Split a delimited string into trimmed, non-empty items.

    Args:
        query: The list of items, e.g. "abc, def, ghi"
        separator: The single character separating the items

    Returns:
        The items in order of appearance, e.g. ["abc", "def", "ghi"]
    """
    if len(separator) != 1:
        raise InvalidArgumentError(f"separator must be one character, got {separator!r}")

    items = []
    for match in re.finditer(f"[^{re.escape(separator)}]+", query):
        value = match.group().strip()
        if value:
            items.append(value)
    return items
