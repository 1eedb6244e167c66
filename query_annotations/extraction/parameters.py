"""Extract key:value settings from a query string."""

import logging
import re

from ..errors import DuplicateKeyError
from ..helpers import try_add

logger = logging.getLogger(__name__)

# key:'value with spaces' or key:valueNoSpaces, each taking one trailing space.
# Keys are word characters; a quoted value can hold anything but a '.
KEY_VALUE_RE = re.compile(r"\w+\s*:\s*'[^']+'\s?|\w+\s*:\s*\S+\s?")


def extract_parameters(query: str, force_keys_lower_case: bool = False) -> tuple[str, dict[str, str]]:
    """
    Pull all key:value pairs out of a query string.

    Values with spaces must be quoted as key:'some value'. The single
    whitespace character after a pair is removed along with it, so
    "david a:1 thielen" leaves "david thielen".

    Args:
        query: The full query string with key:value pairs as part of it
        force_keys_lower_case: Lower-case the keys. Values are never changed.

    Returns:
        The query without the pairs, and the pairs in order of appearance

    Raises:
        DuplicateKeyError: A key appears more than once
    """
    remainder = []
    settings: dict[str, str] = {}
    index = 0

    for match in KEY_VALUE_RE.finditer(query):
        token = match.group()
        position = token.index(":")
        remainder.append(query[index:match.start()])

        key = token[:position].strip()
        if force_keys_lower_case:
            key = key.lower()
        value = token[position + 1:].strip()
        if len(value) >= 2 and value.startswith("'") and value.endswith("'"):
            value = value[1:-1]

        if not try_add(settings, key, value):
            logger.debug(f"Duplicate key {key!r} at offset {match.start()}")
            raise DuplicateKeyError(key)
        index = match.end()

    remainder.append(query[index:])
    return "".join(remainder), settings
