"""
Bracketed text extraction.

Pulls [tags], {tags}, (tags) and @tags out of a search string. An @tag cannot
contain whitespace or any of ()<>{}[]#@,.:;" - the first of those ends it.
"""

import logging
import re
from enum import Enum

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class BracketType(str, Enum):
    """Kind of delimiter extract_bracketed_text looks for."""
    SQUARE = "square"         # [tag]
    CURLY = "curly"           # {tag}
    ROUND = "round"           # (tag)
    AT_IDENTIFIER = "at"      # @tag


SQUARE_BRACKETS_RE = re.compile(r"\[(.*?)\]")
CURLY_BRACKETS_RE = re.compile(r"\{(.*?)\}")
ROUND_BRACKETS_RE = re.compile(r"\((.*?)\)")

# Group 2 is the terminator. It is part of the match but belongs to the text
# that follows the name.
AT_IDENTIFIER_RE = re.compile(r'@(.*?)([\s()<>{}\[\]#@,.:;"]|$)')

_PATTERNS = {
    BracketType.SQUARE: SQUARE_BRACKETS_RE,
    BracketType.CURLY: CURLY_BRACKETS_RE,
    BracketType.ROUND: ROUND_BRACKETS_RE,
    BracketType.AT_IDENTIFIER: AT_IDENTIFIER_RE,
}


def pattern_for(bracket_type: BracketType | str) -> re.Pattern:
    """Get the compiled pattern for a bracket type (member or its value)."""
    try:
        return _PATTERNS[BracketType(bracket_type)]
    except ValueError:
        raise InvalidArgumentError(f"Unknown bracket type: {bracket_type!r}") from None


def extract_bracketed_text(query: str, bracket_type: BracketType | str) -> tuple[str, list[str]]:
    """
    Extract all bracketed text from a query.

    Unbalanced brackets don't match and are left in the remainder.

    Args:
        query: The full query string with [tags] as part of it
        bracket_type: Which delimiters to extract

    Returns:
        The query without the bracketed regions, and the tags without their brackets
    """
    regex = pattern_for(bracket_type)
    tags = []
    remainder = []
    index = 0

    for match in regex.finditer(query):
        remainder.append(query[index:match.start()])
        tags.append(match.group(1))
        index = match.end()
        # for "@name." the "." was matched but goes back to the remainder
        if regex.groups > 1:
            index -= len(match.group(2))

    remainder.append(query[index:])
    logger.debug(f"Extracted {len(tags)} {BracketType(bracket_type).value} tags")
    return "".join(remainder), tags
