"""Split a full text search into its query text, interests, tags and organizations."""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from .brackets import AT_IDENTIFIER_RE, CURLY_BRACKETS_RE, SQUARE_BRACKETS_RE

logger = logging.getLogger(__name__)

# Just the brackets, not what's in them.
BRACKET_CHARS_RE = re.compile(r"\[|\]|\{|\}")


@dataclass
class QueryComponents:
    """A search string broken into its parts."""
    query_text: str = ""
    interests: list[str] = field(default_factory=list)       # {interest}
    tags: list[str] = field(default_factory=list)            # [tag]
    organizations: list[str] = field(default_factory=list)   # @Organization


def _captures(regex: re.Pattern, text: str) -> list[str]:
    return [m.group(1) for m in regex.finditer(text) if m.group(1)]


def query_components(full_text_search: Optional[str]) -> QueryComponents:
    """
    Copy out every {Interest}, [Tag] and @Org in a full text search.

    The query text keeps "Interest" and "Tag" without their brackets, but
    @Org names are removed from it entirely.

    Args:
        full_text_search: The full query string with annotations

    Returns:
        QueryComponents with the trimmed query text and the three lists
    """
    if not full_text_search:
        return QueryComponents()

    components = QueryComponents(
        interests=_captures(CURLY_BRACKETS_RE, full_text_search),
        tags=_captures(SQUARE_BRACKETS_RE, full_text_search),
        organizations=_captures(AT_IDENTIFIER_RE, full_text_search),
    )

    # Orgs go first so "@Dave[tag]" loses "@Dave" and not the "[" after it.
    no_names = full_text_search
    match = AT_IDENTIFIER_RE.search(no_names)
    while match:
        no_names = no_names.replace(f"@{match.group(1)}", "")
        match = AT_IDENTIFIER_RE.search(no_names)

    components.query_text = BRACKET_CHARS_RE.sub("", no_names).strip()
    logger.debug(
        f"Query components: {len(components.interests)} interests, "
        f"{len(components.tags)} tags, {len(components.organizations)} orgs"
    )
    return components
