"""
Query annotation extraction.

Pulls [tags], {interests}, (notes), @Organizations and key:value settings out
of free-form search strings, plus the small string, collection and time
helpers our apps share.
"""

__version__ = "1.0.0"

from .errors import AnnotationError, DuplicateKeyError, InvalidArgumentError
from .extraction import (
    BracketType,
    QueryComponents,
    extract_bracketed_text,
    extract_items,
    extract_parameters,
    query_components,
)
from .text import (
    DateKind,
    compress,
    equal_null_or_empty,
    format_with_date,
    no_spaces,
    obfuscate,
    split_blob_filename,
    split_name,
    truncate,
)
from .helpers import add_range, max_timedelta, try_add

__all__ = [
    "__version__",
    "AnnotationError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "BracketType",
    "QueryComponents",
    "extract_bracketed_text",
    "extract_items",
    "extract_parameters",
    "query_components",
    "DateKind",
    "compress",
    "equal_null_or_empty",
    "format_with_date",
    "no_spaces",
    "obfuscate",
    "split_blob_filename",
    "split_name",
    "truncate",
    "add_range",
    "max_timedelta",
    "try_add",
]
