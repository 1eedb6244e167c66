"""String transforms and date templating."""

from .transforms import (
    compress,
    equal_null_or_empty,
    no_spaces,
    obfuscate,
    split_blob_filename,
    split_name,
    truncate,
)
from .dates import DateKind, format_date, format_with_date

__all__ = [
    "compress",
    "equal_null_or_empty",
    "no_spaces",
    "obfuscate",
    "split_blob_filename",
    "split_name",
    "truncate",
    "DateKind",
    "format_date",
    "format_with_date",
]
