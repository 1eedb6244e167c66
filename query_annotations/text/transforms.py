"""String helpers for names, identifiers and display values."""

import re
from typing import Optional

from ..config import settings
from ..errors import InvalidArgumentError

# Everything except alphanumerics and -
CLEAN_RE = re.compile(r"[^a-zA-Z0-9-]")

ELLIPSIS = "..."


def equal_null_or_empty(s1: Optional[str], s2: Optional[str]) -> bool:
    """Compare two strings, treating None and "" as equal to each other."""
    if not s1:
        return not s2
    return s1 == s2


def compress(src: str) -> str:
    """Remove everything except alphanumerics and -."""
    return CLEAN_RE.sub("", src)


def no_spaces(src: str) -> str:
    """Remove all spaces, then trim."""
    return src.replace(" ", "").strip()


def truncate(src: str, length: int) -> str:
    """
    Truncate a string to at most length characters.

    Strings that are cut end in "..." unless length is too short to hold
    anything besides the ellipsis, in which case they are hard cut.
    """
    if length < 0:
        raise InvalidArgumentError(f"length cannot be negative: {length}")
    if len(src) <= length:
        return src
    if length <= len(ELLIPSIS):
        return src[:length]
    return src[:length - len(ELLIPSIS)] + ELLIPSIS


def split_blob_filename(filename: str) -> tuple[str, str]:
    """
    Split a BLOB path into its container and the rest of the filename.

    "/container/dir/file.txt" -> ("container", "dir/file.txt"). Either / or
    \\ separates the parts.
    """
    filename = filename.lstrip("/\\")

    match = re.search(r"[/\\]", filename)
    if match is None:
        raise InvalidArgumentError(f"No container separator in {filename!r}")
    pos = match.start()
    return filename[:pos].strip(), filename[pos + 1:].strip()


def obfuscate(src: str) -> str:
    """Mask all but the last few characters. Short strings are masked completely."""
    visible = settings.obfuscate_visible_chars
    mask = settings.obfuscate_mask_char
    if len(src) <= visible:
        return mask * len(src)
    return mask * (len(src) - visible) + src[len(src) - visible:]


def split_name(name: str) -> tuple[Optional[str], Optional[str], str]:
    """
    Split a full name into first, middle and last.

    The first word is the first name, the last word is the last name, and
    everything in between is the middle name. With no spaces only the last
    name is set.
    """
    name = name.strip()

    parts = name.split(" ")
    if len(parts) == 1:
        return None, None, name
    if len(parts) == 2:
        return parts[0], None, parts[1]
    middle = name[len(parts[0]):len(name) - len(parts[-1])].strip()
    return parts[0], middle, parts[-1]
