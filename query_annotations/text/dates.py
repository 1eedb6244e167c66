"""
Date templating for strings like "backup-{yyyy-MM-dd}.zip".

Patterns use the .NET date/time format language with invariant culture
names, since that is what the templates stored by our host apps are
written in. A one-character pattern is a standard format ("d", "o", ...);
anything longer is a custom format built from specifier runs.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Union

from ..config import settings
from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class DateKind(str, Enum):
    """Which clock format_with_date reads when not given an explicit date."""
    UTC = "utc"
    LOCAL = "local"
    UNSPECIFIED = "unspecified"


TEMPLATE_RE = re.compile(r"\{(.*?)\}")

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

STANDARD_FORMATS = {
    "d": "MM/dd/yyyy",
    "D": "dddd, dd MMMM yyyy",
    "f": "dddd, dd MMMM yyyy HH:mm",
    "F": "dddd, dd MMMM yyyy HH:mm:ss",
    "g": "MM/dd/yyyy HH:mm",
    "G": "MM/dd/yyyy HH:mm:ss",
    "m": "MMMM dd",
    "M": "MMMM dd",
    "o": "yyyy'-'MM'-'dd'T'HH':'mm':'ss'.'fffffffK",
    "O": "yyyy'-'MM'-'dd'T'HH':'mm':'ss'.'fffffffK",
    "r": "ddd, dd MMM yyyy HH':'mm':'ss 'GMT'",
    "R": "ddd, dd MMM yyyy HH':'mm':'ss 'GMT'",
    "s": "yyyy'-'MM'-'dd'T'HH':'mm':'ss",
    "t": "HH:mm",
    "T": "HH:mm:ss",
    "u": "yyyy'-'MM'-'dd HH':'mm':'ss'Z'",
    "U": "dddd, dd MMMM yyyy HH:mm:ss",
    "y": "yyyy MMMM",
    "Y": "yyyy MMMM",
}

SPECIFIERS = set("dfFghHKmMstyz")
MAX_FRACTION_DIGITS = 7


def _utc_offset(date: datetime):
    # Naive datetimes are treated as local time
    offset = date.utcoffset()
    if offset is None:
        offset = date.astimezone().utcoffset()
    return offset


def _is_utc(date: datetime) -> bool:
    if date.tzinfo is timezone.utc:
        return True
    return date.utcoffset() == timedelta(0) and date.tzname() == "UTC"


def _offset_text(date: datetime, count: int) -> str:
    minutes = int(_utc_offset(date).total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    if count == 1:
        return f"{sign}{hours}"
    if count == 2:
        return f"{sign}{hours:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def _field(date: datetime, spec: str, count: int) -> str:
    """Render one run of a custom format specifier."""
    if spec == "d":
        if count == 1:
            return str(date.day)
        if count == 2:
            return f"{date.day:02d}"
        name = DAY_NAMES[date.weekday()]
        return name[:3] if count == 3 else name
    if spec in "fF":
        if count > MAX_FRACTION_DIGITS:
            raise InvalidArgumentError(f"Too many fraction digits: {spec * count}")
        digits = f"{date.microsecond:06d}0"[:count]
        return digits if spec == "f" else digits.rstrip("0")
    if spec == "g":
        return "A.D."
    if spec == "h":
        hour = date.hour % 12 or 12
        return str(hour) if count == 1 else f"{hour:02d}"
    if spec == "H":
        return str(date.hour) if count == 1 else f"{date.hour:02d}"
    if spec == "K":
        if date.tzinfo is None:
            return ""
        if _is_utc(date):
            return "Z"
        return _offset_text(date, 3)
    if spec == "m":
        return str(date.minute) if count == 1 else f"{date.minute:02d}"
    if spec == "M":
        if count == 1:
            return str(date.month)
        if count == 2:
            return f"{date.month:02d}"
        name = MONTH_NAMES[date.month - 1]
        return name[:3] if count == 3 else name
    if spec == "s":
        return str(date.second) if count == 1 else f"{date.second:02d}"
    if spec == "t":
        designator = "AM" if date.hour < 12 else "PM"
        return designator[0] if count == 1 else designator
    if spec == "y":
        if count == 1:
            return str(date.year % 100)
        if count == 2:
            return f"{date.year % 100:02d}"
        return f"{date.year:0{count}d}"
    # z
    return _offset_text(date, min(count, 3))


def _format_custom(date: datetime, pattern: str) -> str:
    out = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch in "'\"":
            end = pattern.find(ch, i + 1)
            if end < 0:
                raise InvalidArgumentError(f"Unterminated quote in {pattern!r}")
            out.append(pattern[i + 1:end])
            i = end + 1
        elif ch == "\\":
            if i + 1 >= n:
                raise InvalidArgumentError(f"Trailing escape in {pattern!r}")
            out.append(pattern[i + 1])
            i += 2
        elif ch == "%":
            if i + 1 >= n or pattern[i + 1] not in SPECIFIERS:
                raise InvalidArgumentError(f"Bad % specifier in {pattern!r}")
            out.append(_field(date, pattern[i + 1], 1))
            i += 2
        elif ch in SPECIFIERS:
            run = 1
            while i + run < n and pattern[i + run] == ch:
                run += 1
            text = _field(date, ch, run)
            # an empty F fraction takes its decimal point with it
            if ch == "F" and not text and out and out[-1].endswith("."):
                out[-1] = out[-1][:-1]
            out.append(text)
            i += run
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def format_date(date: datetime, pattern: str) -> str:
    """
    Format a date with a .NET style format pattern.

    Raises:
        InvalidArgumentError: The pattern is not a valid date format
    """
    if len(pattern) == 1:
        if pattern not in STANDARD_FORMATS:
            raise InvalidArgumentError(f"Unknown standard format {pattern!r}")
        if pattern == "U":
            date = date.astimezone(timezone.utc)
        pattern = STANDARD_FORMATS[pattern]
    elif not pattern:
        raise InvalidArgumentError("Empty format pattern")
    return _format_custom(date, pattern)


def now_for(kind: Union[DateKind, str]) -> datetime:
    """Current time on the clock for kind. Both results are timezone aware."""
    try:
        kind = DateKind(kind)
    except ValueError:
        raise InvalidArgumentError(f"Unknown date kind: {kind!r}") from None
    if kind == DateKind.UTC:
        return datetime.now(timezone.utc)
    if kind == DateKind.LOCAL:
        return datetime.now().astimezone()
    raise InvalidArgumentError("kind cannot be unspecified")


def format_with_date(src: str, date_or_kind: Union[datetime, DateKind, str]) -> str:
    """
    Replace every {format} in src with the date formatted that way.

    {yyyy-MM-dd} becomes e.g. 2024-07-04. Braced text that is too long to be
    a date pattern, or that isn't one, is left as is, braces included.

    Args:
        src: The source string with the {date formats} in it
        date_or_kind: The date to use, or DateKind.UTC / DateKind.LOCAL for now

    Returns:
        The string with the {format} elements replaced
    """
    if isinstance(date_or_kind, datetime):
        date = date_or_kind
    else:
        date = now_for(date_or_kind)

    index = 0
    line = []
    for match in TEMPLATE_RE.finditer(src):
        line.append(src[index:match.start()])
        pattern = match.group(1)

        # longer than this and it's not a date pattern, so don't even try
        if len(pattern) > settings.date_pattern_max_length:
            line.append(match.group())
        else:
            try:
                line.append(format_date(date, pattern))
            except InvalidArgumentError as e:
                logger.debug(f"Leaving {{{pattern}}} unformatted: {e}")
                line.append(match.group())
        index = match.end()

    line.append(src[index:])
    return "".join(line)
