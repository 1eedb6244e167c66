"""Small collection and time helpers the standard library doesn't ship."""

from collections.abc import Iterable, MutableMapping, MutableSequence, MutableSet
from datetime import timedelta
from typing import Any

from .errors import InvalidArgumentError


def add_range(destination, source: Iterable) -> None:
    """
    Add every element of source to the end of destination.

    Args:
        destination: A mutable sequence (appended to) or mutable set (added to)
        source: Elements to add, in order
    """
    if isinstance(destination, MutableSequence):
        add = destination.append
    elif isinstance(destination, MutableSet):
        add = destination.add
    else:
        raise InvalidArgumentError(
            f"Cannot add items to {type(destination).__name__}"
        )
    for item in source:
        add(item)


def try_add(mapping: MutableMapping, key: Any, value: Any) -> bool:
    """Insert key/value if key is absent. Returns False if the key already exists."""
    if key in mapping:
        return False
    mapping[key] = value
    return True


def max_timedelta(first: timedelta, second: timedelta) -> timedelta:
    """Return the longer of the two timespans."""
    return first if first >= second else second
