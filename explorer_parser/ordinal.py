"""
Ordinal labels ("Account #3") and ordering by their number.
"""

from typing import Callable, Iterable, TypeVar

from .exceptions import OrdinalParseError

T = TypeVar("T")

ORDINAL_MARKER = "#"


def parse_ordinal(label: str) -> int:
    """Integer after the last '#' in `label`."""
    head, marker, suffix = label.rpartition(ORDINAL_MARKER)
    suffix = suffix.strip()
    if not marker or not suffix.isdecimal():
        raise OrdinalParseError(label)
    return int(suffix)


def sort_by_ordinal(items: Iterable[T], key: Callable[[T], str]) -> list[T]:
    """Stable ascending sort of `items` by the ordinal in key(item)."""
    return sorted(items, key=lambda item: parse_ordinal(key(item)))
