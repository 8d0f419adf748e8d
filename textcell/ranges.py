"""
Binary search over the sorted codepoint tables in
:mod:`textcell._unicodedb`.

Tables are tuples of ``(start, end)`` or ``(start, end, tag)`` sorted
by start and not overlapping, or sorted tuples of single codepoints.
Nothing here checks that at runtime - the test suite does.
"""

from __future__ import annotations

from typing import Any, Sequence

import enum


class GraphemeBreak(enum.IntEnum):
    "Grapheme_Cluster_Break property values from UAX #29"

    Other = 0
    CR = 1
    LF = 2
    Control = 3
    Extend = 4
    ZWJ = 5
    Regional_Indicator = 6
    Prepend = 7
    SpacingMark = 8
    L = 9
    V = 10
    T = 11
    LV = 12
    LVT = 13


def range_lookup(codepoint: int, ranges: Sequence[tuple], default: Any = None) -> Any:
    """Returns the tag of the range containing ``codepoint``, or ``default``

    ``ranges`` must be ``(start, end, tag)`` triples."""
    low = 0
    high = len(ranges) - 1
    while low <= high:
        mid = (low + high) // 2
        entry = ranges[mid]
        if codepoint < entry[0]:
            high = mid - 1
        elif codepoint > entry[1]:
            low = mid + 1
        else:
            return entry[2]
    return default


def range_contains(codepoint: int, ranges: Sequence[tuple]) -> bool:
    "Returns True if ``codepoint`` is inside any of the ``(start, end)`` ranges"
    low = 0
    high = len(ranges) - 1
    while low <= high:
        mid = (low + high) // 2
        start, end = ranges[mid][0], ranges[mid][1]
        if codepoint < start:
            high = mid - 1
        elif codepoint > end:
            low = mid + 1
        else:
            return True
    return False


def value_contains(codepoint: int, values: Sequence[int]) -> bool:
    "Returns True if ``codepoint`` is one of the sorted ``values``"
    low = 0
    high = len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if codepoint < values[mid]:
            high = mid - 1
        elif codepoint > values[mid]:
            low = mid + 1
        else:
            return True
    return False


def check_codepoint(codepoint: int | str) -> int:
    """Returns ``codepoint`` as an int, accepting a single character str

    Raises :exc:`TypeError` for other types and :exc:`ValueError` when
    outside 0 - 0x10FFFF."""
    if isinstance(codepoint, str):
        if len(codepoint) != 1:
            raise TypeError(f"Expected a single character str, not one of length {len(codepoint)}")
        return ord(codepoint)
    if isinstance(codepoint, bool) or not isinstance(codepoint, int):
        raise TypeError(f"Expected int or str codepoint, not {type(codepoint).__name__}")
    if not 0 <= codepoint <= 0x10FFFF:
        raise ValueError(f"{codepoint=} is out of range 0 - 0x10FFFF")
    return codepoint
