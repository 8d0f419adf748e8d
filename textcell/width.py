"""
How many terminal columns a codepoint occupies.

East Asian Ambiguous codepoints are not special cased and are narrow.
"""

from __future__ import annotations

from .codec import Buffer, _decode, check_offset, check_text
from .ranges import check_codepoint, range_contains
from ._unicodedb import DOUBLE_WIDTH, ZERO_WIDTH


def _codepoint_width(cp: int) -> int:
    if cp < 0x20:
        # NUL is representable but doesn't move the cursor
        return 0 if cp == 0 else -1
    if cp < 0x7F:
        return 1
    if cp < 0xA0:
        # DEL and C1 controls
        return -1
    # soft hyphen - shown when editing
    if cp == 0x00AD:
        return 1
    if range_contains(cp, ZERO_WIDTH):
        return 0
    if range_contains(cp, DOUBLE_WIDTH):
        return 2
    return 1


def codepoint_width(codepoint: int | str) -> int:
    """Returns how many columns the codepoint occupies

    :returns: -1 for control characters that can't be shown, 0 for
        combining marks, format characters and NUL, 2 for wide (CJK,
        fullwidth, emoji) codepoints, and 1 for everything else.
    """
    return _codepoint_width(check_codepoint(codepoint))


def char_width(text: Buffer, offset: int = 0, length: int | None = None) -> int:
    "Width of the character starting at ``offset``, 0 when at or beyond the end"
    text, end = check_text(text, length)
    check_offset(offset)
    if offset >= end:
        return 0
    cp, _ = _decode(text, offset, end)
    return _codepoint_width(cp)


def is_zero_width(codepoint: int | str) -> bool:
    "Returns True if the codepoint is a nonspacing or enclosing mark, or a format character other than soft hyphen"
    return range_contains(check_codepoint(codepoint), ZERO_WIDTH)


def is_wide(codepoint: int | str) -> bool:
    "Returns True if the codepoint is East Asian Wide/Fullwidth or an emoji"
    return range_contains(check_codepoint(codepoint), DOUBLE_WIDTH)
