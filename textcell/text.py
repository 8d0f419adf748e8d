"""
Whole string operations - validation, counting, measuring, and
truncating to fit a number of terminal columns.
"""

from __future__ import annotations

from .codec import REPLACEMENT_CHARACTER, Buffer, _decode, check_offset, check_text
from .grapheme import _next_grapheme
from .width import _codepoint_width

_ENCODED_REPLACEMENT = b"\xef\xbf\xbd"


def validate(text: Buffer, length: int | None = None) -> tuple[bool, int | None]:
    """Checks ``text`` is well formed UTF-8

    A literal U+FFFD (``EF BF BD``) in the text is valid.

    :returns: A tuple of True and None if valid, else False and the
        offset of the first problem
    """
    text, end = check_text(text, length)
    offset = 0
    while offset < end:
        cp, consumed = _decode(text, offset, end)
        if cp == REPLACEMENT_CHARACTER and (consumed != 3 or bytes(text[offset : offset + 3]) != _ENCODED_REPLACEMENT):
            return False, offset
        offset += consumed
    return True, None


def codepoint_count(text: Buffer, length: int | None = None) -> int:
    "Number of codepoints in ``text``, with each malformed sequence counting as one"
    text, end = check_text(text, length)
    count = 0
    offset = 0
    while offset < end:
        _, consumed = _decode(text, offset, end)
        offset += consumed
        count += 1
    return count


def string_width(text: Buffer, length: int | None = None) -> int:
    """How many columns ``text`` occupies

    Control characters contribute nothing rather than making the result
    negative."""
    text, end = check_text(text, length)
    width = 0
    offset = 0
    while offset < end:
        cp, consumed = _decode(text, offset, end)
        w = _codepoint_width(cp)
        if w > 0:
            width += w
        offset += consumed
    return width


def _check_max_cols(max_cols: int) -> None:
    if isinstance(max_cols, bool) or not isinstance(max_cols, int):
        raise TypeError(f"max_cols must be an int, not {type(max_cols).__name__}")
    if max_cols < 0:
        raise ValueError(f"{max_cols=} must not be negative")


def truncate(text: Buffer, max_cols: int, length: int | None = None) -> int:
    """Finds where to cut ``text`` so it fits in ``max_cols`` columns

    Zero width and control characters never cause truncation.  This
    works per codepoint and can separate combining marks from their
    base - use :func:`truncate_graphemes` to avoid that.

    :returns: Offset of the first character that would not fit, or the
        length if everything fits
    """
    text, end = check_text(text, length)
    _check_max_cols(max_cols)
    width = 0
    offset = 0
    while offset < end:
        cp, consumed = _decode(text, offset, end)
        w = _codepoint_width(cp)
        if w > 0:
            if width + w > max_cols:
                return offset
            width += w
        offset += consumed
    return end


def _grapheme_width(text: Buffer, offset: int, end: int) -> int:
    widest = 0
    while offset < end:
        cp, consumed = _decode(text, offset, end)
        w = _codepoint_width(cp)
        if w < 0:
            return -1
        widest = max(widest, w)
        offset += consumed
    return widest


def grapheme_width(text: Buffer, offset: int = 0, length: int | None = None) -> int:
    """Width of the grapheme cluster starting at ``offset``

    The cluster is as wide as its widest codepoint, so an emoji ZWJ
    sequence is 2 and a base with combining marks is 1.

    :returns: -1 if the cluster contains a control character, 0 if
        ``offset`` is at or beyond the end
    """
    text, end = check_text(text, length)
    check_offset(offset)
    if offset >= end:
        return 0
    return _grapheme_width(text, offset, _next_grapheme(text, offset, end))


def truncate_graphemes(text: Buffer, max_cols: int, length: int | None = None) -> int:
    """Like :func:`truncate` but never splits a grapheme cluster

    :returns: Offset of the first cluster that would not fit, or the
        length if everything fits
    """
    text, end = check_text(text, length)
    _check_max_cols(max_cols)
    width = 0
    offset = 0
    while offset < end:
        following = _next_grapheme(text, offset, end)
        w = _grapheme_width(text, offset, following)
        if w > 0:
            if width + w > max_cols:
                return offset
            width += w
        offset = following
    return end
