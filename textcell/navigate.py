"""
Moving between character boundaries in UTF-8 bytes.
"""

from __future__ import annotations

from typing import Iterator

from .codec import Buffer, _decode, check_offset, check_text


def _next_char(text: Buffer, offset: int, end: int) -> int:
    if offset >= end:
        return end
    _, consumed = _decode(text, offset, end)
    return min(offset + consumed, end)


def _prev_char(text: Buffer, offset: int) -> int:
    if offset <= 0:
        return 0
    pos = offset - 1
    # a character is at most 4 bytes, so a run of stray continuation
    # bytes never causes more than 3 steps back
    limit = max(offset - 4, 0)
    while pos > limit and text[pos] & 0xC0 == 0x80:
        pos -= 1
    return pos


def next_char(text: Buffer, offset: int = 0, length: int | None = None) -> int:
    """Returns offset of the character following the one at ``offset``

    :returns: ``length`` if ``offset`` is at or beyond the end
    """
    text, end = check_text(text, length)
    check_offset(offset)
    return _next_char(text, offset, end)


def prev_char(text: Buffer, offset: int) -> int:
    """Returns offset of the start of the character before ``offset``

    :returns: 0 if ``offset`` is at or before the start
    """
    text, end = check_text(text, None)
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"offset must be an int, not {type(offset).__name__}")
    if offset > end:
        raise ValueError(f"{offset=} is beyond the end of text {end}")
    return _prev_char(text, offset)


def char_iter_with_offsets(text: Buffer, offset: int = 0, length: int | None = None) -> Iterator[tuple[int, int]]:
    "Generator providing start and end offsets of each character"
    text, end = check_text(text, length)
    check_offset(offset)
    while offset < end:
        following = _next_char(text, offset, end)
        yield offset, following
        offset = following
