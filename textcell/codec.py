"""
UTF-8 decoding and encoding one codepoint at a time.

Decoding never fails.  Malformed input produces
:data:`REPLACEMENT_CHARACTER` and always consumes at least one byte so
callers make forward progress.  Structural problems (bad lead byte,
truncated sequence, bad continuation byte) consume exactly one byte so
a valid character starting in the middle is not swallowed.  Sequences
that are structurally complete but decode to something not allowed
(overlong forms, surrogates, beyond U+10FFFF) consume the whole
sequence.
"""

from __future__ import annotations

from typing import Iterator

REPLACEMENT_CHARACTER = 0xFFFD
"U+FFFD returned for anything that can't be decoded"

MAX_BYTES = 4
"Most bytes any codepoint encodes to"

Buffer = bytes | bytearray | memoryview


def check_text(text: Buffer, length: int | None) -> tuple[Buffer, int]:
    """Verifies ``text`` is bytes-like and returns it with the effective length

    A byte format memoryview is returned as is, other memoryviews are
    cast to unsigned bytes."""
    if isinstance(text, str):
        raise TypeError("text must be bytes-like - encode str to UTF-8 first")
    if not isinstance(text, (bytes, bytearray, memoryview)):
        raise TypeError(f"text must be bytes, bytearray, or memoryview, not {type(text).__name__}")
    if isinstance(text, memoryview) and text.format != "B":
        text = text.cast("B")
    if length is None:
        return text, len(text)
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an int, not {type(length).__name__}")
    if length < 0 or length > len(text):
        raise ValueError(f"{length=} is out of bounds 0 - {len(text)}")
    return text, length


def check_offset(offset: int) -> None:
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"offset must be an int, not {type(offset).__name__}")
    if offset < 0:
        raise ValueError(f"{offset=} must not be negative")


def sequence_length(lead: int) -> int:
    """How many bytes a sequence starting with ``lead`` byte should have

    :returns: 1 to 4, or 0 if ``lead`` is a continuation byte or can't
        start a sequence"""
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


def _decode(text: Buffer, offset: int, end: int) -> tuple[int, int]:
    # unchecked version used by the navigation and segmentation loops
    if offset >= end:
        return REPLACEMENT_CHARACTER, 1

    first = text[offset]
    if first < 0x80:
        return first, 1

    if first & 0xE0 == 0xC0:
        seq_len = 2
        cp = first & 0x1F
    elif first & 0xF0 == 0xE0:
        seq_len = 3
        cp = first & 0x0F
    elif first & 0xF8 == 0xF0:
        seq_len = 4
        cp = first & 0x07
    else:
        return REPLACEMENT_CHARACTER, 1

    if end - offset < seq_len:
        return REPLACEMENT_CHARACTER, 1

    for i in range(offset + 1, offset + seq_len):
        byte = text[i]
        if byte & 0xC0 != 0x80:
            return REPLACEMENT_CHARACTER, 1
        cp = (cp << 6) | (byte & 0x3F)

    # overlong
    if (seq_len == 2 and cp < 0x80) or (seq_len == 3 and cp < 0x800) or (seq_len == 4 and cp < 0x10000):
        return REPLACEMENT_CHARACTER, seq_len

    if 0xD800 <= cp <= 0xDFFF or cp > 0x10FFFF:
        return REPLACEMENT_CHARACTER, seq_len

    return cp, seq_len


def decode(data: Buffer | None, offset: int = 0, length: int | None = None) -> tuple[int, int]:
    """Decodes the character starting at ``offset``

    :param data: UTF-8 bytes.  ``None`` is treated as empty.
    :param offset: Where the character starts
    :param length: How many bytes of ``data`` may be examined (default all)

    :returns: A tuple of the codepoint and how many bytes it used.
        Invalid or missing input gives :data:`REPLACEMENT_CHARACTER` and
        the byte count is always at least 1.
    """
    if data is None:
        return REPLACEMENT_CHARACTER, 1
    data, end = check_text(data, length)
    check_offset(offset)
    return _decode(data, offset, end)


def iter_decode(data: Buffer, offset: int = 0, length: int | None = None) -> Iterator[tuple[int, int, int]]:
    "Generator providing offset, codepoint, and bytes consumed for each character"
    data, end = check_text(data, length)
    check_offset(offset)
    while offset < end:
        cp, consumed = _decode(data, offset, end)
        yield offset, cp, consumed
        offset += consumed


def _is_encodable(codepoint: int) -> bool:
    return 0 <= codepoint <= 0x10FFFF and not 0xD800 <= codepoint <= 0xDFFF


def encode(codepoint: int) -> bytes:
    """Returns the shortest UTF-8 encoding of ``codepoint``

    Surrogates, negative values, and values beyond U+10FFFF give empty
    bytes."""
    if isinstance(codepoint, bool) or not isinstance(codepoint, int):
        raise TypeError(f"codepoint must be an int, not {type(codepoint).__name__}")
    if not _is_encodable(codepoint):
        return b""
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((0xC0 | (codepoint >> 6), 0x80 | (codepoint & 0x3F)))
    if codepoint < 0x10000:
        return bytes(
            (
                0xE0 | (codepoint >> 12),
                0x80 | ((codepoint >> 6) & 0x3F),
                0x80 | (codepoint & 0x3F),
            )
        )
    return bytes(
        (
            0xF0 | (codepoint >> 18),
            0x80 | ((codepoint >> 12) & 0x3F),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        )
    )


def encode_into(codepoint: int, buffer: bytearray | memoryview, offset: int = 0) -> int:
    """Writes the UTF-8 encoding of ``codepoint`` into ``buffer`` at ``offset``

    Nothing is written for invalid codepoints and no terminator is
    added.  :data:`MAX_BYTES` of space is always enough.

    :returns: Number of bytes written, 0 for an invalid codepoint
    """
    encoded = encode(codepoint)
    if not encoded:
        return 0
    if offset < 0 or offset + len(encoded) > len(buffer):
        raise ValueError(f"buffer of length {len(buffer)} has no room for {len(encoded)} bytes at {offset=}")
    buffer[offset : offset + len(encoded)] = encoded
    return len(encoded)
