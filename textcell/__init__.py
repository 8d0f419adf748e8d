"""
:mod:`textcell` - UTF-8 bytes as terminal cells

This package works directly on UTF-8 encoded :class:`bytes`,
:class:`bytearray`, and :class:`memoryview` rather than :class:`str`,
addressing what text editors, terminal programs, and similar need:

* Decoding one codepoint at a time without ever failing.  Malformed
  input gives U+FFFD and always makes forward progress, so a cursor
  can move over anything.

* Knowing how many terminal columns a codepoint occupies - zero for
  combining marks, two for CJK and emoji, and so on.

* Moving the cursor a character at a time in either direction, working
  with byte offsets.

* Finding grapheme cluster boundaries (what people perceive as one
  character) using `Unicode Technical Report #29
  <https://www.unicode.org/reports/tr29/>`__ rules, including Indic
  conjuncts and emoji ZWJ sequences.

* Validating, counting, measuring, and truncating strings to fit a
  number of columns.

See :data:`unicode_version` for the implemented version.

Codec

    * :func:`decode` and :func:`encode` / :func:`encode_into`

Width

    * :func:`codepoint_width`, :func:`char_width`,
      :func:`is_zero_width`, :func:`is_wide`

Navigation

    * :func:`next_char` and :func:`prev_char`
    * :func:`next_grapheme` and :func:`prev_grapheme`
    * :func:`grapheme_iter` and :func:`grapheme_iter_with_offsets`

Strings

    * :func:`validate` and :func:`codepoint_count`
    * :func:`string_width` and :func:`grapheme_width`
    * :func:`truncate` and :func:`truncate_graphemes`

Use ``python3 -m textcell --help`` to see the command line tools.
"""

from __future__ import annotations

from .codec import (
    MAX_BYTES,
    REPLACEMENT_CHARACTER,
    decode,
    encode,
    encode_into,
    iter_decode,
    sequence_length,
)
from .grapheme import (
    GRAPHEME_MAX_BACKTRACK,
    InCBState,
    category_name,
    grapheme_break,
    grapheme_iter,
    grapheme_iter_with_offsets,
    grapheme_length,
    grapheme_next,
    is_extended_pictographic,
    is_incb_consonant,
    is_incb_linker,
    is_regional_indicator,
    next_grapheme,
    prev_grapheme,
)
from .navigate import char_iter_with_offsets, next_char, prev_char
from .ranges import GraphemeBreak
from .text import (
    codepoint_count,
    grapheme_width,
    string_width,
    truncate,
    truncate_graphemes,
    validate,
)
from .width import char_width, codepoint_width, is_wide, is_zero_width
from ._unicodedb import unicode_version

__version__ = "1.0.0"
