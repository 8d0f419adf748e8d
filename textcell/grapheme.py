"""
Extended grapheme cluster boundaries in UTF-8 bytes.

Implements the `Unicode Technical Report #29
<https://www.unicode.org/reports/tr29/#Grapheme_Cluster_Boundary_Rules>`__
rules GB3 through GB13 and GB999, including GB9c for Indic conjuncts
and GB11 for emoji ZWJ sequences.  A grapheme cluster is what people
perceive as one character - a base with its combining marks, a pair of
regional indicators making a flag, a Hangul syllable made of jamo, an
emoji with modifiers and joiners.  Cursor movement, deletion, and
selection should work in these units.

The rules only run forwards.  Going backwards is done by stepping back
a bounded number of codepoints and scanning forward from there.
"""

from __future__ import annotations

from typing import Iterator

import enum
import logging

from .codec import Buffer, _decode, check_offset, check_text
from .navigate import _prev_char
from .ranges import GraphemeBreak as GB, check_codepoint, range_contains, range_lookup, value_contains
from ._unicodedb import DOUBLE_WIDTH, GRAPHEME_BREAK, INCB_CONSONANT, INCB_LINKER

log = logging.getLogger(__name__)

GRAPHEME_MAX_BACKTRACK: int = 128
"""How many codepoints :func:`prev_grapheme` steps back before scanning forward.

Clusters longer than this (such as a base followed by hundreds of
combining marks) can give a boundary inside the cluster.  Runs of
regional indicators longer than this can pair up differently than
they would from the start of the text, giving a boundary in the middle
of a flag.  Zero means always scan from the start of the text."""

HANGUL_SBASE = 0xAC00
HANGUL_SEND = 0xD7A3
HANGUL_TCOUNT = 28


class InCBState(enum.IntEnum):
    "Progress through an Indic conjunct sequence (rule GB9c)"

    NONE = 0
    CONSONANT = 1
    "Seen a consonant, possibly followed by extenders"
    LINKER = 2
    "Seen a consonant then a linker (virama)"


def _grapheme_break(cp: int) -> GB:
    if HANGUL_SBASE <= cp <= HANGUL_SEND:
        return GB.LV if (cp - HANGUL_SBASE) % HANGUL_TCOUNT == 0 else GB.LVT
    return range_lookup(cp, GRAPHEME_BREAK, GB.Other)


def _is_extended_pictographic(cp: int) -> bool:
    # the wide table includes all of Extended_Pictographic
    return range_contains(cp, DOUBLE_WIDTH)


def _is_incb_consonant(cp: int) -> bool:
    return range_contains(cp, INCB_CONSONANT)


def _is_incb_linker(cp: int) -> bool:
    return value_contains(cp, INCB_LINKER)


def grapheme_break(codepoint: int | str) -> GB:
    "Returns the :class:`~textcell.ranges.GraphemeBreak` property of the codepoint"
    return _grapheme_break(check_codepoint(codepoint))


def is_extended_pictographic(codepoint: int | str) -> bool:
    "Returns True if the codepoint takes part in emoji ZWJ sequences"
    return _is_extended_pictographic(check_codepoint(codepoint))


def is_regional_indicator(codepoint: int | str) -> bool:
    "Returns True if the codepoint is one of the 26 regional indicators used in pairs for flags"
    return _grapheme_break(check_codepoint(codepoint)) == GB.Regional_Indicator


def is_incb_consonant(codepoint: int | str) -> bool:
    "Returns True if the codepoint has Indic_Conjunct_Break=Consonant"
    return _is_incb_consonant(check_codepoint(codepoint))


def is_incb_linker(codepoint: int | str) -> bool:
    "Returns True if the codepoint has Indic_Conjunct_Break=Linker"
    return _is_incb_linker(check_codepoint(codepoint))


def category_name(codepoint: int | str) -> tuple[str, ...]:
    "Returns the names of the segmentation properties the codepoint has"
    cp = check_codepoint(codepoint)
    names = [_grapheme_break(cp).name]
    if _is_extended_pictographic(cp):
        names.append("Extended_Pictographic")
    if _is_incb_consonant(cp):
        names.append("InCB_Consonant")
    if _is_incb_linker(cp):
        names.append("InCB_Linker")
    return tuple(sorted(names))


class _ClusterState:
    "What has been seen so far in the cluster being scanned"

    __slots__ = ("prop", "ri_count", "in_ext_pict", "incb")

    def __init__(self, cp: int):
        self.prop = _grapheme_break(cp)
        self.ri_count = 1 if self.prop == GB.Regional_Indicator else 0
        self.in_ext_pict = _is_extended_pictographic(cp)
        self.incb = InCBState.CONSONANT if _is_incb_consonant(cp) else InCBState.NONE

    def is_break(self, cp: int, prop: GB) -> bool:
        "Is there a boundary between what has been seen and ``cp``"
        prev = self.prop

        # GB3
        if prev == GB.CR and prop == GB.LF:
            return False

        # GB4
        if prev in (GB.Control, GB.CR, GB.LF):
            return True

        # GB5
        if prop in (GB.Control, GB.CR, GB.LF):
            return True

        # GB6
        if prev == GB.L and prop in (GB.L, GB.V, GB.LV, GB.LVT):
            return False

        # GB7
        if prev in (GB.LV, GB.V) and prop in (GB.V, GB.T):
            return False

        # GB8
        if prev in (GB.LVT, GB.T) and prop == GB.T:
            return False

        # GB9
        if prop in (GB.Extend, GB.ZWJ):
            return False

        # GB9a
        if prop == GB.SpacingMark:
            return False

        # GB9b
        if prev == GB.Prepend:
            return False

        # GB9c
        if self.incb == InCBState.LINKER and _is_incb_consonant(cp):
            return False

        # GB11
        if self.in_ext_pict and prev == GB.ZWJ and _is_extended_pictographic(cp):
            return False

        # GB12 / GB13 - only pairs
        if prev == GB.Regional_Indicator and prop == GB.Regional_Indicator:
            return self.ri_count % 2 == 0

        # GB999
        return True

    def advance(self, cp: int, prop: GB) -> None:
        "Accepts ``cp`` into the cluster"
        extending = prop in (GB.Extend, GB.ZWJ)

        if prop == GB.Regional_Indicator:
            self.ri_count += 1
        elif not extending:
            self.ri_count = 0

        if _is_extended_pictographic(cp):
            self.in_ext_pict = True
        elif not extending:
            self.in_ext_pict = False

        if _is_incb_consonant(cp):
            self.incb = InCBState.CONSONANT
        elif _is_incb_linker(cp) and self.incb >= InCBState.CONSONANT:
            self.incb = InCBState.LINKER
        elif not extending:
            self.incb = InCBState.NONE

        self.prop = prop


def _next_grapheme(text: Buffer, offset: int, end: int) -> int:
    if offset >= end:
        return end

    cp, consumed = _decode(text, offset, end)
    offset += consumed
    if offset >= end:
        return end

    state = _ClusterState(cp)

    while offset < end:
        cp, consumed = _decode(text, offset, end)
        prop = _grapheme_break(cp)
        if state.is_break(cp, prop):
            return offset
        state.advance(cp, prop)
        offset += consumed

    return end


def next_grapheme(text: Buffer, offset: int = 0, length: int | None = None) -> int:
    """Returns end of the grapheme cluster starting at ``offset``

    :param text: UTF-8 bytes to examine
    :param offset: Where the cluster starts
    :param length: How many bytes of ``text`` to consider (default all)

    :returns: Offset of the first byte not part of the cluster.  You
        should extract ``text[offset:result]``.  ``length`` is returned
        when ``offset`` is at or beyond the end.
    """
    text, end = check_text(text, length)
    check_offset(offset)
    return _next_grapheme(text, offset, end)


def _prev_grapheme(text: Buffer, offset: int, max_backtrack: int) -> int:
    if offset <= 0:
        return 0

    prev_start = _prev_char(text, offset)
    if prev_start == 0:
        return 0

    scan_start = prev_start
    if max_backtrack == 0:
        scan_start = 0
    else:
        remaining = max_backtrack
        while remaining > 0 and scan_start > 0:
            scan_start = _prev_char(text, scan_start)
            remaining -= 1
        if scan_start > 0:
            log.debug(
                "grapheme backtrack of %d codepoints exhausted at offset %d scanning back from %d",
                max_backtrack,
                scan_start,
                offset,
            )

    boundary = scan_start
    pos = scan_start
    while pos < offset:
        following = _next_grapheme(text, pos, offset)
        if following >= offset:
            break
        boundary = pos = following

    return boundary


def prev_grapheme(text: Buffer, offset: int, *, max_backtrack: int | None = None) -> int:
    """Returns start of the grapheme cluster ending at ``offset``

    :param text: UTF-8 bytes to examine
    :param offset: End of the cluster
    :param max_backtrack: How many codepoints to step back before
        scanning forward.  ``None`` uses :data:`GRAPHEME_MAX_BACKTRACK`
        and zero scans from the start of ``text``.

    :returns: 0 if ``offset`` is at or before the start
    """
    text, end = check_text(text, None)
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"offset must be an int, not {type(offset).__name__}")
    if offset > end:
        raise ValueError(f"{offset=} is beyond the end of text {end}")
    if max_backtrack is None:
        max_backtrack = GRAPHEME_MAX_BACKTRACK
    if max_backtrack < 0:
        raise ValueError(f"{max_backtrack=} must not be negative")
    return _prev_grapheme(text, offset, max_backtrack)


def grapheme_next(text: Buffer, offset: int = 0, length: int | None = None) -> tuple[int, int]:
    "Returns span of next grapheme cluster"
    end = next_grapheme(text, offset, length)
    return offset, end


def grapheme_iter_with_offsets(
    text: Buffer, offset: int = 0, length: int | None = None
) -> Iterator[tuple[int, int, bytes]]:
    "Iterator providing start, end, and bytes of each grapheme cluster"
    text, end = check_text(text, length)
    check_offset(offset)
    while offset < end:
        following = _next_grapheme(text, offset, end)
        yield offset, following, bytes(text[offset:following])
        offset = following


def grapheme_iter(text: Buffer, offset: int = 0, length: int | None = None) -> Iterator[bytes]:
    "Iterator providing bytes of each grapheme cluster"
    for _, _, cluster in grapheme_iter_with_offsets(text, offset, length):
        yield cluster


def grapheme_length(text: Buffer, offset: int = 0, length: int | None = None) -> int:
    "Returns number of grapheme clusters in the text.  Unicode aware version of len"
    text, end = check_text(text, length)
    check_offset(offset)
    count = 0
    while offset < end:
        offset = _next_grapheme(text, offset, end)
        count += 1
    return count
