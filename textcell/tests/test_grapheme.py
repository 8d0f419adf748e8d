#!/usr/bin/env python3

import itertools
import unittest

import textcell
import textcell.grapheme
from textcell import GraphemeBreak as GB

# Strings from the Unicode GraphemeBreakTest.txt with the division
# sign marking each break.  The end of the string is always a break.
MARKER = "\u00f7"

break_tests = (
    " \u200c",
    f"a{MARKER}\U0001f1e6\U0001f1e7{MARKER}\U0001f1e8\U0001f1e9{MARKER}b",
    "\u1100\uac01",
    "\u0d4e ",
    "\u094d\u200d",
    f"\u000d{MARKER}\u0904",
    f"\u0001{MARKER}\u0378",
    "\u0600\u0308\u094d",
    f"\u1160{MARKER}\uac01",
    f"\uac01{MARKER} ",
    f"\u0904{MARKER}\u1160",
    "\u231a\u0308\u0a03",
    f"\u0900{MARKER}\u0d4e",
    f"\u0378{MARKER} ",
    f"\u000a{MARKER}\u0308\u0900",
    f"\u0600\u0308{MARKER}\u0d4e",
    f"\u11a8\u0308{MARKER}\u000a",
    f"\u0903\u0308{MARKER}\u11a8",
    f"\u0915\u0308{MARKER}\u231a",
    f"\u094d\u0308{MARKER}\U0001f1e6",
    f"a\u200d{MARKER}\u2701",
    f"\u0001{MARKER}\u0308{MARKER}\u0378",
    "\r\n",
    f"\r{MARKER}\r\n{MARKER}\n",
    "\U0001f468\u200d\U0001f469\u200d\U0001f467",
    "\U0001f44d\U0001f3fd",
    "\u0915\u094d\u0937",
    "\u0915\u094d\u200d\u0937",
    f"\u0915{MARKER}\u0937",
    f"\u0915\u093c\u094d\u0924{MARKER}a",
    "\u1100\u1161",
    f"\uac01{MARKER}\u1161",
    "\uac00\u11a8",
    "\U0001f000\u200d\U0001f000",
    f"\U0001f0a1\u0308\u200d\U0001f12f{MARKER}\U0001f16c",
)


def parse_break_test(text: str) -> tuple[bytes, list[int]]:
    "Returns the UTF-8 bytes and the byte offsets of each break"
    encoded = b""
    breaks = []
    for c in text:
        if c == MARKER:
            breaks.append(len(encoded))
        else:
            encoded += c.encode("utf8")
    breaks.append(len(encoded))
    return encoded, breaks


class Grapheme(unittest.TestCase):
    def testBreaks(self):
        "Verifies break locations"
        for test in break_tests:
            text, breaks = parse_break_test(test)

            offset = 0
            seen = []
            while offset < len(text):
                offset = textcell.next_grapheme(text, offset)
                seen.append(offset)
            self.assertEqual(seen, breaks, test)

            offset = len(text)
            seen = []
            while offset > 0:
                offset = textcell.prev_grapheme(text, offset)
                seen.append(offset)
            self.assertEqual(seen, list(reversed(breaks[:-1])) + [0], test)

            spans = list(itertools.pairwise([0] + breaks))
            self.assertEqual(
                list(textcell.grapheme_iter_with_offsets(text)),
                [(start, end, text[start:end]) for start, end in spans],
            )
            self.assertEqual(list(textcell.grapheme_iter(text)), [text[start:end] for start, end in spans])
            self.assertEqual(textcell.grapheme_length(text), len(breaks))

    def testScenarios(self):
        "Common clusters"
        e_acute = "e\u0301".encode("utf8")
        self.assertEqual(textcell.next_grapheme(e_acute), 3)
        self.assertEqual(textcell.next_grapheme(b"\r\n"), 2)
        self.assertEqual(textcell.next_grapheme(b"\n\r"), 1)

        flags = "\U0001f1e6" * 3
        text = flags.encode("utf8")
        self.assertEqual(textcell.next_grapheme(text), 8)
        self.assertEqual(textcell.next_grapheme(text, 8), 12)
        self.assertEqual(textcell.prev_grapheme(text, 12), 8)
        self.assertEqual(textcell.prev_grapheme(text, 8), 0)

        family = "\U0001f468\u200d\U0001f469".encode("utf8")
        self.assertEqual(textcell.next_grapheme(family), len(family))
        # joiner after something that isn't pictographic
        self.assertEqual(textcell.next_grapheme("a\u200d\U0001f469".encode("utf8")), 4)

        # Indic conjunct
        self.assertEqual(textcell.next_grapheme("\u0915\u094d\u0937".encode("utf8")), 9)
        self.assertEqual(textcell.next_grapheme("\u0915\u0937".encode("utf8")), 3)
        self.assertEqual(textcell.next_grapheme("\u0915\u0903".encode("utf8")), 6)

        # prepend
        self.assertEqual(textcell.next_grapheme("\u0600a".encode("utf8")), 3)

        # Hangul
        self.assertEqual(textcell.next_grapheme("\u1100\u1161".encode("utf8")), 6)
        self.assertEqual(textcell.next_grapheme("\uac00\u11a8".encode("utf8")), 6)
        self.assertEqual(textcell.next_grapheme("\uac01\u1161".encode("utf8")), 3)

    def testEdges(self):
        "Offsets at the ends and limited lengths"
        text = b"abc"
        self.assertEqual(textcell.next_grapheme(text, 3), 3)
        self.assertEqual(textcell.next_grapheme(text, 10), 3)
        self.assertEqual(textcell.next_grapheme(b""), 0)
        self.assertEqual(textcell.next_grapheme(text, 0, 0), 0)
        self.assertEqual(textcell.next_grapheme(b"\r\n", 0, 1), 1)
        self.assertEqual(textcell.prev_grapheme(text, 0), 0)
        self.assertEqual(textcell.prev_grapheme(text, 1), 0)
        self.assertEqual(textcell.prev_grapheme(text, -1), 0)
        self.assertEqual(textcell.prev_grapheme(b"", 0), 0)
        self.assertEqual(textcell.grapheme_next(text, 1), (1, 2))
        self.assertEqual(textcell.grapheme_next(text, 3), (3, 3))
        self.assertEqual(tuple(textcell.grapheme_iter(text, 3)), tuple())
        self.assertEqual(tuple(textcell.grapheme_iter_with_offsets(text, 3)), tuple())
        self.assertEqual(textcell.grapheme_length(b""), 0)
        self.assertEqual(textcell.grapheme_length(text, 1), 2)

        # malformed bytes are each their own cluster
        self.assertEqual(list(textcell.grapheme_iter(b"\xff\xfe")), [b"\xff", b"\xfe"])
        # but a combining mark still attaches to a replacement character
        self.assertEqual(textcell.grapheme_length(b"\xff\xcc\x81"), 1)

    def testArgs(self):
        "Argument checking"
        for meth in (textcell.next_grapheme, textcell.grapheme_length, textcell.grapheme_next):
            self.assertRaises(TypeError, meth)
            self.assertRaises(TypeError, meth, 3)
            self.assertRaises(TypeError, meth, "some text")
            self.assertRaises(TypeError, meth, b"some text", "hello")
            self.assertRaises(ValueError, meth, b"some text", -1)
            self.assertRaises(ValueError, meth, b"some text", 0, 1000)
        self.assertRaises(TypeError, textcell.prev_grapheme, b"abc")
        self.assertRaises(TypeError, textcell.prev_grapheme, "abc", 1)
        self.assertRaises(TypeError, textcell.prev_grapheme, b"abc", None)
        self.assertRaises(ValueError, textcell.prev_grapheme, b"abc", 4)
        self.assertRaises(ValueError, textcell.prev_grapheme, b"abc", 3, max_backtrack=-1)
        self.assertRaises(TypeError, textcell.prev_grapheme, b"abc", 3, 10)

    def testBacktrack(self):
        "Clusters longer than the backtrack window"
        marks = 200
        text = ("a" + "\u0301" * marks).encode("utf8")
        self.assertGreater(marks, textcell.GRAPHEME_MAX_BACKTRACK)
        self.assertEqual(textcell.next_grapheme(text), len(text))

        with self.assertLogs("textcell.grapheme", level="DEBUG") as logs:
            start = textcell.prev_grapheme(text, len(text))
        self.assertIn("backtrack", logs.output[0])
        # lands inside the cluster
        self.assertGreater(start, 0)
        self.assertEqual(start, len(text) - 2 * (textcell.GRAPHEME_MAX_BACKTRACK + 1))

        # unbounded and large enough windows find the real start
        self.assertEqual(textcell.prev_grapheme(text, len(text), max_backtrack=0), 0)
        self.assertEqual(textcell.prev_grapheme(text, len(text), max_backtrack=marks), 0)
        # smaller windows give a later start
        self.assertEqual(textcell.prev_grapheme(text, len(text), max_backtrack=1), len(text) - 4)

        # regional indicator pairing counts from wherever the window starts
        flags = 130
        text = ("\U0001f1e6" * flags).encode("utf8")
        self.assertEqual(textcell.next_grapheme(text, len(text) - 8), len(text))
        with self.assertLogs("textcell.grapheme", level="DEBUG"):
            self.assertEqual(textcell.prev_grapheme(text, len(text)), len(text) - 4)
        self.assertEqual(textcell.prev_grapheme(text, len(text), max_backtrack=0), len(text) - 8)
        self.assertEqual(textcell.prev_grapheme(text, len(text), max_backtrack=flags), len(text) - 8)

    def testProperties(self):
        "Codepoint property lookups"
        for cp, expected in (
            (0x41, GB.Other),
            (0x0D, GB.CR),
            (0x0A, GB.LF),
            (0x00, GB.Control),
            (0xAD, GB.Control),
            (0x0301, GB.Extend),
            (0x094D, GB.Extend),
            (0x1F3FB, GB.Extend),
            (0x200D, GB.ZWJ),
            (0x1F1E6, GB.Regional_Indicator),
            (0x0600, GB.Prepend),
            (0x0903, GB.SpacingMark),
            (0x1100, GB.L),
            (0x1161, GB.V),
            (0x11A8, GB.T),
            (0xAC00, GB.LV),
            (0xAC1C, GB.LV),
            (0xAC01, GB.LVT),
            (0xD7A3, GB.LVT),
            (0xE0001, GB.Control),
            (0xE0020, GB.Extend),
            (0xE0100, GB.Extend),
            (0x1F468, GB.Other),
        ):
            self.assertEqual(textcell.grapheme_break(cp), expected, hex(cp))

        self.assertTrue(textcell.is_extended_pictographic(0x1F468))
        self.assertTrue(textcell.is_extended_pictographic(0x231A))
        self.assertFalse(textcell.is_extended_pictographic(0x41))
        self.assertTrue(textcell.is_regional_indicator(0x1F1E6))
        self.assertTrue(textcell.is_regional_indicator(0x1F1FF))
        self.assertFalse(textcell.is_regional_indicator(0x1F468))
        self.assertTrue(textcell.is_incb_consonant(0x0915))
        self.assertFalse(textcell.is_incb_consonant(0x094D))
        self.assertTrue(textcell.is_incb_linker(0x094D))
        self.assertFalse(textcell.is_incb_linker(0x0915))

        self.assertEqual(textcell.category_name(0x0915), ("InCB_Consonant", "Other"))
        self.assertEqual(textcell.category_name("\u094d"), ("Extend", "InCB_Linker"))
        self.assertEqual(textcell.category_name(0x1F468), ("Extended_Pictographic", "Other"))

        for meth in (
            textcell.grapheme_break,
            textcell.is_extended_pictographic,
            textcell.is_regional_indicator,
            textcell.is_incb_consonant,
            textcell.is_incb_linker,
            textcell.category_name,
        ):
            self.assertRaises(TypeError, meth)
            self.assertRaises(TypeError, meth, "ab")
            self.assertRaises(ValueError, meth, -1)
            self.assertRaises(ValueError, meth, 0x110000)

    def testInCBState(self):
        "Conjunct tracking follows consonant, linker, consonant"
        state = textcell.grapheme._ClusterState(0x0915)
        self.assertEqual(state.incb, textcell.InCBState.CONSONANT)
        state.advance(0x094D, GB.Extend)
        self.assertEqual(state.incb, textcell.InCBState.LINKER)
        state.advance(0x200D, GB.ZWJ)
        self.assertEqual(state.incb, textcell.InCBState.LINKER)
        self.assertFalse(state.is_break(0x0937, GB.Other))
        state.advance(0x0937, GB.Other)
        self.assertEqual(state.incb, textcell.InCBState.CONSONANT)

        state = textcell.grapheme._ClusterState(0x41)
        self.assertEqual(state.incb, textcell.InCBState.NONE)
        # a linker without a preceding consonant does nothing
        state.advance(0x094D, GB.Extend)
        self.assertEqual(state.incb, textcell.InCBState.NONE)


if __name__ == "__main__":
    unittest.main()
