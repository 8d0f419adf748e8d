#!/usr/bin/env python3

import unittest

import textcell
from textcell import _unicodedb
from textcell.ranges import GraphemeBreak, check_codepoint, range_contains, range_lookup, value_contains


class Tables(unittest.TestCase):
    "Checks the generated tables are usable with binary search"

    def check_ranges(self, name, table):
        self.assertGreater(len(table), 0, name)
        last_end = -1
        for entry in table:
            start, end = entry[0], entry[1]
            self.assertLessEqual(start, end, f"{name} {entry}")
            self.assertGreater(start, last_end, f"{name} {entry} overlaps or is out of order")
            self.assertLessEqual(end, 0x10FFFF)
            last_end = end

    def testSorted(self):
        "Tables are sorted and don't overlap"
        self.check_ranges("ZERO_WIDTH", _unicodedb.ZERO_WIDTH)
        self.check_ranges("DOUBLE_WIDTH", _unicodedb.DOUBLE_WIDTH)
        self.check_ranges("GRAPHEME_BREAK", _unicodedb.GRAPHEME_BREAK)
        self.check_ranges("INCB_CONSONANT", _unicodedb.INCB_CONSONANT)

        self.assertEqual(list(_unicodedb.INCB_LINKER), sorted(set(_unicodedb.INCB_LINKER)))

        for entry in _unicodedb.GRAPHEME_BREAK:
            self.assertIsInstance(entry[2], GraphemeBreak)
            # Hangul syllables are computed
            self.assertNotIn(entry[2], (GraphemeBreak.LV, GraphemeBreak.LVT))

    def testContents(self):
        "Tables hold the properties their generator extracts"
        # Extended_Pictographic including codepoints East Asian Width calls narrow
        for cp in (
            0x00A9, 0x2605, 0x2660, 0x1F000, 0x1F0A1, 0x1F10D, 0x1F12F, 0x1F16C, 0x1F774, 0x1FAFF, 0x1FFFD,
        ):
            self.assertTrue(range_contains(cp, _unicodedb.DOUBLE_WIDTH), hex(cp))
        for cp in (0x41, 0x2606, 0x1F1E6, 0x1FBF0):
            self.assertFalse(range_contains(cp, _unicodedb.DOUBLE_WIDTH), hex(cp))

        for cp in (0x0300, 0x0600, 0x200B, 0xFEFF, 0xE0001):
            self.assertTrue(range_contains(cp, _unicodedb.ZERO_WIDTH), hex(cp))
        # soft hyphen is left out
        self.assertFalse(range_contains(0x00AD, _unicodedb.ZERO_WIDTH))

    def testVersion(self):
        "Unicode version is exported"
        self.assertEqual(textcell.unicode_version, _unicodedb.unicode_version)
        self.assertRegex(textcell.unicode_version, r"^\d+\.\d+$")


class Lookup(unittest.TestCase):
    ranges = ((0x10, 0x1F, "a"), (0x30, 0x30, "b"), (0x40, 0x4F, "c"))

    def testRangeLookup(self):
        "Tagged range lookups"
        for cp, expected in (
            (0, None),
            (0x10, "a"),
            (0x18, "a"),
            (0x1F, "a"),
            (0x20, None),
            (0x30, "b"),
            (0x31, None),
            (0x4F, "c"),
            (0x50, None),
            (0x10FFFF, None),
        ):
            self.assertEqual(range_lookup(cp, self.ranges), expected, hex(cp))
        self.assertEqual(range_lookup(0x20, self.ranges, "default"), "default")
        self.assertEqual(range_lookup(0x20, ()), None)

    def testRangeContains(self):
        "Untagged range membership"
        ranges = tuple((start, end) for start, end, _ in self.ranges)
        for cp in (0x10, 0x1F, 0x30, 0x40, 0x4F):
            self.assertTrue(range_contains(cp, ranges), hex(cp))
        for cp in (0, 0x0F, 0x20, 0x2F, 0x31, 0x3F, 0x50):
            self.assertFalse(range_contains(cp, ranges), hex(cp))
        self.assertFalse(range_contains(0, ()))

    def testValueContains(self):
        "Single value membership"
        values = (3, 7, 9, 100)
        for v in values:
            self.assertTrue(value_contains(v, values))
        for v in (0, 4, 8, 10, 99, 101):
            self.assertFalse(value_contains(v, values))
        self.assertFalse(value_contains(1, ()))

    def testCheckCodepoint(self):
        "Codepoint argument checking"
        self.assertEqual(check_codepoint(0x41), 0x41)
        self.assertEqual(check_codepoint("A"), 0x41)
        self.assertEqual(check_codepoint("\U0010ffff"), 0x10FFFF)
        self.assertEqual(check_codepoint(0), 0)
        self.assertRaises(TypeError, check_codepoint, "")
        self.assertRaises(TypeError, check_codepoint, "ab")
        self.assertRaises(TypeError, check_codepoint, b"A")
        self.assertRaises(TypeError, check_codepoint, 65.0)
        self.assertRaises(TypeError, check_codepoint, True)
        self.assertRaises(ValueError, check_codepoint, -1)
        self.assertRaises(ValueError, check_codepoint, 0x110000)


if __name__ == "__main__":
    unittest.main()
