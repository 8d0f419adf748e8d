#!/usr/bin/env python3

import unittest

import textcell

# a, e acute, CJK, emoji - one of each encoded length
MIXED = b"a\xc3\xa9\xe4\xb8\xad\xf0\x9f\x98\x80"
BOUNDARIES = [0, 1, 3, 6, 10]


class Navigate(unittest.TestCase):
    def testNextChar(self):
        "Moving forward a character at a time"
        offset = 0
        seen = [offset]
        while offset < len(MIXED):
            offset = textcell.next_char(MIXED, offset)
            seen.append(offset)
        self.assertEqual(seen, BOUNDARIES)

        self.assertEqual(textcell.next_char(MIXED, len(MIXED)), len(MIXED))
        self.assertEqual(textcell.next_char(MIXED, 100), len(MIXED))
        self.assertEqual(textcell.next_char(b""), 0)
        # stray continuation bytes each advance one
        self.assertEqual(textcell.next_char(b"\x80\x80a"), 1)
        # the result never goes beyond length
        self.assertEqual(textcell.next_char(MIXED, 3, 5), 4)
        self.assertEqual(textcell.next_char(MIXED, 5, 5), 5)

    def testPrevChar(self):
        "Moving backward a character at a time"
        offset = len(MIXED)
        seen = [offset]
        while offset > 0:
            offset = textcell.prev_char(MIXED, offset)
            seen.append(offset)
        self.assertEqual(seen, list(reversed(BOUNDARIES)))

        self.assertEqual(textcell.prev_char(MIXED, 0), 0)
        self.assertEqual(textcell.prev_char(MIXED, -5), 0)
        self.assertEqual(textcell.prev_char(b"", 0), 0)

    def testPrevCharBounded(self):
        "Runs of continuation bytes don't cause scanning back too far"
        text = b"a" + b"\x80" * 20
        for offset in range(1, len(text) + 1):
            prev = textcell.prev_char(text, offset)
            self.assertLess(prev, offset)
            self.assertGreaterEqual(prev, offset - 4)
        self.assertEqual(textcell.prev_char(b"a\x80\x80\x80\x80b", 5), 1)

    def testInverse(self):
        "prev_char undoes next_char on boundaries"
        for offset in BOUNDARIES[:-1]:
            self.assertEqual(textcell.prev_char(MIXED, textcell.next_char(MIXED, offset)), offset)

    def testIterWithOffsets(self):
        "Character spans"
        self.assertEqual(
            list(textcell.char_iter_with_offsets(MIXED)),
            list(zip(BOUNDARIES, BOUNDARIES[1:])),
        )
        self.assertEqual(list(textcell.char_iter_with_offsets(MIXED, 3, 6)), [(3, 6)])
        self.assertEqual(list(textcell.char_iter_with_offsets(b"")), [])

    def testArgs(self):
        "Argument checking"
        self.assertRaises(TypeError, textcell.next_char, "abc")
        self.assertRaises(TypeError, textcell.next_char, b"abc", None)
        self.assertRaises(ValueError, textcell.next_char, b"abc", -1)
        self.assertRaises(ValueError, textcell.next_char, b"abc", 0, 4)
        self.assertRaises(TypeError, textcell.prev_char, "abc", 1)
        self.assertRaises(TypeError, textcell.prev_char, b"abc")
        self.assertRaises(TypeError, textcell.prev_char, b"abc", 1.0)
        self.assertRaises(ValueError, textcell.prev_char, b"abc", 4)


if __name__ == "__main__":
    unittest.main()
