#!/usr/bin/env python3

import itertools
import unittest

import textcell
from textcell.codec import MAX_BYTES, REPLACEMENT_CHARACTER as RC


class Codec(unittest.TestCase):
    def testDecode(self):
        "Decoding well formed sequences"
        for data, expected in (
            (b"A", (0x41, 1)),
            (b"\x00", (0, 1)),
            (b"\x7f", (0x7F, 1)),
            (b"\xc3\xa9", (0xE9, 2)),
            (b"\xdf\xbf", (0x7FF, 2)),
            (b"\xe0\xa0\x80", (0x800, 3)),
            (b"\xe4\xb8\xad", (0x4E2D, 3)),
            (b"\xef\xbf\xbd", (0xFFFD, 3)),
            (b"\xf0\x90\x80\x80", (0x10000, 4)),
            (b"\xf0\x9f\x98\x80", (0x1F600, 4)),
            (b"\xf4\x8f\xbf\xbf", (0x10FFFF, 4)),
        ):
            self.assertEqual(textcell.decode(data), expected)
            self.assertEqual(textcell.decode(bytearray(data)), expected)
            self.assertEqual(textcell.decode(memoryview(data)), expected)

        # only the first character
        self.assertEqual(textcell.decode(b"ab"), (0x61, 1))
        self.assertEqual(textcell.decode(b"a\xe4\xb8\xad", 1), (0x4E2D, 3))
        # non byte format memoryview
        self.assertEqual(textcell.decode(memoryview(b"\xc3\xa9").cast("c")), (0xE9, 2))

    def testDecodeStructural(self):
        "Structural errors consume exactly one byte"
        for data in (
            b"\x80",
            b"\xbf",
            b"\xff",
            b"\xf8\x88\x80\x80\x80",
            b"\xe4\xb8",
            b"\xc3",
            b"\xf0\x9f\x98",
            b"\xe4\x41\x42",
            b"\xc3\xc3\xa9",
            b"\xf0\x9f\x41\x80",
        ):
            self.assertEqual(textcell.decode(data), (RC, 1), data)

        # the valid character after a bad lead is not swallowed
        self.assertEqual(textcell.decode(b"\xc3\xc3\xa9", 1), (0xE9, 2))

    def testDecodeSemantic(self):
        "Complete sequences decoding to disallowed values consume the whole sequence"
        for data, consumed in (
            (b"\xc0\x80", 2),
            (b"\xc1\xbf", 2),
            (b"\xe0\x80\x80", 3),
            (b"\xe0\x9f\xbf", 3),
            (b"\xf0\x80\x80\x80", 4),
            (b"\xf0\x8f\xbf\xbf", 4),
            (b"\xed\xa0\x80", 3),
            (b"\xed\xbf\xbf", 3),
            (b"\xf4\x90\x80\x80", 4),
            (b"\xf7\xbf\xbf\xbf", 4),
        ):
            self.assertEqual(textcell.decode(data), (RC, consumed), data)

    def testDecodeEmpty(self):
        "Missing input still consumes one byte"
        self.assertEqual(textcell.decode(b""), (RC, 1))
        self.assertEqual(textcell.decode(None), (RC, 1))
        self.assertEqual(textcell.decode(b"a", 1), (RC, 1))
        self.assertEqual(textcell.decode(b"abc", 0, 0), (RC, 1))
        # length limits what can be seen
        self.assertEqual(textcell.decode(b"\xe4\xb8\xad", 0, 2), (RC, 1))

    def testDecodeArgs(self):
        "Argument checking"
        self.assertRaises(TypeError, textcell.decode)
        self.assertRaises(TypeError, textcell.decode, "A")
        self.assertRaises(TypeError, textcell.decode, 3)
        self.assertRaises(TypeError, textcell.decode, b"A", "0")
        self.assertRaises(TypeError, textcell.decode, b"A", 0, 1.0)
        self.assertRaises(ValueError, textcell.decode, b"A", -1)
        self.assertRaises(ValueError, textcell.decode, b"A", 0, -1)
        self.assertRaises(ValueError, textcell.decode, b"A", 0, 2)

    def testDecodeProgress(self):
        "Every byte sequence decodes with forward progress"
        for first in range(256):
            for second in (0x00, 0x41, 0x80, 0xBF, 0xC0, 0xFF):
                data = bytes((first, second, 0x80, 0x80))
                cp, consumed = textcell.decode(data)
                self.assertGreaterEqual(consumed, 1)
                self.assertLessEqual(consumed, MAX_BYTES)
                self.assertTrue(0 <= cp <= 0x10FFFF)

    def testIterDecode(self):
        "Walking a whole buffer"
        self.assertEqual(
            list(textcell.iter_decode(b"a\xffb\xe4\xb8\xad")),
            [(0, 0x61, 1), (1, RC, 1), (2, 0x62, 1), (3, 0x4E2D, 3)],
        )
        self.assertEqual(list(textcell.iter_decode(b"abc", 1, 2)), [(1, 0x62, 1)])
        self.assertEqual(list(textcell.iter_decode(b"")), [])

    def testSequenceLength(self):
        "Sequence length from lead byte"
        for lead, expected in (
            (0x00, 1),
            (0x41, 1),
            (0x7F, 1),
            (0x80, 0),
            (0xBF, 0),
            (0xC0, 2),
            (0xC3, 2),
            (0xE4, 3),
            (0xF0, 4),
            (0xF4, 4),
            (0xF8, 0),
            (0xFF, 0),
        ):
            self.assertEqual(textcell.sequence_length(lead), expected, hex(lead))

    def testEncode(self):
        "Encoding codepoints"
        for cp, expected in (
            (0x41, b"A"),
            (0, b"\x00"),
            (0xE9, b"\xc3\xa9"),
            (0x4E2D, b"\xe4\xb8\xad"),
            (0x1F600, b"\xf0\x9f\x98\x80"),
            (0x10FFFF, b"\xf4\x8f\xbf\xbf"),
        ):
            self.assertEqual(textcell.encode(cp), expected)

        for cp in (-1, 0xD800, 0xDBFF, 0xDC00, 0xDFFF, 0x110000, 0x7FFFFFFF):
            self.assertEqual(textcell.encode(cp), b"")

        self.assertRaises(TypeError, textcell.encode, "A")
        self.assertRaises(TypeError, textcell.encode, 65.0)

    def testRoundTrip(self):
        "Encoding then decoding gives back every valid codepoint"
        wrong = []
        for cp in itertools.chain(range(0xD800), range(0xE000, 0x110000)):
            encoded = textcell.encode(cp)
            # matches the standard library
            if encoded != chr(cp).encode("utf8") or textcell.decode(encoded) != (cp, len(encoded)):
                wrong.append(hex(cp))
        self.assertEqual(wrong, [])

    def testEncodeInto(self):
        "Encoding into a buffer"
        buf = bytearray(8)
        self.assertEqual(textcell.encode_into(0x4E2D, buf), 3)
        self.assertEqual(buf[:3], b"\xe4\xb8\xad")
        self.assertEqual(textcell.encode_into(0x41, buf, 3), 1)
        self.assertEqual(buf[:4], b"\xe4\xb8\xadA")
        # nothing written for invalid codepoints
        self.assertEqual(textcell.encode_into(0xD800, buf, 4), 0)
        self.assertEqual(textcell.encode_into(0x110000, buf, 4), 0)
        self.assertEqual(buf[4:], b"\x00" * 4)

        view = memoryview(bytearray(MAX_BYTES))
        self.assertEqual(textcell.encode_into(0x10FFFF, view), 4)
        self.assertEqual(bytes(view), b"\xf4\x8f\xbf\xbf")

        self.assertRaises(ValueError, textcell.encode_into, 0x1F600, bytearray(2))
        self.assertRaises(ValueError, textcell.encode_into, 0x41, bytearray(2), 2)
        self.assertRaises(ValueError, textcell.encode_into, 0x41, bytearray(2), -1)


if __name__ == "__main__":
    unittest.main()
