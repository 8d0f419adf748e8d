# Generated by tools/ucdprops2code.py - Do not edit

from __future__ import annotations

from .ranges import GraphemeBreak as GB

unicode_version = "17.0"
"""The `Unicode version <https://www.unicode.org/versions/enumeratedversions.html>`__
that the data tables implement"""

# Mn Mark NonSpacing, Me Mark Enclosing, Cf Other Format except
# U+00AD SOFT HYPHEN
# 375 ranges
ZERO_WIDTH = (
    (0x0300, 0x036F),
    (0x0483, 0x0489),
    (0x0591, 0x05BD),
    (0x05BF, 0x05BF),
    (0x05C1, 0x05C2),
    (0x05C4, 0x05C5),
    (0x05C7, 0x05C7),
    (0x0600, 0x0605),
    (0x0610, 0x061A),
    (0x061C, 0x061C),
    (0x064B, 0x065F),
    (0x0670, 0x0670),
    (0x06D6, 0x06DD),
    (0x06DF, 0x06E4),
    (0x06E7, 0x06E8),
    (0x06EA, 0x06ED),
    (0x070F, 0x070F),
    (0x0711, 0x0711),
    (0x0730, 0x074A),
    (0x07A6, 0x07B0),
    (0x07EB, 0x07F3),
    (0x07FD, 0x07FD),
    (0x0816, 0x0819),
    (0x081B, 0x0823),
    (0x0825, 0x0827),
    (0x0829, 0x082D),
    (0x0859, 0x085B),
    (0x0890, 0x0891),
    (0x0897, 0x089F),
    (0x08CA, 0x0902),
    (0x093A, 0x093A),
    (0x093C, 0x093C),
    (0x0941, 0x0948),
    (0x094D, 0x094D),
    (0x0951, 0x0957),
    (0x0962, 0x0963),
    (0x0981, 0x0981),
    (0x09BC, 0x09BC),
    (0x09C1, 0x09C4),
    (0x09CD, 0x09CD),
    (0x09E2, 0x09E3),
    (0x09FE, 0x09FE),
    (0x0A01, 0x0A02),
    (0x0A3C, 0x0A3C),
    (0x0A41, 0x0A42),
    (0x0A47, 0x0A48),
    (0x0A4B, 0x0A4D),
    (0x0A51, 0x0A51),
    (0x0A70, 0x0A71),
    (0x0A75, 0x0A75),
    (0x0A81, 0x0A82),
    (0x0ABC, 0x0ABC),
    (0x0AC1, 0x0AC5),
    (0x0AC7, 0x0AC8),
    (0x0ACD, 0x0ACD),
    (0x0AE2, 0x0AE3),
    (0x0AFA, 0x0AFF),
    (0x0B01, 0x0B01),
    (0x0B3C, 0x0B3C),
    (0x0B3F, 0x0B3F),
    (0x0B41, 0x0B44),
    (0x0B4D, 0x0B4D),
    (0x0B55, 0x0B56),
    (0x0B62, 0x0B63),
    (0x0B82, 0x0B82),
    (0x0BC0, 0x0BC0),
    (0x0BCD, 0x0BCD),
    (0x0C00, 0x0C00),
    (0x0C04, 0x0C04),
    (0x0C3C, 0x0C3C),
    (0x0C3E, 0x0C40),
    (0x0C46, 0x0C48),
    (0x0C4A, 0x0C4D),
    (0x0C55, 0x0C56),
    (0x0C62, 0x0C63),
    (0x0C81, 0x0C81),
    (0x0CBC, 0x0CBC),
    (0x0CBF, 0x0CBF),
    (0x0CC6, 0x0CC6),
    (0x0CCC, 0x0CCD),
    (0x0CE2, 0x0CE3),
    (0x0D00, 0x0D01),
    (0x0D3B, 0x0D3C),
    (0x0D41, 0x0D44),
    (0x0D4D, 0x0D4D),
    (0x0D62, 0x0D63),
    (0x0D81, 0x0D81),
    (0x0DCA, 0x0DCA),
    (0x0DD2, 0x0DD4),
    (0x0DD6, 0x0DD6),
    (0x0E31, 0x0E31),
    (0x0E34, 0x0E3A),
    (0x0E47, 0x0E4E),
    (0x0EB1, 0x0EB1),
    (0x0EB4, 0x0EBC),
    (0x0EC8, 0x0ECE),
    (0x0F18, 0x0F19),
    (0x0F35, 0x0F35),
    (0x0F37, 0x0F37),
    (0x0F39, 0x0F39),
    (0x0F71, 0x0F7E),
    (0x0F80, 0x0F84),
    (0x0F86, 0x0F87),
    (0x0F8D, 0x0F97),
    (0x0F99, 0x0FBC),
    (0x0FC6, 0x0FC6),
    (0x102D, 0x1030),
    (0x1032, 0x1037),
    (0x1039, 0x103A),
    (0x103D, 0x103E),
    (0x1058, 0x1059),
    (0x105E, 0x1060),
    (0x1071, 0x1074),
    (0x1082, 0x1082),
    (0x1085, 0x1086),
    (0x108D, 0x108D),
    (0x109D, 0x109D),
    (0x135D, 0x135F),
    (0x1712, 0x1714),
    (0x1732, 0x1733),
    (0x1752, 0x1753),
    (0x1772, 0x1773),
    (0x17B4, 0x17B5),
    (0x17B7, 0x17BD),
    (0x17C6, 0x17C6),
    (0x17C9, 0x17D3),
    (0x17DD, 0x17DD),
    (0x180B, 0x180F),
    (0x1885, 0x1886),
    (0x18A9, 0x18A9),
    (0x1920, 0x1922),
    (0x1927, 0x1928),
    (0x1932, 0x1932),
    (0x1939, 0x193B),
    (0x1A17, 0x1A18),
    (0x1A1B, 0x1A1B),
    (0x1A56, 0x1A56),
    (0x1A58, 0x1A5E),
    (0x1A60, 0x1A60),
    (0x1A62, 0x1A62),
    (0x1A65, 0x1A6C),
    (0x1A73, 0x1A7C),
    (0x1A7F, 0x1A7F),
    (0x1AB0, 0x1ADD),
    (0x1AE0, 0x1AEB),
    (0x1B00, 0x1B03),
    (0x1B34, 0x1B34),
    (0x1B36, 0x1B3A),
    (0x1B3C, 0x1B3C),
    (0x1B42, 0x1B42),
    (0x1B6B, 0x1B73),
    (0x1B80, 0x1B81),
    (0x1BA2, 0x1BA5),
    (0x1BA8, 0x1BA9),
    (0x1BAB, 0x1BAD),
    (0x1BE6, 0x1BE6),
    (0x1BE8, 0x1BE9),
    (0x1BED, 0x1BED),
    (0x1BEF, 0x1BF1),
    (0x1C2C, 0x1C33),
    (0x1C36, 0x1C37),
    (0x1CD0, 0x1CD2),
    (0x1CD4, 0x1CE0),
    (0x1CE2, 0x1CE8),
    (0x1CED, 0x1CED),
    (0x1CF4, 0x1CF4),
    (0x1CF8, 0x1CF9),
    (0x1DC0, 0x1DFF),
    (0x200B, 0x200F),
    (0x202A, 0x202E),
    (0x2060, 0x2064),
    (0x2066, 0x206F),
    (0x20D0, 0x20F0),
    (0x2CEF, 0x2CF1),
    (0x2D7F, 0x2D7F),
    (0x2DE0, 0x2DFF),
    (0x302A, 0x302D),
    (0x3099, 0x309A),
    (0xA66F, 0xA672),
    (0xA674, 0xA67D),
    (0xA69E, 0xA69F),
    (0xA6F0, 0xA6F1),
    (0xA802, 0xA802),
    (0xA806, 0xA806),
    (0xA80B, 0xA80B),
    (0xA825, 0xA826),
    (0xA82C, 0xA82C),
    (0xA8C4, 0xA8C5),
    (0xA8E0, 0xA8F1),
    (0xA8FF, 0xA8FF),
    (0xA926, 0xA92D),
    (0xA947, 0xA951),
    (0xA980, 0xA982),
    (0xA9B3, 0xA9B3),
    (0xA9B6, 0xA9B9),
    (0xA9BC, 0xA9BD),
    (0xA9E5, 0xA9E5),
    (0xAA29, 0xAA2E),
    (0xAA31, 0xAA32),
    (0xAA35, 0xAA36),
    (0xAA43, 0xAA43),
    (0xAA4C, 0xAA4C),
    (0xAA7C, 0xAA7C),
    (0xAAB0, 0xAAB0),
    (0xAAB2, 0xAAB4),
    (0xAAB7, 0xAAB8),
    (0xAABE, 0xAABF),
    (0xAAC1, 0xAAC1),
    (0xAAEC, 0xAAED),
    (0xAAF6, 0xAAF6),
    (0xABE5, 0xABE5),
    (0xABE8, 0xABE8),
    (0xABED, 0xABED),
    (0xFB1E, 0xFB1E),
    (0xFE00, 0xFE0F),
    (0xFE20, 0xFE2F),
    (0xFEFF, 0xFEFF),
    (0xFFF9, 0xFFFB),
    (0x101FD, 0x101FD),
    (0x102E0, 0x102E0),
    (0x10376, 0x1037A),
    (0x10A01, 0x10A03),
    (0x10A05, 0x10A06),
    (0x10A0C, 0x10A0F),
    (0x10A38, 0x10A3A),
    (0x10A3F, 0x10A3F),
    (0x10AE5, 0x10AE6),
    (0x10D24, 0x10D27),
    (0x10D69, 0x10D6D),
    (0x10EAB, 0x10EAC),
    (0x10EFA, 0x10EFF),
    (0x10F46, 0x10F50),
    (0x10F82, 0x10F85),
    (0x11001, 0x11001),
    (0x11038, 0x11046),
    (0x11070, 0x11070),
    (0x11073, 0x11074),
    (0x1107F, 0x11081),
    (0x110B3, 0x110B6),
    (0x110B9, 0x110BA),
    (0x110BD, 0x110BD),
    (0x110C2, 0x110C2),
    (0x110CD, 0x110CD),
    (0x11100, 0x11102),
    (0x11127, 0x1112B),
    (0x1112D, 0x11134),
    (0x11173, 0x11173),
    (0x11180, 0x11181),
    (0x111B6, 0x111BE),
    (0x111C9, 0x111CC),
    (0x111CF, 0x111CF),
    (0x1122F, 0x11231),
    (0x11234, 0x11234),
    (0x11236, 0x11237),
    (0x1123E, 0x1123E),
    (0x11241, 0x11241),
    (0x112DF, 0x112DF),
    (0x112E3, 0x112EA),
    (0x11300, 0x11301),
    (0x1133B, 0x1133C),
    (0x11340, 0x11340),
    (0x11366, 0x1136C),
    (0x11370, 0x11374),
    (0x113BB, 0x113C0),
    (0x113CE, 0x113CE),
    (0x113D0, 0x113D0),
    (0x113D2, 0x113D2),
    (0x113E1, 0x113E2),
    (0x11438, 0x1143F),
    (0x11442, 0x11444),
    (0x11446, 0x11446),
    (0x1145E, 0x1145E),
    (0x114B3, 0x114B8),
    (0x114BA, 0x114BA),
    (0x114BF, 0x114C0),
    (0x114C2, 0x114C3),
    (0x115B2, 0x115B5),
    (0x115BC, 0x115BD),
    (0x115BF, 0x115C0),
    (0x115DC, 0x115DD),
    (0x11633, 0x1163A),
    (0x1163D, 0x1163D),
    (0x1163F, 0x11640),
    (0x116AB, 0x116AB),
    (0x116AD, 0x116AD),
    (0x116B0, 0x116B5),
    (0x116B7, 0x116B7),
    (0x1171D, 0x1171D),
    (0x1171F, 0x1171F),
    (0x11722, 0x11725),
    (0x11727, 0x1172B),
    (0x1182F, 0x11837),
    (0x11839, 0x1183A),
    (0x1193B, 0x1193C),
    (0x1193E, 0x1193E),
    (0x11943, 0x11943),
    (0x119D4, 0x119D7),
    (0x119DA, 0x119DB),
    (0x119E0, 0x119E0),
    (0x11A01, 0x11A0A),
    (0x11A33, 0x11A38),
    (0x11A3B, 0x11A3E),
    (0x11A47, 0x11A47),
    (0x11A51, 0x11A56),
    (0x11A59, 0x11A5B),
    (0x11A8A, 0x11A96),
    (0x11A98, 0x11A99),
    (0x11B60, 0x11B60),
    (0x11B62, 0x11B64),
    (0x11B66, 0x11B66),
    (0x11C30, 0x11C36),
    (0x11C38, 0x11C3D),
    (0x11C3F, 0x11C3F),
    (0x11C92, 0x11CA7),
    (0x11CAA, 0x11CB0),
    (0x11CB2, 0x11CB3),
    (0x11CB5, 0x11CB6),
    (0x11D31, 0x11D36),
    (0x11D3A, 0x11D3A),
    (0x11D3C, 0x11D3D),
    (0x11D3F, 0x11D45),
    (0x11D47, 0x11D47),
    (0x11D90, 0x11D91),
    (0x11D95, 0x11D95),
    (0x11D97, 0x11D97),
    (0x11EF3, 0x11EF4),
    (0x11F00, 0x11F01),
    (0x11F36, 0x11F3A),
    (0x11F40, 0x11F40),
    (0x11F42, 0x11F42),
    (0x11F5A, 0x11F5A),
    (0x13430, 0x13440),
    (0x13447, 0x13455),
    (0x1611E, 0x16129),
    (0x1612D, 0x1612F),
    (0x16AF0, 0x16AF4),
    (0x16B30, 0x16B36),
    (0x16F4F, 0x16F4F),
    (0x16F8F, 0x16F92),
    (0x16FE4, 0x16FE4),
    (0x1BC9D, 0x1BC9E),
    (0x1BCA0, 0x1BCA3),
    (0x1CF00, 0x1CF2D),
    (0x1CF30, 0x1CF46),
    (0x1D167, 0x1D169),
    (0x1D173, 0x1D182),
    (0x1D185, 0x1D18B),
    (0x1D1AA, 0x1D1AD),
    (0x1D242, 0x1D244),
    (0x1DA00, 0x1DA36),
    (0x1DA3B, 0x1DA6C),
    (0x1DA75, 0x1DA75),
    (0x1DA84, 0x1DA84),
    (0x1DA9B, 0x1DA9F),
    (0x1DAA1, 0x1DAAF),
    (0x1E000, 0x1E006),
    (0x1E008, 0x1E018),
    (0x1E01B, 0x1E021),
    (0x1E023, 0x1E024),
    (0x1E026, 0x1E02A),
    (0x1E08F, 0x1E08F),
    (0x1E130, 0x1E136),
    (0x1E2AE, 0x1E2AE),
    (0x1E2EC, 0x1E2EF),
    (0x1E4EC, 0x1E4EF),
    (0x1E5EE, 0x1E5EF),
    (0x1E6E3, 0x1E6E3),
    (0x1E6E6, 0x1E6E6),
    (0x1E6EE, 0x1E6EF),
    (0x1E6F5, 0x1E6F5),
    (0x1E8D0, 0x1E8D6),
    (0x1E944, 0x1E94A),
    (0xE0001, 0xE0001),
    (0xE0020, 0xE007F),
    (0xE0100, 0xE01EF),
)


# East Asian Width W and F, plus Extended_Pictographic
# 109 ranges
DOUBLE_WIDTH = (
    (0x00A9, 0x00A9),
    (0x00AE, 0x00AE),
    (0x1100, 0x115F),
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),
    (0x2139, 0x2139),
    (0x2194, 0x2199),
    (0x21A9, 0x21AA),
    (0x231A, 0x231B),
    (0x2328, 0x232A),
    (0x2388, 0x2388),
    (0x23CF, 0x23CF),
    (0x23E9, 0x23F3),
    (0x23F8, 0x23FA),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25AB),
    (0x25B6, 0x25B6),
    (0x25C0, 0x25C0),
    (0x25FB, 0x25FE),
    (0x2600, 0x2605),
    (0x2607, 0x2612),
    (0x2614, 0x2685),
    (0x268A, 0x2705),
    (0x2708, 0x2712),
    (0x2714, 0x2714),
    (0x2716, 0x2716),
    (0x271D, 0x271D),
    (0x2721, 0x2721),
    (0x2728, 0x2728),
    (0x2733, 0x2734),
    (0x2744, 0x2744),
    (0x2747, 0x2747),
    (0x274C, 0x274C),
    (0x274E, 0x274E),
    (0x2753, 0x2755),
    (0x2757, 0x2757),
    (0x2763, 0x2767),
    (0x2795, 0x2797),
    (0x27A1, 0x27A1),
    (0x27B0, 0x27B0),
    (0x27BF, 0x27BF),
    (0x2934, 0x2935),
    (0x2B05, 0x2B07),
    (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x2FF0, 0x303E),
    (0x3041, 0x3096),
    (0x3099, 0x30FF),
    (0x3105, 0x312F),
    (0x3131, 0x318E),
    (0x3190, 0x31E5),
    (0x31EF, 0x321E),
    (0x3220, 0x3247),
    (0x3250, 0xA48C),
    (0xA490, 0xA4C6),
    (0xA960, 0xA97C),
    (0xAC00, 0xD7A3),
    (0xF900, 0xFAFF),
    (0xFE10, 0xFE19),
    (0xFE30, 0xFE52),
    (0xFE54, 0xFE66),
    (0xFE68, 0xFE6B),
    (0xFF01, 0xFF60),
    (0xFFE0, 0xFFE6),
    (0x16FE0, 0x16FE4),
    (0x16FF0, 0x16FF6),
    (0x17000, 0x18CD5),
    (0x18CFF, 0x18D1E),
    (0x18D80, 0x18DF2),
    (0x1AFF0, 0x1AFF3),
    (0x1AFF5, 0x1AFFB),
    (0x1AFFD, 0x1AFFE),
    (0x1B000, 0x1B122),
    (0x1B132, 0x1B132),
    (0x1B150, 0x1B152),
    (0x1B155, 0x1B155),
    (0x1B164, 0x1B167),
    (0x1B170, 0x1B2FB),
    (0x1D300, 0x1D356),
    (0x1D360, 0x1D376),
    (0x1F000, 0x1F0FF),
    (0x1F10D, 0x1F10F),
    (0x1F12F, 0x1F12F),
    (0x1F16C, 0x1F171),
    (0x1F17E, 0x1F17F),
    (0x1F18E, 0x1F18E),
    (0x1F191, 0x1F19A),
    (0x1F1AD, 0x1F1E5),
    (0x1F200, 0x1F53D),
    (0x1F546, 0x1F64F),
    (0x1F680, 0x1F6FF),
    (0x1F774, 0x1F77F),
    (0x1F7D5, 0x1F7FF),
    (0x1F80C, 0x1F80F),
    (0x1F848, 0x1F84F),
    (0x1F85A, 0x1F85F),
    (0x1F888, 0x1F88F),
    (0x1F8AE, 0x1F8FF),
    (0x1F90C, 0x1F93A),
    (0x1F93C, 0x1F945),
    (0x1F947, 0x1FAFF),
    (0x1FC00, 0x1FFFD),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
)


# Grapheme_Cluster_Break excluding Hangul syllables LV and LVT which
# are computed.  Codepoints not present are Other.
# 537 ranges
GRAPHEME_BREAK = (
    (0x0000, 0x0009, GB.Control),
    (0x000A, 0x000A, GB.LF),
    (0x000B, 0x000C, GB.Control),
    (0x000D, 0x000D, GB.CR),
    (0x000E, 0x001F, GB.Control),
    (0x007F, 0x009F, GB.Control),
    (0x00AD, 0x00AD, GB.Control),
    (0x0300, 0x036F, GB.Extend),
    (0x0483, 0x0489, GB.Extend),
    (0x0591, 0x05BD, GB.Extend),
    (0x05BF, 0x05BF, GB.Extend),
    (0x05C1, 0x05C2, GB.Extend),
    (0x05C4, 0x05C5, GB.Extend),
    (0x05C7, 0x05C7, GB.Extend),
    (0x0600, 0x0605, GB.Prepend),
    (0x0610, 0x061A, GB.Extend),
    (0x061C, 0x061C, GB.Control),
    (0x064B, 0x065F, GB.Extend),
    (0x0670, 0x0670, GB.Extend),
    (0x06D6, 0x06DC, GB.Extend),
    (0x06DD, 0x06DD, GB.Prepend),
    (0x06DF, 0x06E4, GB.Extend),
    (0x06E7, 0x06E8, GB.Extend),
    (0x06EA, 0x06ED, GB.Extend),
    (0x070F, 0x070F, GB.Prepend),
    (0x0711, 0x0711, GB.Extend),
    (0x0730, 0x074A, GB.Extend),
    (0x07A6, 0x07B0, GB.Extend),
    (0x07EB, 0x07F3, GB.Extend),
    (0x07FD, 0x07FD, GB.Extend),
    (0x0816, 0x0819, GB.Extend),
    (0x081B, 0x0823, GB.Extend),
    (0x0825, 0x0827, GB.Extend),
    (0x0829, 0x082D, GB.Extend),
    (0x0859, 0x085B, GB.Extend),
    (0x0890, 0x0891, GB.Prepend),
    (0x0897, 0x089F, GB.Extend),
    (0x08CA, 0x08E1, GB.Extend),
    (0x08E2, 0x08E2, GB.Prepend),
    (0x08E3, 0x0902, GB.Extend),
    (0x0903, 0x0903, GB.SpacingMark),
    (0x093A, 0x093A, GB.Extend),
    (0x093B, 0x093B, GB.SpacingMark),
    (0x093C, 0x093C, GB.Extend),
    (0x093E, 0x0940, GB.SpacingMark),
    (0x0941, 0x0948, GB.Extend),
    (0x0949, 0x094C, GB.SpacingMark),
    (0x094D, 0x094D, GB.Extend),
    (0x094E, 0x094F, GB.SpacingMark),
    (0x0951, 0x0957, GB.Extend),
    (0x0962, 0x0963, GB.Extend),
    (0x0981, 0x0981, GB.Extend),
    (0x0982, 0x0983, GB.SpacingMark),
    (0x09BC, 0x09BC, GB.Extend),
    (0x09BE, 0x09BE, GB.Extend),
    (0x09BF, 0x09C0, GB.SpacingMark),
    (0x09C1, 0x09C4, GB.Extend),
    (0x09C7, 0x09C8, GB.SpacingMark),
    (0x09CB, 0x09CC, GB.SpacingMark),
    (0x09CD, 0x09CD, GB.Extend),
    (0x09D7, 0x09D7, GB.Extend),
    (0x09E2, 0x09E3, GB.Extend),
    (0x09FE, 0x09FE, GB.Extend),
    (0x0A01, 0x0A02, GB.Extend),
    (0x0A03, 0x0A03, GB.SpacingMark),
    (0x0A3C, 0x0A3C, GB.Extend),
    (0x0A3E, 0x0A40, GB.SpacingMark),
    (0x0A41, 0x0A42, GB.Extend),
    (0x0A47, 0x0A48, GB.Extend),
    (0x0A4B, 0x0A4D, GB.Extend),
    (0x0A51, 0x0A51, GB.Extend),
    (0x0A70, 0x0A71, GB.Extend),
    (0x0A75, 0x0A75, GB.Extend),
    (0x0A81, 0x0A82, GB.Extend),
    (0x0A83, 0x0A83, GB.SpacingMark),
    (0x0ABC, 0x0ABC, GB.Extend),
    (0x0ABE, 0x0AC0, GB.SpacingMark),
    (0x0AC1, 0x0AC5, GB.Extend),
    (0x0AC7, 0x0AC8, GB.Extend),
    (0x0AC9, 0x0AC9, GB.SpacingMark),
    (0x0ACB, 0x0ACC, GB.SpacingMark),
    (0x0ACD, 0x0ACD, GB.Extend),
    (0x0AE2, 0x0AE3, GB.Extend),
    (0x0AFA, 0x0AFF, GB.Extend),
    (0x0B01, 0x0B01, GB.Extend),
    (0x0B02, 0x0B03, GB.SpacingMark),
    (0x0B3C, 0x0B3C, GB.Extend),
    (0x0B3E, 0x0B3F, GB.Extend),
    (0x0B40, 0x0B40, GB.SpacingMark),
    (0x0B41, 0x0B44, GB.Extend),
    (0x0B47, 0x0B48, GB.SpacingMark),
    (0x0B4B, 0x0B4C, GB.SpacingMark),
    (0x0B4D, 0x0B4D, GB.Extend),
    (0x0B55, 0x0B57, GB.Extend),
    (0x0B62, 0x0B63, GB.Extend),
    (0x0B82, 0x0B82, GB.Extend),
    (0x0BBE, 0x0BBE, GB.Extend),
    (0x0BBF, 0x0BBF, GB.SpacingMark),
    (0x0BC0, 0x0BC0, GB.Extend),
    (0x0BC1, 0x0BC2, GB.SpacingMark),
    (0x0BC6, 0x0BC8, GB.SpacingMark),
    (0x0BCA, 0x0BCC, GB.SpacingMark),
    (0x0BCD, 0x0BCD, GB.Extend),
    (0x0BD7, 0x0BD7, GB.Extend),
    (0x0C00, 0x0C00, GB.Extend),
    (0x0C01, 0x0C03, GB.SpacingMark),
    (0x0C04, 0x0C04, GB.Extend),
    (0x0C3C, 0x0C3C, GB.Extend),
    (0x0C3E, 0x0C40, GB.Extend),
    (0x0C41, 0x0C44, GB.SpacingMark),
    (0x0C46, 0x0C48, GB.Extend),
    (0x0C4A, 0x0C4D, GB.Extend),
    (0x0C55, 0x0C56, GB.Extend),
    (0x0C62, 0x0C63, GB.Extend),
    (0x0C81, 0x0C81, GB.Extend),
    (0x0C82, 0x0C83, GB.SpacingMark),
    (0x0CBC, 0x0CBC, GB.Extend),
    (0x0CBE, 0x0CBE, GB.SpacingMark),
    (0x0CBF, 0x0CC2, GB.Extend),
    (0x0CC3, 0x0CC4, GB.SpacingMark),
    (0x0CC6, 0x0CCD, GB.Extend),
    (0x0CD5, 0x0CD6, GB.Extend),
    (0x0CE2, 0x0CE3, GB.Extend),
    (0x0CF3, 0x0CF3, GB.SpacingMark),
    (0x0D00, 0x0D01, GB.Extend),
    (0x0D02, 0x0D03, GB.SpacingMark),
    (0x0D3B, 0x0D3C, GB.Extend),
    (0x0D3E, 0x0D3E, GB.Extend),
    (0x0D3F, 0x0D40, GB.SpacingMark),
    (0x0D41, 0x0D44, GB.Extend),
    (0x0D46, 0x0D48, GB.SpacingMark),
    (0x0D4A, 0x0D4C, GB.SpacingMark),
    (0x0D4D, 0x0D4D, GB.Extend),
    (0x0D4E, 0x0D4E, GB.Prepend),
    (0x0D57, 0x0D57, GB.Extend),
    (0x0D62, 0x0D63, GB.Extend),
    (0x0D81, 0x0D81, GB.Extend),
    (0x0D82, 0x0D83, GB.SpacingMark),
    (0x0DCA, 0x0DCA, GB.Extend),
    (0x0DCF, 0x0DCF, GB.Extend),
    (0x0DD0, 0x0DD1, GB.SpacingMark),
    (0x0DD2, 0x0DD6, GB.Extend),
    (0x0DD8, 0x0DDF, GB.SpacingMark),
    (0x0DF2, 0x0DF3, GB.SpacingMark),
    (0x0E31, 0x0E31, GB.Extend),
    (0x0E33, 0x0E33, GB.SpacingMark),
    (0x0E34, 0x0E3A, GB.Extend),
    (0x0E47, 0x0E4E, GB.Extend),
    (0x0EB1, 0x0EB1, GB.Extend),
    (0x0EB3, 0x0EB3, GB.SpacingMark),
    (0x0EB4, 0x0EBC, GB.Extend),
    (0x0EC8, 0x0ECE, GB.Extend),
    (0x0F18, 0x0F19, GB.Extend),
    (0x0F35, 0x0F35, GB.Extend),
    (0x0F37, 0x0F37, GB.Extend),
    (0x0F39, 0x0F39, GB.Extend),
    (0x0F3E, 0x0F3F, GB.SpacingMark),
    (0x0F71, 0x0F7E, GB.Extend),
    (0x0F7F, 0x0F7F, GB.SpacingMark),
    (0x0F80, 0x0F84, GB.Extend),
    (0x0F86, 0x0F87, GB.Extend),
    (0x0F8D, 0x0F97, GB.Extend),
    (0x0F99, 0x0FBC, GB.Extend),
    (0x0FC6, 0x0FC6, GB.Extend),
    (0x102D, 0x1030, GB.Extend),
    (0x1031, 0x1031, GB.SpacingMark),
    (0x1032, 0x1037, GB.Extend),
    (0x1039, 0x103A, GB.Extend),
    (0x103B, 0x103C, GB.SpacingMark),
    (0x103D, 0x103E, GB.Extend),
    (0x1056, 0x1057, GB.SpacingMark),
    (0x1058, 0x1059, GB.Extend),
    (0x105E, 0x1060, GB.Extend),
    (0x1071, 0x1074, GB.Extend),
    (0x1082, 0x1082, GB.Extend),
    (0x1084, 0x1084, GB.SpacingMark),
    (0x1085, 0x1086, GB.Extend),
    (0x108D, 0x108D, GB.Extend),
    (0x109D, 0x109D, GB.Extend),
    (0x1100, 0x115F, GB.L),
    (0x1160, 0x11A7, GB.V),
    (0x11A8, 0x11FF, GB.T),
    (0x135D, 0x135F, GB.Extend),
    (0x1712, 0x1715, GB.Extend),
    (0x1732, 0x1734, GB.Extend),
    (0x1752, 0x1753, GB.Extend),
    (0x1772, 0x1773, GB.Extend),
    (0x17B4, 0x17B5, GB.Extend),
    (0x17B6, 0x17B6, GB.SpacingMark),
    (0x17B7, 0x17BD, GB.Extend),
    (0x17BE, 0x17C5, GB.SpacingMark),
    (0x17C6, 0x17C6, GB.Extend),
    (0x17C7, 0x17C8, GB.SpacingMark),
    (0x17C9, 0x17D3, GB.Extend),
    (0x17DD, 0x17DD, GB.Extend),
    (0x180B, 0x180D, GB.Extend),
    (0x180E, 0x180E, GB.Control),
    (0x180F, 0x180F, GB.Extend),
    (0x1885, 0x1886, GB.Extend),
    (0x18A9, 0x18A9, GB.Extend),
    (0x1920, 0x1922, GB.Extend),
    (0x1923, 0x1926, GB.SpacingMark),
    (0x1927, 0x1928, GB.Extend),
    (0x1929, 0x192B, GB.SpacingMark),
    (0x1930, 0x1931, GB.SpacingMark),
    (0x1932, 0x1932, GB.Extend),
    (0x1933, 0x1938, GB.SpacingMark),
    (0x1939, 0x193B, GB.Extend),
    (0x1A17, 0x1A18, GB.Extend),
    (0x1A19, 0x1A1A, GB.SpacingMark),
    (0x1A1B, 0x1A1B, GB.Extend),
    (0x1A55, 0x1A55, GB.SpacingMark),
    (0x1A56, 0x1A56, GB.Extend),
    (0x1A57, 0x1A57, GB.SpacingMark),
    (0x1A58, 0x1A60, GB.Extend),
    (0x1A62, 0x1A62, GB.Extend),
    (0x1A65, 0x1A6C, GB.Extend),
    (0x1A6D, 0x1A72, GB.SpacingMark),
    (0x1A73, 0x1A7F, GB.Extend),
    (0x1AB0, 0x1AEB, GB.Extend),
    (0x1B00, 0x1B03, GB.Extend),
    (0x1B04, 0x1B04, GB.SpacingMark),
    (0x1B34, 0x1B3C, GB.Extend),
    (0x1B3D, 0x1B41, GB.SpacingMark),
    (0x1B42, 0x1B44, GB.Extend),
    (0x1B6B, 0x1B73, GB.Extend),
    (0x1B80, 0x1B81, GB.Extend),
    (0x1B82, 0x1B82, GB.SpacingMark),
    (0x1BA1, 0x1BA1, GB.SpacingMark),
    (0x1BA2, 0x1BA5, GB.Extend),
    (0x1BA6, 0x1BA7, GB.SpacingMark),
    (0x1BA8, 0x1BAD, GB.Extend),
    (0x1BE6, 0x1BE6, GB.Extend),
    (0x1BE7, 0x1BE7, GB.SpacingMark),
    (0x1BE8, 0x1BE9, GB.Extend),
    (0x1BEA, 0x1BEC, GB.SpacingMark),
    (0x1BED, 0x1BED, GB.Extend),
    (0x1BEE, 0x1BEE, GB.SpacingMark),
    (0x1BEF, 0x1BF3, GB.Extend),
    (0x1C24, 0x1C2B, GB.SpacingMark),
    (0x1C2C, 0x1C33, GB.Extend),
    (0x1C34, 0x1C35, GB.SpacingMark),
    (0x1C36, 0x1C37, GB.Extend),
    (0x1CD0, 0x1CD2, GB.Extend),
    (0x1CD4, 0x1CE0, GB.Extend),
    (0x1CE1, 0x1CE1, GB.SpacingMark),
    (0x1CE2, 0x1CE8, GB.Extend),
    (0x1CED, 0x1CED, GB.Extend),
    (0x1CF4, 0x1CF4, GB.Extend),
    (0x1CF7, 0x1CF7, GB.SpacingMark),
    (0x1CF8, 0x1CF9, GB.Extend),
    (0x1DC0, 0x1DFF, GB.Extend),
    (0x200B, 0x200B, GB.Control),
    (0x200C, 0x200C, GB.Extend),
    (0x200D, 0x200D, GB.ZWJ),
    (0x200E, 0x200F, GB.Control),
    (0x2028, 0x202E, GB.Control),
    (0x2060, 0x206F, GB.Control),
    (0x20D0, 0x20F0, GB.Extend),
    (0x2CEF, 0x2CF1, GB.Extend),
    (0x2D7F, 0x2D7F, GB.Extend),
    (0x2DE0, 0x2DFF, GB.Extend),
    (0x302A, 0x302F, GB.Extend),
    (0x3099, 0x309A, GB.Extend),
    (0xA66F, 0xA672, GB.Extend),
    (0xA674, 0xA67D, GB.Extend),
    (0xA69E, 0xA69F, GB.Extend),
    (0xA6F0, 0xA6F1, GB.Extend),
    (0xA802, 0xA802, GB.Extend),
    (0xA806, 0xA806, GB.Extend),
    (0xA80B, 0xA80B, GB.Extend),
    (0xA823, 0xA824, GB.SpacingMark),
    (0xA825, 0xA826, GB.Extend),
    (0xA827, 0xA827, GB.SpacingMark),
    (0xA82C, 0xA82C, GB.Extend),
    (0xA880, 0xA881, GB.SpacingMark),
    (0xA8B4, 0xA8C3, GB.SpacingMark),
    (0xA8C4, 0xA8C5, GB.Extend),
    (0xA8E0, 0xA8F1, GB.Extend),
    (0xA8FF, 0xA8FF, GB.Extend),
    (0xA926, 0xA92D, GB.Extend),
    (0xA947, 0xA951, GB.Extend),
    (0xA952, 0xA952, GB.SpacingMark),
    (0xA953, 0xA953, GB.Extend),
    (0xA960, 0xA97C, GB.L),
    (0xA980, 0xA982, GB.Extend),
    (0xA983, 0xA983, GB.SpacingMark),
    (0xA9B3, 0xA9B3, GB.Extend),
    (0xA9B4, 0xA9B5, GB.SpacingMark),
    (0xA9B6, 0xA9B9, GB.Extend),
    (0xA9BA, 0xA9BB, GB.SpacingMark),
    (0xA9BC, 0xA9C0, GB.Extend),
    (0xA9E5, 0xA9E5, GB.Extend),
    (0xAA29, 0xAA2E, GB.Extend),
    (0xAA2F, 0xAA30, GB.SpacingMark),
    (0xAA31, 0xAA32, GB.Extend),
    (0xAA33, 0xAA34, GB.SpacingMark),
    (0xAA35, 0xAA36, GB.Extend),
    (0xAA43, 0xAA43, GB.Extend),
    (0xAA4C, 0xAA4C, GB.Extend),
    (0xAA4D, 0xAA4D, GB.SpacingMark),
    (0xAA7C, 0xAA7C, GB.Extend),
    (0xAAB0, 0xAAB0, GB.Extend),
    (0xAAB2, 0xAAB4, GB.Extend),
    (0xAAB7, 0xAAB8, GB.Extend),
    (0xAABE, 0xAAC1, GB.Extend),
    (0xAAEB, 0xAAEB, GB.SpacingMark),
    (0xAAEC, 0xAAED, GB.Extend),
    (0xAAEE, 0xAAEF, GB.SpacingMark),
    (0xAAF5, 0xAAF5, GB.SpacingMark),
    (0xAAF6, 0xAAF6, GB.Extend),
    (0xABE3, 0xABE4, GB.SpacingMark),
    (0xABE5, 0xABE5, GB.Extend),
    (0xABE6, 0xABE7, GB.SpacingMark),
    (0xABE8, 0xABE8, GB.Extend),
    (0xABE9, 0xABEA, GB.SpacingMark),
    (0xABEC, 0xABEC, GB.SpacingMark),
    (0xABED, 0xABED, GB.Extend),
    (0xD7B0, 0xD7C6, GB.V),
    (0xD7CB, 0xD7FB, GB.T),
    (0xFB1E, 0xFB1E, GB.Extend),
    (0xFE00, 0xFE0F, GB.Extend),
    (0xFE20, 0xFE2F, GB.Extend),
    (0xFEFF, 0xFEFF, GB.Control),
    (0xFF9E, 0xFF9F, GB.Extend),
    (0xFFF0, 0xFFFB, GB.Control),
    (0x101FD, 0x101FD, GB.Extend),
    (0x102E0, 0x102E0, GB.Extend),
    (0x10376, 0x1037A, GB.Extend),
    (0x10A01, 0x10A03, GB.Extend),
    (0x10A05, 0x10A06, GB.Extend),
    (0x10A0C, 0x10A0F, GB.Extend),
    (0x10A38, 0x10A3F, GB.Extend),
    (0x10AE5, 0x10AE6, GB.Extend),
    (0x10D24, 0x10D27, GB.Extend),
    (0x10D69, 0x10D6D, GB.Extend),
    (0x10EAB, 0x10EAC, GB.Extend),
    (0x10EFA, 0x10EFF, GB.Extend),
    (0x10F46, 0x10F50, GB.Extend),
    (0x10F82, 0x10F85, GB.Extend),
    (0x11000, 0x11000, GB.SpacingMark),
    (0x11001, 0x11001, GB.Extend),
    (0x11002, 0x11002, GB.SpacingMark),
    (0x11038, 0x11046, GB.Extend),
    (0x11070, 0x11070, GB.Extend),
    (0x11073, 0x11074, GB.Extend),
    (0x1107F, 0x11081, GB.Extend),
    (0x11082, 0x11082, GB.SpacingMark),
    (0x110B0, 0x110B2, GB.SpacingMark),
    (0x110B3, 0x110B6, GB.Extend),
    (0x110B7, 0x110B8, GB.SpacingMark),
    (0x110B9, 0x110BA, GB.Extend),
    (0x110BD, 0x110BD, GB.Prepend),
    (0x110C2, 0x110C2, GB.Extend),
    (0x110CD, 0x110CD, GB.Prepend),
    (0x11100, 0x11102, GB.Extend),
    (0x11127, 0x1112B, GB.Extend),
    (0x1112C, 0x1112C, GB.SpacingMark),
    (0x1112D, 0x11134, GB.Extend),
    (0x11145, 0x11146, GB.SpacingMark),
    (0x11173, 0x11173, GB.Extend),
    (0x11180, 0x11181, GB.Extend),
    (0x11182, 0x11182, GB.SpacingMark),
    (0x111B3, 0x111B5, GB.SpacingMark),
    (0x111B6, 0x111C0, GB.Extend),
    (0x111C2, 0x111C3, GB.Prepend),
    (0x111C9, 0x111CF, GB.Extend),
    (0x1122C, 0x1122E, GB.SpacingMark),
    (0x1122F, 0x11231, GB.Extend),
    (0x11232, 0x11233, GB.SpacingMark),
    (0x11234, 0x11237, GB.Extend),
    (0x1123E, 0x1123E, GB.Extend),
    (0x11241, 0x11241, GB.Extend),
    (0x112DF, 0x112DF, GB.Extend),
    (0x112E0, 0x112E2, GB.SpacingMark),
    (0x112E3, 0x112EA, GB.Extend),
    (0x11300, 0x11301, GB.Extend),
    (0x11302, 0x11303, GB.SpacingMark),
    (0x1133B, 0x1133C, GB.Extend),
    (0x1133E, 0x1133E, GB.Extend),
    (0x1133F, 0x1133F, GB.SpacingMark),
    (0x11340, 0x11340, GB.Extend),
    (0x11341, 0x11344, GB.SpacingMark),
    (0x11347, 0x11348, GB.SpacingMark),
    (0x1134B, 0x1134D, GB.Extend),
    (0x11357, 0x11357, GB.Extend),
    (0x11362, 0x11363, GB.SpacingMark),
    (0x11366, 0x11374, GB.Extend),
    (0x113B8, 0x113B8, GB.Extend),
    (0x113B9, 0x113BA, GB.SpacingMark),
    (0x113BB, 0x113C0, GB.Extend),
    (0x113C2, 0x113C9, GB.Extend),
    (0x113CA, 0x113CD, GB.SpacingMark),
    (0x113CE, 0x113D0, GB.Extend),
    (0x113D1, 0x113D1, GB.Prepend),
    (0x113D2, 0x113D2, GB.Extend),
    (0x113E1, 0x113E2, GB.Extend),
    (0x11435, 0x11437, GB.SpacingMark),
    (0x11438, 0x1143F, GB.Extend),
    (0x11440, 0x11441, GB.SpacingMark),
    (0x11442, 0x11444, GB.Extend),
    (0x11445, 0x11445, GB.SpacingMark),
    (0x11446, 0x11446, GB.Extend),
    (0x1145E, 0x1145E, GB.Extend),
    (0x114B0, 0x114B2, GB.SpacingMark),
    (0x114B3, 0x114B8, GB.Extend),
    (0x114B9, 0x114B9, GB.SpacingMark),
    (0x114BA, 0x114BA, GB.Extend),
    (0x114BB, 0x114BE, GB.SpacingMark),
    (0x114BF, 0x114C0, GB.Extend),
    (0x114C1, 0x114C1, GB.SpacingMark),
    (0x114C2, 0x114C3, GB.Extend),
    (0x115AF, 0x115B1, GB.SpacingMark),
    (0x115B2, 0x115B5, GB.Extend),
    (0x115B8, 0x115BB, GB.SpacingMark),
    (0x115BC, 0x115BD, GB.Extend),
    (0x115BE, 0x115BE, GB.SpacingMark),
    (0x115BF, 0x115C0, GB.Extend),
    (0x115DC, 0x115DD, GB.Extend),
    (0x11630, 0x11632, GB.SpacingMark),
    (0x11633, 0x1163A, GB.Extend),
    (0x1163B, 0x1163C, GB.SpacingMark),
    (0x1163D, 0x1163D, GB.Extend),
    (0x1163E, 0x1163E, GB.SpacingMark),
    (0x1163F, 0x11640, GB.Extend),
    (0x116AB, 0x116AB, GB.Extend),
    (0x116AC, 0x116AC, GB.SpacingMark),
    (0x116AD, 0x116AD, GB.Extend),
    (0x116AE, 0x116AF, GB.SpacingMark),
    (0x116B0, 0x116B7, GB.Extend),
    (0x1171D, 0x1171D, GB.Extend),
    (0x1171E, 0x1171E, GB.SpacingMark),
    (0x1171F, 0x1171F, GB.Extend),
    (0x11722, 0x11725, GB.Extend),
    (0x11726, 0x11726, GB.SpacingMark),
    (0x11727, 0x1172B, GB.Extend),
    (0x1182C, 0x1182E, GB.SpacingMark),
    (0x1182F, 0x11837, GB.Extend),
    (0x11838, 0x11838, GB.SpacingMark),
    (0x11839, 0x1183A, GB.Extend),
    (0x11930, 0x11935, GB.SpacingMark),
    (0x11937, 0x11938, GB.SpacingMark),
    (0x1193B, 0x1193E, GB.Extend),
    (0x1193F, 0x1193F, GB.Prepend),
    (0x11940, 0x11940, GB.SpacingMark),
    (0x11941, 0x11941, GB.Prepend),
    (0x11942, 0x11943, GB.Extend),
    (0x119D1, 0x119D3, GB.SpacingMark),
    (0x119D4, 0x119DB, GB.Extend),
    (0x119DC, 0x119DF, GB.SpacingMark),
    (0x119E0, 0x119E0, GB.Extend),
    (0x119E4, 0x119E4, GB.SpacingMark),
    (0x11A01, 0x11A0A, GB.Extend),
    (0x11A33, 0x11A38, GB.Extend),
    (0x11A39, 0x11A39, GB.SpacingMark),
    (0x11A3B, 0x11A47, GB.Extend),
    (0x11A51, 0x11A56, GB.Extend),
    (0x11A57, 0x11A58, GB.SpacingMark),
    (0x11A59, 0x11A5B, GB.Extend),
    (0x11A84, 0x11A89, GB.Prepend),
    (0x11A8A, 0x11A96, GB.Extend),
    (0x11A97, 0x11A97, GB.SpacingMark),
    (0x11A98, 0x11A99, GB.Extend),
    (0x11B60, 0x11B67, GB.Extend),
    (0x11C2F, 0x11C2F, GB.SpacingMark),
    (0x11C30, 0x11C3D, GB.Extend),
    (0x11C3E, 0x11C3E, GB.SpacingMark),
    (0x11C3F, 0x11C3F, GB.Extend),
    (0x11C92, 0x11CA8, GB.Extend),
    (0x11CA9, 0x11CA9, GB.SpacingMark),
    (0x11CAA, 0x11CB0, GB.Extend),
    (0x11CB1, 0x11CB1, GB.SpacingMark),
    (0x11CB2, 0x11CB3, GB.Extend),
    (0x11CB4, 0x11CB4, GB.SpacingMark),
    (0x11CB5, 0x11CB6, GB.Extend),
    (0x11D31, 0x11D45, GB.Extend),
    (0x11D46, 0x11D46, GB.Prepend),
    (0x11D47, 0x11D47, GB.Extend),
    (0x11D8A, 0x11D8E, GB.SpacingMark),
    (0x11D90, 0x11D92, GB.Extend),
    (0x11D93, 0x11D94, GB.SpacingMark),
    (0x11D95, 0x11D95, GB.Extend),
    (0x11D96, 0x11D96, GB.SpacingMark),
    (0x11D97, 0x11D97, GB.Extend),
    (0x11EF3, 0x11EF4, GB.Extend),
    (0x11EF5, 0x11EF6, GB.SpacingMark),
    (0x11F00, 0x11F01, GB.Extend),
    (0x11F02, 0x11F02, GB.Prepend),
    (0x11F03, 0x11F03, GB.SpacingMark),
    (0x11F34, 0x11F35, GB.SpacingMark),
    (0x11F36, 0x11F3D, GB.Extend),
    (0x11F3E, 0x11F3F, GB.SpacingMark),
    (0x11F40, 0x11F42, GB.Extend),
    (0x11F5A, 0x11F5A, GB.Extend),
    (0x13430, 0x1343F, GB.Control),
    (0x13440, 0x13455, GB.Extend),
    (0x1611E, 0x16129, GB.Extend),
    (0x1612A, 0x1612C, GB.SpacingMark),
    (0x1612D, 0x1612F, GB.Extend),
    (0x16AF0, 0x16AF4, GB.Extend),
    (0x16B30, 0x16B36, GB.Extend),
    (0x16D63, 0x16D63, GB.V),
    (0x16D67, 0x16D6A, GB.V),
    (0x16F4F, 0x16F4F, GB.Extend),
    (0x16F51, 0x16F87, GB.SpacingMark),
    (0x16F8F, 0x16F92, GB.Extend),
    (0x16FE4, 0x16FE4, GB.Extend),
    (0x16FF0, 0x16FF1, GB.Extend),
    (0x1BC9D, 0x1BC9E, GB.Extend),
    (0x1BCA0, 0x1BCA3, GB.Control),
    (0x1CF00, 0x1CF46, GB.Extend),
    (0x1D165, 0x1D172, GB.Extend),
    (0x1D173, 0x1D17A, GB.Control),
    (0x1D17B, 0x1D1AD, GB.Extend),
    (0x1D242, 0x1D244, GB.Extend),
    (0x1DA00, 0x1DA36, GB.Extend),
    (0x1DA3B, 0x1DA6C, GB.Extend),
    (0x1DA75, 0x1DA75, GB.Extend),
    (0x1DA84, 0x1DA84, GB.Extend),
    (0x1DA9B, 0x1DAAF, GB.Extend),
    (0x1E000, 0x1E02A, GB.Extend),
    (0x1E08F, 0x1E08F, GB.Extend),
    (0x1E130, 0x1E136, GB.Extend),
    (0x1E2AE, 0x1E2AE, GB.Extend),
    (0x1E2EC, 0x1E2EF, GB.Extend),
    (0x1E4EC, 0x1E4EF, GB.Extend),
    (0x1E5EE, 0x1E5EF, GB.Extend),
    (0x1E6E3, 0x1E6F5, GB.Extend),
    (0x1E8D0, 0x1E8D6, GB.Extend),
    (0x1E944, 0x1E94A, GB.Extend),
    (0x1F1E6, 0x1F1FF, GB.Regional_Indicator),
    (0x1F3FB, 0x1F3FF, GB.Extend),
    (0xE0000, 0xE001F, GB.Control),
    (0xE0020, 0xE007F, GB.Extend),
    (0xE0080, 0xE00FF, GB.Control),
    (0xE0100, 0xE01EF, GB.Extend),
    (0xE01F0, 0xE0FFF, GB.Control),
)


# Indic_Conjunct_Break=Linker
# 43 codepoints
INCB_LINKER = (
    0x094D, 0x09CD, 0x0ACD, 0x0B4D, 0x0C4D, 0x0D4D, 0x1039, 0x103A,
    0x1714, 0x1715, 0x17D2, 0x1A60, 0x1B44, 0x1BAA, 0x1BAB, 0xA806,
    0xA8C4, 0xA9C0, 0xAAF6, 0x10A3F, 0x11046, 0x110B9, 0x11133, 0x11134,
    0x111C0, 0x11235, 0x1134D, 0x11442, 0x114C2, 0x115BF, 0x1163F, 0x116B6,
    0x1172B, 0x11839, 0x119E0, 0x11A34, 0x11A47, 0x11A99, 0x11C3F, 0x11D45,
    0x11D97, 0x11F41, 0x11F42,
)


# Indic_Conjunct_Break=Consonant
# 145 ranges
INCB_CONSONANT = (
    (0x0915, 0x0939),
    (0x0958, 0x095F),
    (0x0978, 0x097F),
    (0x0995, 0x09A8),
    (0x09AA, 0x09B0),
    (0x09B2, 0x09B2),
    (0x09B6, 0x09B9),
    (0x09DC, 0x09DD),
    (0x09DF, 0x09E1),
    (0x09F0, 0x09F1),
    (0x0A15, 0x0A28),
    (0x0A2A, 0x0A30),
    (0x0A32, 0x0A33),
    (0x0A35, 0x0A36),
    (0x0A38, 0x0A39),
    (0x0A59, 0x0A5C),
    (0x0A5E, 0x0A5E),
    (0x0A72, 0x0A74),
    (0x0A95, 0x0AA8),
    (0x0AAA, 0x0AB0),
    (0x0AB2, 0x0AB3),
    (0x0AB5, 0x0AB9),
    (0x0AE0, 0x0AE1),
    (0x0B15, 0x0B28),
    (0x0B2A, 0x0B30),
    (0x0B32, 0x0B33),
    (0x0B35, 0x0B39),
    (0x0B5C, 0x0B5D),
    (0x0B5F, 0x0B61),
    (0x0B71, 0x0B71),
    (0x0B95, 0x0B95),
    (0x0B99, 0x0B9A),
    (0x0B9C, 0x0B9C),
    (0x0B9E, 0x0B9F),
    (0x0BA3, 0x0BA4),
    (0x0BA8, 0x0BAA),
    (0x0BAE, 0x0BB9),
    (0x0C15, 0x0C28),
    (0x0C2A, 0x0C39),
    (0x0C58, 0x0C5A),
    (0x0C5D, 0x0C5D),
    (0x0C60, 0x0C61),
    (0x0C95, 0x0CA8),
    (0x0CAA, 0x0CB3),
    (0x0CB5, 0x0CB9),
    (0x0CDD, 0x0CDE),
    (0x0CE0, 0x0CE1),
    (0x0D15, 0x0D3A),
    (0x0D54, 0x0D56),
    (0x0D5F, 0x0D61),
    (0x0D7A, 0x0D7F),
    (0x1000, 0x1025),
    (0x1027, 0x1027),
    (0x1029, 0x102A),
    (0x1050, 0x1055),
    (0x105A, 0x105D),
    (0x1061, 0x1061),
    (0x1065, 0x1066),
    (0x106E, 0x1070),
    (0x1075, 0x1081),
    (0x108E, 0x108E),
    (0x1703, 0x170C),
    (0x170E, 0x1711),
    (0x1780, 0x17A2),
    (0x17A5, 0x17A7),
    (0x17A9, 0x17B3),
    (0x1901, 0x1922),
    (0x1930, 0x1931),
    (0x1950, 0x196D),
    (0x1980, 0x19A9),
    (0x19C1, 0x19C7),
    (0x1A00, 0x1A16),
    (0x1A20, 0x1A4C),
    (0x1B05, 0x1B33),
    (0x1B83, 0x1BA0),
    (0xA807, 0xA80A),
    (0xA80C, 0xA822),
    (0xA882, 0xA8B3),
    (0xA90A, 0xA925),
    (0xA930, 0xA946),
    (0xA989, 0xA98B),
    (0xA98D, 0xA9B2),
    (0xAA00, 0xAA28),
    (0xAA60, 0xAA6F),
    (0xAA71, 0xAA76),
    (0xAAE0, 0xAAEA),
    (0x10A00, 0x10A00),
    (0x10A10, 0x10A13),
    (0x10A15, 0x10A17),
    (0x10A19, 0x10A35),
    (0x11005, 0x11037),
    (0x11071, 0x11072),
    (0x11075, 0x11075),
    (0x11083, 0x110AF),
    (0x11107, 0x1112B),
    (0x11150, 0x11172),
    (0x11183, 0x111B2),
    (0x111C1, 0x111C4),
    (0x11200, 0x11211),
    (0x11213, 0x1122B),
    (0x1123F, 0x11240),
    (0x11284, 0x11286),
    (0x11288, 0x11288),
    (0x1128A, 0x1128D),
    (0x1128F, 0x1129D),
    (0x1129F, 0x112A8),
    (0x11305, 0x1130C),
    (0x1130F, 0x11310),
    (0x11313, 0x11328),
    (0x1132A, 0x11330),
    (0x11332, 0x11333),
    (0x11335, 0x11339),
    (0x1135D, 0x11361),
    (0x11400, 0x11434),
    (0x11447, 0x1144A),
    (0x11481, 0x114AF),
    (0x114C4, 0x114C5),
    (0x114C7, 0x114C7),
    (0x11580, 0x115AE),
    (0x115D8, 0x115DB),
    (0x11600, 0x1162F),
    (0x11644, 0x11644),
    (0x11680, 0x116AA),
    (0x116B8, 0x116B8),
    (0x11700, 0x1171A),
    (0x11800, 0x1182B),
    (0x11912, 0x11935),
    (0x11937, 0x11938),
    (0x119A0, 0x119A7),
    (0x119AA, 0x119D0),
    (0x11A0B, 0x11A32),
    (0x11A5C, 0x11A89),
    (0x11C00, 0x11C08),
    (0x11C0A, 0x11C2E),
    (0x11C72, 0x11C8F),
    (0x11D00, 0x11D06),
    (0x11D08, 0x11D09),
    (0x11D0B, 0x11D30),
    (0x11D60, 0x11D65),
    (0x11D67, 0x11D68),
    (0x11D6A, 0x11D89),
    (0x11EE0, 0x11EF2),
    (0x11F02, 0x11F02),
    (0x11F04, 0x11F10),
    (0x11F12, 0x11F33),
)
