#!/usr/bin/env python3

# Generates textcell/_unicodedb.py from the unicode properties db

import sys
import os
import itertools
import pathlib
import re

from typing import Any, Iterable

try:
    batched = itertools.batched
except AttributeError:
    # Copied from https://docs.python.org/3/library/itertools.html#itertools.batched
    def batched(iterable, n):
        # batched('ABCDEFG', 3) --> ABC DEF G
        if n < 1:
            raise ValueError("n must be at least one")
        it = iter(iterable)
        while batch := tuple(itertools.islice(it, n)):
            yield batch


def fmt(v: int) -> str:
    # format values the same as in the text source for easy grepping
    return f"0x{v:04X}"


ucd_version = None


def extract_version(filename: str, source: str):
    global ucd_version
    if filename == "emoji-data.txt":
        for line in source.splitlines():
            if line.startswith("# Used with Emoji Version "):
                mo = re.match(r".*Version (?P<version>[^\s]+)\s.*", line)
                break
        else:
            raise ValueError("No matching version line found")
    else:
        mo = re.match(r"# [^-]+-(?P<version>.*)\.txt", source.splitlines()[0])
    # we only care about major.minor - emoji data doesn't even have patch
    version = ".".join(mo.group("version").split(".")[:2])
    if ucd_version is None:
        ucd_version = version
    elif ucd_version != version:
        sys.exit(f"Already saw {ucd_version=} but {filename=} is {version=}")


def parse_source_lines(source: str):
    for line in source.splitlines():
        if not line.strip() or line.startswith("#"):
            continue
        line = line[: line.index("#")]
        vals, prop = line.split(";", 1)
        prop = prop.strip()
        vals = vals.strip().split("..")
        if len(vals) == 1:
            yield int(vals[0], 16), None, prop
        else:
            yield int(vals[0], 16), int(vals[1], 16), prop


def extract_prop(source: str, dest: set[int], wanted: Iterable[str]):
    "adds codepoints whose property is one of wanted to dest"
    wanted = set(wanted)
    before = len(dest)
    for start, end, prop in parse_source_lines(source):
        # multi field lines like "InCB; Linker" are normalised
        prop = "; ".join(p.strip() for p in prop.split(";"))
        if prop in wanted:
            dest.update(range(start, 1 + (end if end is not None else start)))
    assert len(dest) > before, f"Nothing found for {wanted}"


def extract_grapheme(source: str, dest: dict[int, str]):
    # Later lines win so a range listed inside a wider one keeps its
    # specific value
    for start, end, prop in parse_source_lines(source):
        if prop in {"LV", "LVT"}:
            continue
        for cp in range(start, 1 + (end if end is not None else start)):
            dest[cp] = prop


zero_width: set[int] = set()
double_width: set[int] = set()
grapheme_break: dict[int, str] = {}
incb_linker: set[int] = set()
incb_consonant: set[int] = set()


def read_props(data_dir: str):
    def get_source(url: str) -> str:
        parts = url.split("/")
        if data_dir:
            candidates = (
                pathlib.Path(data_dir) / parts[-1],
                pathlib.Path(data_dir) / parts[-2] / parts[-1],
            )
            for url in candidates:
                if url.exists():
                    break
            else:
                sys.exit(f"Failed to find file in data dir.  Looked for\n{candidates}")

        print("Reading", url)
        if isinstance(url, str):
            source = urllib.request.urlopen(url).read().decode("utf8")
        else:
            source = url.read_text("utf8")

        return source

    source = get_source("https://www.unicode.org/Public/UCD/latest/ucd/extracted/DerivedGeneralCategory.txt")
    extract_version("DerivedGeneralCategory.txt", source)
    extract_prop(source, zero_width, ("Mn", "Me", "Cf"))
    # soft hyphen is Cf but terminals show it
    zero_width.discard(0x00AD)

    source = get_source("https://www.unicode.org/Public/UCD/latest/ucd/EastAsianWidth.txt")
    extract_version("EastAsianWidth.txt", source)
    extract_prop(source, double_width, ("W", "F"))

    source = get_source("https://www.unicode.org/Public/UCD/latest/ucd/emoji/emoji-data.txt")
    extract_version("emoji-data.txt", source)
    extract_prop(source, double_width, ("Extended_Pictographic",))

    source = get_source("https://www.unicode.org/Public/UCD/latest/ucd/DerivedCoreProperties.txt")
    extract_version("DerivedCoreProperties.txt", source)
    extract_prop(source, incb_linker, ("InCB; Linker",))
    extract_prop(source, incb_consonant, ("InCB; Consonant",))

    source = get_source("https://www.unicode.org/Public/UCD/latest/ucd/auxiliary/GraphemeBreakProperty.txt")
    extract_version("GraphemeBreakProperty.txt", source)
    extract_grapheme(source, grapheme_break)


def to_ranges(values: Iterable[int], tag=None) -> list[list[Any]]:
    "collapses codepoints (or codepoint to tag mapping) into [start, end, tag] runs"
    ranges: list[list[Any]] = []
    for cp in sorted(values):
        value = tag(cp) if tag else None
        if ranges and ranges[-1][1] == cp - 1 and ranges[-1][2] == value:
            ranges[-1][1] = cp
        else:
            ranges.append([cp, cp, value])
    return ranges


def generate_table(name: str, comment: str, ranges: list[list[Any]], tagged: bool = False) -> list[str]:
    res = [f"# {line}" for line in comment.splitlines()]
    res.append(f"# {len(ranges)} ranges")
    res.append(f"{name} = (")
    for start, end, tag in ranges:
        if tagged:
            res.append(f"    ({fmt(start)}, {fmt(end)}, GB.{tag}),")
        else:
            res.append(f"    ({fmt(start)}, {fmt(end)}),")
    res.append(")")
    return res


def generate_values(name: str, comment: str, values: set[int]) -> list[str]:
    res = [f"# {line}" for line in comment.splitlines()]
    res.append(f"# {len(values)} codepoints")
    res.append(f"{name} = (")
    for row in batched(sorted(values), 8):
        res.append("    " + " ".join(f"{fmt(v)}," for v in row))
    res.append(")")
    return res


def generate_python() -> str:
    res = [
        "from __future__ import annotations",
        "",
        "from .ranges import GraphemeBreak as GB",
        "",
        f'unicode_version = "{ ucd_version }"',
        '"""The `Unicode version <https://www.unicode.org/versions/enumeratedversions.html>`__',
        'that the data tables implement"""',
    ]
    tables = (
        generate_table(
            "ZERO_WIDTH",
            "Mn Mark NonSpacing, Me Mark Enclosing, Cf Other Format except\nU+00AD SOFT HYPHEN",
            to_ranges(zero_width),
        ),
        generate_table(
            "DOUBLE_WIDTH", "East Asian Width W and F, plus Extended_Pictographic", to_ranges(double_width)
        ),
        generate_table(
            "GRAPHEME_BREAK",
            "Grapheme_Cluster_Break excluding Hangul syllables LV and LVT which\nare computed.  Codepoints not present are Other.",
            to_ranges(grapheme_break, grapheme_break.__getitem__),
            tagged=True,
        ),
        generate_values("INCB_LINKER", "Indic_Conjunct_Break=Linker", incb_linker),
        generate_table("INCB_CONSONANT", "Indic_Conjunct_Break=Consonant", to_ranges(incb_consonant)),
    )
    for table in tables:
        res.append("")
        res.extend(table)
        res.append("")
    return "\n".join(res)


def replace_if_different(filename: str, contents: str) -> None:
    if not os.path.exists(filename) or pathlib.Path(filename).read_text() != contents:
        print(f"{ 'Creating' if not os.path.exists(filename) else 'Updating' } { filename }")
        pathlib.Path(filename).write_text(contents)


py_code_header = """\
# Generated by tools/ucdprops2code.py - Do not edit

"""

if __name__ == "__main__":
    import argparse
    import urllib.request

    p = argparse.ArgumentParser(description="Generate code from Unicode properties")
    p.add_argument(
        "--data-dir",
        help="Directory containing local copies of the relevant unicode database files.  If "
        "not supplied the latest files are read from https://www.unicode.org/Public/UCD/latest/ucd/",
    )
    p.add_argument("out_file", help="File to write code to with .py extension")

    options = p.parse_args()

    assert options.out_file.endswith(".py")

    read_props(options.data_dir)

    replace_if_different(options.out_file, py_code_header + generate_python())
