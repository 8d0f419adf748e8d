#!/usr/bin/env python3

"Command line tools for exploring and testing :mod:`textcell`"

from __future__ import annotations

from typing import Any

import logging

from . import (
    GRAPHEME_MAX_BACKTRACK,
    category_name,
    codepoint_width,
    decode,
    encode,
    grapheme_iter,
    grapheme_iter_with_offsets,
    grapheme_width,
    next_grapheme,
    prev_grapheme,
    string_width,
    truncate,
    truncate_graphemes,
    unicode_version,
    validate,
)

log = logging.getLogger("textcell")


if __name__ == "__main__":
    import argparse
    import atexit
    import sys

    # We output text non unicode compatible can't handle
    sys.stdout.reconfigure(errors="replace")

    parser = argparse.ArgumentParser(prog="python3 -m textcell")
    parser.add_argument(
        "-cc",
        "--compact-codepoints",
        dest="compact_codepoints",
        action="store_true",
        default=False,
        help="Only show hex codepoint values, not full details",
    )
    parser.add_argument("--debug", action="store_true", default=False, help="Log debug messages to stderr")

    subparsers = parser.add_subparsers(required=True)
    p = subparsers.add_parser("breaktest", help="Run Unicode grapheme break test file")
    p.set_defaults(function="breaktest")
    p.add_argument("-v", default=False, action="store_true", dest="verbose", help="Show each line as it is tested")
    p.add_argument("--fail-fast", default=False, action="store_true", help="Exit on first test failure")
    p.add_argument(
        "file",
        help="GraphemeBreakTest.txt.  It can be downloaded from https://www.unicode.org/Public/UCD/latest/ucd/auxiliary/",
        type=argparse.FileType("rt", encoding="utf8"),
    )

    p = subparsers.add_parser("show", help="Show grapheme clusters of provided text")
    p.set_defaults(function="show")
    p.add_argument("--text-file", type=argparse.FileType("rb"))
    p.add_argument(
        "--reverse",
        default=False,
        action="store_true",
        help="Find clusters moving backwards from the end of the text",
    )
    p.add_argument(
        "--max-backtrack",
        type=int,
        default=GRAPHEME_MAX_BACKTRACK,
        help="With --reverse, how many codepoints to step back before scanning forward.  0 is unlimited [%(default)s]",
    )
    p.add_argument("text", nargs="*", help="Text to segment unless --text-file used")

    p = subparsers.add_parser("codepoint", help="Show information about codepoints")
    p.add_argument("text", nargs="+", help="If a hex constant then use that value, otherwise treat as text")
    p.set_defaults(function="codepoint")

    p = subparsers.add_parser("width", help="Show how many columns text occupies")
    p.set_defaults(function="width")
    p.add_argument("--truncate", type=int, help="Also show the text truncated to this many columns")
    p.add_argument(
        "--graphemes",
        default=False,
        action="store_true",
        help="Truncate on grapheme cluster boundaries rather than codepoints",
    )
    p.add_argument(
        "--compare-wcwidth",
        default=False,
        action="store_true",
        help="Also show the width according to the wcwidth package",
    )
    p.add_argument("text", nargs="+", help="Text to measure")

    p = subparsers.add_parser("validate", help="Check files are valid UTF-8")
    p.set_defaults(function="validate")
    p.add_argument("files", nargs="+", type=argparse.FileType("rb"), help="Files to check")

    p = subparsers.add_parser(
        "benchmark",
        help="Measure how long segmentation takes to iterate each grapheme cluster",
    )
    p.set_defaults(function="benchmark")
    p.add_argument(
        "--size",
        type=float,
        default=50,
        help="How many million characters (codepoints) of text to use [%(default)s]",
    )
    p.add_argument("--seed", type=int, default=0, help="Random seed to use [%(default)s]")
    p.add_argument(
        "--others",
        help="A comma separated list of other packages to also benchmark.  Use 'all' to get all available ones.  Supported are grapheme, uniseg",
    )
    p.add_argument(
        "text_file",
        type=argparse.FileType("rt", encoding="utf8"),
        help="""Text source to use.

        The provided text will be repeatedly duplicated and shuffled then
        appended until the sized amount of text is available.""",
    )

    options = parser.parse_args()

    if options.debug:
        logging.basicConfig(level=logging.DEBUG)

    def codepoint_details(cp: int, counter=None) -> str:
        if options.compact_codepoints:
            return f"U+{cp:04x}"
        counter = f"#{counter}:" if counter is not None else ""
        return "{" + f"{counter}U+{cp:04X} width {codepoint_width(cp)} : {' | '.join(category_name(cp))}" + "}"

    def show_cluster(counter: int, begin: int, end: int, text: bytes):
        cluster = text[begin:end]
        print(
            f"#{ counter } span { begin }-{ end } bytes { end - begin } width { grapheme_width(text, begin, end) }"
            f" value: { cluster.decode('utf8', errors='replace') }"
        )
        offset = begin
        while offset < end:
            cp, consumed = decode(text, offset, end)
            print(" ", codepoint_details(cp))
            offset += consumed

    if options.function == "show":
        if not options.text_file and not options.text:
            parser.error("You must specify at least --text-file or text arguments")

        text = b""
        if options.text_file:
            text += options.text_file.read()
            options.text_file.close()
        if options.text:
            if text:
                text += b" "
            text += " ".join(options.text).encode("utf8", errors="surrogateescape")

        if options.reverse:
            spans: list[tuple[int, int]] = []
            end = len(text)
            while end > 0:
                begin = prev_grapheme(text, end, max_backtrack=options.max_backtrack)
                spans.append((begin, end))
                end = begin
            for counter, (begin, end) in enumerate(reversed(spans)):
                show_cluster(counter, begin, end, text)
        else:
            for counter, (begin, end, _) in enumerate(grapheme_iter_with_offsets(text)):
                show_cluster(counter, begin, end, text)

    elif options.function == "breaktest":
        import difflib

        # stop debug interpreter whining about file not being closed
        atexit.register(lambda: options.file.close())

        ok = "÷"
        not_ok = "×"
        passed: int = 0
        skipped: int = 0
        fails: list[str] = []
        for line_num, line in enumerate(options.file, 1):
            orig_line = line
            if not line.strip() or line.startswith("#"):
                continue
            line = line.split("#")[0].strip().split()
            if options.verbose:
                print(f"{ line_num }: { orig_line.rstrip() }")
            assert line[0] == ok, f"Line { line_num } doesn't start with { ok }!"
            assert line[-1] == ok, f"Line { line_num } doesn't end with { ok }!"
            line = line[1:]
            text = b""
            codepoints: list[int] = []
            breaks: list[int] = []
            unencodable = False
            while line:
                c = line.pop(0)
                if c == not_ok:
                    continue
                if c == ok:
                    breaks.append(len(text))
                    continue
                cp = int(c, 16)
                encoded = encode(cp)
                if not encoded:
                    unencodable = True
                codepoints.append(cp)
                text += encoded

            # surrogates can't be represented in UTF-8
            if unencodable:
                log.debug("Skipping line %d containing unencodable codepoints", line_num)
                skipped += 1
                continue

            def add_failinfo():
                fails.append(orig_line.strip())
                fails.append(" ".join(codepoint_details(cp, counter) for counter, cp in enumerate(codepoints)))
                fails.append("")

            offset = 0
            seen: list[int] = []
            lf = len(fails)
            while offset < len(text):
                span = next_grapheme(text, offset)
                if span not in breaks:
                    fails.append(
                        f"Line { line_num } got unexpected break at { span } - expected are { breaks }.  Seen { seen }"
                    )
                    add_failinfo()
                    break
                seen.append(span)
                offset = span
            if options.fail_fast and fails:
                break
            if len(fails) != lf:
                continue
            if set(seen) != set(breaks):
                fails.append(f"Line { line_num } got breaks at { seen } expected at { breaks }")
                if max(len(seen), len(breaks)) > 5:
                    sm = difflib.SequenceMatcher(a=seen, b=breaks)

                    for tag, a1, a2, b1, b2 in sm.get_opcodes():
                        if tag == "equal":
                            continue
                        if a1 != a2:
                            fails[-1] += f"\n       seen {tag} {seen[a1:a2]}"
                        if b1 != b2:
                            fails[-1] += f"\n    expected {tag} {breaks[b1:b2]}"

                add_failinfo()
                if options.fail_fast:
                    break
                continue
            passed += 1

        if fails:
            print(f"{ len(fails)//4 } tests failed, {passed:,} passed:", file=sys.stderr)
            for fail in fails:
                print(fail, file=sys.stderr)
            sys.exit(2)
        else:
            print(f"{passed:,} passed" + (f", {skipped:,} skipped" if skipped else ""))

    elif options.function == "codepoint":
        codepoints = []
        for t in options.text:
            try:
                codepoints.append(int(t, 16))
            except ValueError:
                codepoints.extend(ord(c) for c in t)

        for i, cp in enumerate(codepoints):
            print(f"#{ i } U+{ cp:04X} - ", end="")
            try:
                print(chr(cp))
            except (UnicodeEncodeError, ValueError):
                print()
            if not 0 <= cp <= 0x10FFFF:
                print("Not a valid codepoint")
                print()
                continue
            encoded = encode(cp)
            print(
                f"Width: { codepoint_width(cp) }  "
                f"Properties: { ' | '.join(category_name(cp)) }  "
                f"UTF-8: { encoded.hex(' ').upper() if encoded else '(not encodable)' }"
            )
            print()

    elif options.function == "width":
        if options.compare_wcwidth:
            import wcwidth

        for t in options.text:
            text = t.encode("utf8", errors="surrogateescape")
            line = f"{ string_width(text) }"
            if options.compare_wcwidth:
                line += f"  wcwidth: { wcwidth.wcswidth(t) }"
            if options.truncate is not None:
                func = truncate_graphemes if options.graphemes else truncate
                offset = func(text, options.truncate)
                line += f"  truncated: { text[:offset].decode('utf8', errors='replace') }"
            print(f"{ line }  text: { t }")

    elif options.function == "validate":
        bad = 0
        for f in options.files:
            valid, offset = validate(f.read())
            f.close()
            if valid:
                print(f"{ f.name }: ok")
            else:
                print(f"{ f.name }: invalid UTF-8 at byte offset { offset }")
                bad += 1
        if bad:
            sys.exit(1)

    elif options.function == "benchmark":
        import random
        import time

        random.seed(options.seed)

        base_text = options.text_file.read()
        options.text_file.close()
        text = base_text

        # codepoints exercising the less common rules
        interesting = "".join(
            chr(int(x, 16))
            for x in """0085 00A0 00AD 0300 0308 034F 0600 0903 0915 0924 092F 093C
                094D 0A03 0D4E 1100 1160 11A8 200D 231A 2701 AC00 AC01 1F1E6 1F1E7
                1F1E8 1F1E9 1F3FF 1F476 1F6D1""".split()
        )

        # make interesting be 0.1% of base text
        base_text += interesting * int(len(interesting) / (len(base_text) * 0.001))

        # the last field says whether the function takes UTF-8 bytes
        tests: list[Any] = [("textcell", unicode_version, grapheme_iter, True)]

        if options.others == "all":
            ok = []
            try:
                import uniseg

                ok.append("uniseg")
            except ImportError:
                pass
            try:
                import grapheme

                ok.append("grapheme")
            except ImportError:
                pass
            options.others = ",".join(ok) if ok else None

        if options.others:
            for package in options.others.split(","):
                package = package.strip()
                if package == "grapheme":
                    import grapheme
                    import grapheme.finder

                    tests.append(("grapheme", grapheme.UNICODE_VERSION, grapheme.finder.GraphemeIterator, False))
                elif package == "uniseg":
                    import uniseg
                    import uniseg.graphemecluster

                    tests.append(("uniseg", uniseg.unidata_version, uniseg.graphemecluster.grapheme_clusters, False))
                else:
                    sys.exit(f"Unknown third party package to benchmark '{package}'")

        print(f"Expanding text to { options.size } million chars ...", end="", flush=True)
        while len(text) < options.size * 1_000_000:
            text += "".join(random.sample(base_text, len(base_text)))
        text = text[: int(options.size * 1_000_000)]
        encoded = text.encode("utf8")

        print("\nResults in codepoints per second processed, returning each cluster.  Higher is faster.")

        for name, version, func, wants_bytes in tests:
            print(f"\nBenchmarking {name:20s} unicode version { version }")
            count = 0
            data = encoded if wants_bytes else text
            start = time.process_time_ns()
            exc = None
            try:
                for _ in func(data):
                    count += 1
            except Exception as exc2:
                exc = exc2
            end = time.process_time_ns()
            if exc is not None:
                print(f"       EXCEPTION {exc!r}")
            else:
                seconds = (end - start) / 1e9
                print(f"codepoints per second: { int(len(text)/seconds): 12,d}    clusters: {count: 11,d}")
