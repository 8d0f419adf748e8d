#!/usr/bin/env python3

from __future__ import annotations

import os
import re
import sys
import pathlib

from setuptools import setup, Command

project_urls = {
    "Documentation": "https://textcell.readthedocs.io/",
    "Issue Tracker": "https://github.com/textcell/textcell/issues",
    "Code": "https://github.com/textcell/textcell",
}


def read_whole_file(name, mode):
    assert mode == "rt"
    f = open(name, mode, encoding="utf8")
    try:
        return f.read()
    finally:
        f.close()


# work out version number
version = re.search(
    r'^__version__ = "(?P<version>[^"]+)"', read_whole_file(os.path.join("textcell", "__init__.py"), "rt"), re.M
).group("version")


class run_tests(Command):
    description = "Run test suite"

    # I did originally try using 'verbose' as the option but it turns
    # out that is builtin and defaults to 1 (--quiet is also builtin
    # and forces verbose to 0)
    user_options = [
        ("show-tests", "v", "Show each test being run"),
        ("locals", None, "Show local variables in test failure"),
    ]

    # see if you can find boolean_options documented anywhere
    boolean_options = ["show-tests", "locals"]

    def initialize_options(self):
        self.show_tests = 0
        self.locals = False

    def finalize_options(self):
        pass

    def run(self):
        import unittest

        suite = unittest.TestLoader().discover("textcell.tests", top_level_dir=".")
        # verbosity of zero doesn't print anything, one prints a dot
        # per test and two prints each test name
        result = unittest.TextTestRunner(verbosity=self.show_tests + 1, tb_locals=self.locals).run(suite)
        if not result.wasSuccessful():
            sys.exit(1)


if __name__ == "__main__":
    setup(
        name="textcell",
        version=version,
        python_requires=">=3.10",
        description="UTF-8 decoding, terminal width, and grapheme clusters working directly on bytes",
        long_description=pathlib.Path("README.rst").read_text(encoding="utf8"),
        long_description_content_type="text/x-rst",
        url=project_urls["Code"],
        project_urls=project_urls,
        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Developers",
            "Programming Language :: Python :: 3",
            "Topic :: Text Processing",
            "Topic :: Terminals",
        ],
        keywords=["unicode", "utf-8", "grapheme", "wcwidth", "terminal"],
        platforms="any",
        packages=["textcell", "textcell.tests"],
        package_data={"textcell": ["py.typed"]},
        extras_require={
            "compare": ["wcwidth"],
            "benchmark": ["grapheme", "uniseg"],
            "test": ["wcwidth"],
        },
        cmdclass={
            "test": run_tests,
        },
    )
