import pytest

from gettext_extractor.message import Catalog
from gettext_extractor.options import ExtractOptions


HEADER = r"""# SOME DESCRIPTIVE TITLE.
# Copyright (C) YEAR THE PACKAGE'S COPYRIGHT HOLDER
# This file is distributed under the same license as the PACKAGE package.
# FIRST AUTHOR <EMAIL@ADDRESS>, YEAR.
#
#, fuzzy
msgid   ""
msgstr  "Project-Id-Version: snappy\n"
        "Report-Msgid-Bugs-To: snappy-devel@lists.ubuntu.com\n"
        "POT-Creation-Date: 2015-06-30 14:48+0200\n"
        "PO-Revision-Date: YEAR-MO-DA HO:MI+ZONE\n"
        "Last-Translator: FULL NAME <EMAIL@ADDRESS>\n"
        "Language-Team: LANGUAGE <LL@li.org>\n"
        "Language: \n"
        "MIME-Version: 1.0\n"
        "Content-Type: text/plain; charset=CHARSET\n"
        "Content-Transfer-Encoding: 8bit\n"
"""

TEST_ARGS = [
    "--keyword", "i18n.G",
    "--keyword-plural", "i18n.NG",
    "--msgid-bugs-address", "snappy-devel@lists.ubuntu.com",
    "--package-name", "snappy",
]


@pytest.fixture
def options():
    return ExtractOptions(
        no_location=False,
        comments_tag="TRANSLATORS:",
        keywords=("i18n.G",),
        keywords_plural=("i18n.NG",),
        sort_output=True,
        package_name="snappy",
        msgid_bugs_address="snappy-devel@lists.ubuntu.com",
    )


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def go_file(tmp_path):
    """Write Go source to a temporary foo.go and return its path."""
    def make(content, name="foo.go"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return make


@pytest.fixture
def header():
    return HEADER


@pytest.fixture
def test_args():
    return list(TEST_ARGS)
