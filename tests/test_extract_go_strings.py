import pytest

import extract_go_strings


@pytest.fixture(autouse=True)
def fixed_time(monkeypatch):
    monkeypatch.setattr(extract_go_strings, "format_time",
                        lambda: "2015-06-30 14:48+0200")


def test_integration(go_file, tmp_path, header, test_args):
    fname = go_file("""package main

func main() {
    // TRANSLATORS: foo comment
    //              with multiple lines
    i18n.G("foo")

    // this comment has no translators tag
    i18n.G("abc")

    // TRANSLATORS: plural
    i18n.NG("singular", "plural", 99)

    i18n.G("zz %s")
}
""")
    out_name = tmp_path / "snappy.pot"
    assert extract_go_strings.main(
        ["--output", str(out_name), "--sort-output"] + test_args +
        [fname]) == 0

    expected = header + f"""
#: {fname}:9
msgid   "abc"
msgstr  ""

#. foo comment
#. with multiple lines
#: {fname}:6
msgid   "foo"
msgstr  ""

#. plural
#: {fname}:12
msgid   "singular"
msgid_plural   "plural"
msgstr[0]  ""
msgstr[1]  ""

#: {fname}:14
#, c-format
msgid   "zz %s"
msgstr  ""

"""
    assert out_name.read_text(encoding="utf-8") == expected


def test_integration_multiple_keywords(go_file, tmp_path, header):
    fname = go_file("""package main

func main() {
    // TRANSLATORS: foo comment
    //              with multiple lines
    i18n.G("foo")
    i18n.Translate("goo foo")

    // this comment has no translators tag
    i18n.G("abc")
    i18n.Translate("goo abc")

    // TRANSLATORS: plural
    i18n.NG("singular", "plural", 99)
    i18n.TranslatePlural("one", "many", 3)

    i18n.G("zz %s")
    i18n.Translate("yy %s")
}
""")
    out_name = tmp_path / "snappy.pot"
    assert extract_go_strings.main([
        "--output", str(out_name),
        "--sort-output",
        "--keyword", "i18n.G,i18n.Translate",
        "--keyword-plural", "i18n.NG,i18n.TranslatePlural",
        "--msgid-bugs-address", "snappy-devel@lists.ubuntu.com",
        "--package-name", "snappy",
        fname,
    ]) == 0

    expected = header + f"""
#: {fname}:10
msgid   "abc"
msgstr  ""

#. foo comment
#. with multiple lines
#: {fname}:6
msgid   "foo"
msgstr  ""

#: {fname}:11
msgid   "goo abc"
msgstr  ""

#: {fname}:7
msgid   "goo foo"
msgstr  ""

#: {fname}:15
msgid   "one"
msgid_plural   "many"
msgstr[0]  ""
msgstr[1]  ""

#. plural
#: {fname}:14
msgid   "singular"
msgid_plural   "plural"
msgstr[0]  ""
msgstr[1]  ""

#: {fname}:18
#, c-format
msgid   "yy %s"
msgstr  ""

#: {fname}:17
#, c-format
msgid   "zz %s"
msgstr  ""

"""
    assert out_name.read_text(encoding="utf-8") == expected


def test_two_calls_end_to_end(go_file, capsys, header, test_args):
    fname = go_file("""package main

func main() {
    // TRANSLATORS: greeting
    i18n.G("hello")
    x := 1
    y := 2
    z := 3
    w := 4
    _ = x + y + z + w

    i18n.NG("%d file", "%d files", n)
}
""")
    assert extract_go_strings.main(test_args + [fname]) == 0

    assert capsys.readouterr().out == header + f"""
#. greeting
#: {fname}:5
msgid   "hello"
msgstr  ""

#: {fname}:12
#, c-format
msgid   "%d file"
msgid_plural   "%d files"
msgstr[0]  ""
msgstr[1]  ""

"""


def test_quotes_in_raw_and_interpreted_strings(go_file, capsys, header,
                                               test_args):
    fname = go_file("""package main

func main() {
    i18n.G(` foo "bar"`)
    i18n.G("foo \\"bar\\"")
}
""")
    assert extract_go_strings.main(test_args + ["--no-location", fname]) == 0

    assert capsys.readouterr().out == header + r"""
msgid   " foo \"bar\""
msgstr  ""

msgid   "foo \"bar\""
msgstr  ""

"""


def test_add_comments_keeps_untagged(go_file, capsys, test_args):
    fname = go_file("""package main

func main() {
    // this comment has no translators tag
    i18n.G("abc")
}
""")
    assert extract_go_strings.main(test_args + ["-c", fname]) == 0
    assert "#. this comment has no translators tag\n" in \
        capsys.readouterr().out


def test_custom_comments_tag(go_file, capsys, test_args):
    fname = go_file("""package main

func main() {
    // NOTE: short form
    i18n.G("abc")
}
""")
    assert extract_go_strings.main(
        test_args + ["--add-comments-tag", "NOTE:", fname]) == 0
    assert "#. short form\n" in capsys.readouterr().out


def test_files_from(go_file, tmp_path, capsys, test_args):
    first = go_file('i18n.G("first")\n', name="first.go")
    second = go_file('i18n.G("second")\n', name="second.go")
    listing = tmp_path / "POTFILES.in"
    listing.write_text(f"# sources\n{second}\n\n", encoding="utf-8")

    assert extract_go_strings.main(
        test_args + ["--files-from", str(listing), first]) == 0
    out = capsys.readouterr().out
    assert out.index('msgid   "first"') < out.index('msgid   "second"')


def test_syntax_error_writes_nothing(go_file, tmp_path, test_args):
    good = go_file('i18n.G("foo")\n', name="good.go")
    bad = go_file('i18n.G("foo"\n', name="bad.go")
    out_name = tmp_path / "out.pot"

    assert extract_go_strings.main(
        test_args + ["-o", str(out_name), good, bad]) == 1
    assert not out_name.exists()


def test_missing_input_file(tmp_path, test_args):
    out_name = tmp_path / "out.pot"
    assert extract_go_strings.main(
        test_args + ["-o", str(out_name), str(tmp_path / "nope.go")]) == 1
    assert not out_name.exists()


def test_unwritable_output(go_file, tmp_path, test_args):
    fname = go_file('i18n.G("foo")\n')
    out_name = tmp_path / "missing-dir" / "out.pot"
    assert extract_go_strings.main(
        test_args + ["-o", str(out_name), fname]) == 1


def test_no_input_files_is_usage_error(test_args):
    with pytest.raises(SystemExit) as err:
        extract_go_strings.main(test_args)
    assert err.value.code == 2


def test_debug_loglevel_reports_skipped_calls(go_file, capsys, test_args):
    fname = go_file('i18n.G("")\ni18n.G("a")\n')
    assert extract_go_strings.main(
        test_args + ["--loglevel", "DEBUG", fname]) == 0
    err = capsys.readouterr().err
    assert f"{fname}:1: skipping empty msgid" in err
    assert f"{fname}: 2 marker call(s)" in err
