import io

import pytest

from xvutils.grep import grep, main, match


@pytest.mark.parametrize(
    "re, text, expected",
    [
        ("^ab", "abc", True),
        ("^ab", "cab", False),
        ("b.d", "abcd", True),
        ("a*b", "b", True),
        ("x$", "abx", True),
        ("x$", "xab", False),
        ("", "", True),
        ("^$", "", True),
        ("^$", "a", False),
        (".*z", "abc", False),
    ],
)
def test_match(re, text, expected):
    assert match(re, text) is expected


def test_grep_prints_matching_complete_lines():
    out = io.StringIO()
    grep("foo", io.StringIO("foo\nbar\nfood\nlast foo"), out)
    assert out.getvalue() == "foo\nfood\n"


def test_grep_anchor():
    out = io.StringIO()
    grep("^b", io.StringIO("abc\nbcd\n"), out)
    assert out.getvalue() == "bcd\n"


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "usage: grep pattern [file ...]\n"


def test_main_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "nope")
    assert main(["x", missing]) == 1
    assert capsys.readouterr().out == f"grep: cannot open {missing}\n"


def test_main_on_file(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("one\ntwo\nthree\n")
    assert main(["t", str(path)]) == 0
    assert capsys.readouterr().out == "two\nthree\n"