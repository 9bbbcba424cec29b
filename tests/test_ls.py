import io

from xvutils.ls import DIRSIZ, FileType, fmtname, ls, main


def test_fmtname_pads_short_names():
    result = fmtname("a/b/hello")
    assert len(result) == DIRSIZ
    assert result.rstrip() == "hello"


def test_fmtname_keeps_long_names():
    assert fmtname("x" * 20) == "x" * 20
    assert fmtname("dir/" + "y" * DIRSIZ) == "y" * DIRSIZ


def test_ls_file(tmp_path):
    f = tmp_path / "file.txt"
    f.write_bytes(b"12345")
    out = io.StringIO()
    ls(str(f), out)
    parts = out.getvalue().split()
    assert parts[0] == "file.txt"
    assert parts[1] == str(int(FileType.FILE))
    assert parts[3] == "5"


def test_ls_directory_lists_dot_entries(tmp_path):
    (tmp_path / "a").write_text("abc")
    (tmp_path / "sub").mkdir()
    out = io.StringIO()
    ls(str(tmp_path), out)
    rows = [line.split() for line in out.getvalue().splitlines()]
    names = [row[0] for row in rows]
    assert names == [".", "..", "a", "sub"]
    types = {row[0]: row[1] for row in rows}
    assert types["sub"] == str(int(FileType.DIR))
    assert types["a"] == str(int(FileType.FILE))


def test_ls_missing(tmp_path, capsys):
    missing = str(tmp_path / "nothing")
    ls(missing, io.StringIO())
    assert capsys.readouterr().err == f"ls: cannot open {missing}\n"


def test_main_returns_zero(tmp_path, capsys):
    (tmp_path / "x").write_text("")
    assert main([str(tmp_path / "x")]) == 0
    assert capsys.readouterr().out.startswith("x")