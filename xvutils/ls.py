"""List files and directory entries."""

import os
import stat
import sys
from enum import IntEnum

from .printf import format as cformat

DIRSIZ = 14
_PATH_BUF = 512


class FileType(IntEnum):
    DIR = 1
    FILE = 2
    DEVICE = 3


def _file_type(mode):
    if stat.S_ISDIR(mode):
        return FileType.DIR
    if stat.S_ISREG(mode):
        return FileType.FILE
    return FileType.DEVICE


def fmtname(path):
    """Return the last path component, blank-padded to DIRSIZ."""
    name = path.rsplit("/", 1)[-1]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def ls(path, out=None):
    """Describe path, or every entry of it when it is a directory."""
    out = sys.stdout if out is None else out
    try:
        st = os.stat(path)
    except OSError:
        sys.stderr.write(f"ls: cannot open {path}\n")
        return
    kind = _file_type(st.st_mode)
    if kind is FileType.FILE:
        out.write(cformat("%s %d %d %l\n", fmtname(path), kind, st.st_ino, st.st_size))
    elif kind is FileType.DIR:
        if len(path) + 1 + DIRSIZ + 1 > _PATH_BUF:
            out.write("ls: path too long\n")
            return
        try:
            names = sorted(os.listdir(path))
        except OSError:
            sys.stderr.write(f"ls: cannot open {path}\n")
            return
        for name in [".", "..", *names]:
            entry = f"{path}/{name}"
            try:
                est = os.stat(entry)
            except OSError:
                out.write(f"ls: cannot stat {entry}\n")
                continue
            out.write(
                cformat(
                    "%s %d %d %d\n",
                    fmtname(entry),
                    _file_type(est.st_mode),
                    est.st_ino,
                    est.st_size,
                )
            )


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    for path in args or ["."]:
        ls(path)
    return 0