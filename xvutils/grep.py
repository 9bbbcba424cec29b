"""A tiny grep supporting the ^ . * $ operators."""

import sys

_BUFSIZE = 1024


def match(re, text):
    """Return True if re matches anywhere in text."""
    if re.startswith("^"):
        return _matchhere(re[1:], text)
    return any(_matchhere(re, text[i:]) for i in range(len(text) + 1))


def _matchhere(re, text):
    if not re:
        return True
    if len(re) >= 2 and re[1] == "*":
        return _matchstar(re[0], re[2:], text)
    if re == "$":
        return not text
    if text and (re[0] == "." or re[0] == text[0]):
        return _matchhere(re[1:], text[1:])
    return False


def _matchstar(c, re, text):
    i = 0
    while True:
        if _matchhere(re, text[i:]):
            return True
        if i < len(text) and (text[i] == c or c == "."):
            i += 1
        else:
            return False


def grep(pattern, stream, out):
    """Write every complete line of stream that matches pattern.

    A trailing line without a newline is never printed, and reading
    stops once a single pending line fills the whole buffer.
    """
    pending = ""
    while True:
        room = _BUFSIZE - 1 - len(pending)
        if room <= 0:
            break
        chunk = stream.read(room)
        if not chunk:
            break
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                out.write(line + "\n")


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, files = args[0], args[1:]
    if not files:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for path in files:
        try:
            stream = open(path, encoding="utf-8", errors="surrogateescape", newline="")
        except OSError:
            sys.stdout.write(f"grep: cannot open {path}\n")
            return 1
        with stream:
            grep(pattern, stream, sys.stdout)
    return 0