"""Tokenizer and parser for the small shell's command language."""

from dataclasses import dataclass
from typing import Union

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"
MAXARGS = 10

O_RDONLY = 0x000
O_WRONLY = 0x001
O_RDWR = 0x002
O_CREATE = 0x200
O_TRUNC = 0x400

_SINGLE = "|();&<"


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""

    def __init__(self, message, leftovers=None):
        super().__init__(message)
        self.leftovers = leftovers


@dataclass(frozen=True)
class Token:
    """A lexical token.

    kind is 'a' for a word, '+' for '>>', or the symbol character itself.
    start is the offset of the token in the line.
    """

    kind: str
    text: str
    start: int = 0


@dataclass(frozen=True)
class ExecCmd:
    argv: tuple = ()


@dataclass(frozen=True)
class RedirCmd:
    cmd: "Command"
    file: str
    mode: int
    fd: int


@dataclass(frozen=True)
class PipeCmd:
    left: "Command"
    right: "Command"


@dataclass(frozen=True)
class ListCmd:
    left: "Command"
    right: "Command"


@dataclass(frozen=True)
class BackCmd:
    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]

_REDIRECTIONS = {
    "<": (O_RDONLY, 0),
    ">": (O_WRONLY | O_CREATE | O_TRUNC, 1),
    "+": (O_WRONLY | O_CREATE, 1),
}


def _cut(line):
    return line.split("\0", 1)[0]


def tokenize(line):
    """Yield the tokens of line; a NUL character ends the line."""
    line = _cut(line)
    n = len(line)
    i = 0
    while True:
        while i < n and line[i] in WHITESPACE:
            i += 1
        if i >= n:
            return
        start = i
        c = line[i]
        if c in _SINGLE:
            i += 1
            yield Token(c, c, start)
        elif c == ">":
            i += 1
            if i < n and line[i] == ">":
                i += 1
                yield Token("+", ">>", start)
            else:
                yield Token(">", ">", start)
        else:
            while i < n and line[i] not in WHITESPACE and line[i] not in SYMBOLS:
                i += 1
            yield Token("a", line[start:i], start)


def _wrap(cmd, redirs):
    for file, mode, fd in redirs:
        cmd = RedirCmd(cmd, file, mode, fd)
    return cmd


class _Parser:
    def __init__(self, line):
        self.line = _cut(line)
        self.tokens = list(tokenize(self.line))
        self.pos = 0

    def peek(self, toks):
        if self.pos >= len(self.tokens):
            return False
        return self.tokens[self.pos].text[0] in toks

    def take(self):
        if self.pos >= len(self.tokens):
            return None
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def leftovers(self):
        if self.pos >= len(self.tokens):
            return None
        return self.line[self.tokens[self.pos].start:]

    def parse_line(self):
        cmd = self.parse_pipe()
        while self.peek("&"):
            self.take()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.take()
            cmd = ListCmd(cmd, self.parse_line())
        return cmd

    def parse_pipe(self):
        cmd = self.parse_exec()
        if self.peek("|"):
            self.take()
            cmd = PipeCmd(cmd, self.parse_pipe())
        return cmd

    def parse_redirs(self):
        redirs = []
        while self.peek("<>"):
            tok = self.take()
            target = self.take()
            if target is None or target.kind != "a":
                raise ShellSyntaxError("missing file for redirection")
            mode, fd = _REDIRECTIONS[tok.kind]
            redirs.append((target.text, mode, fd))
        return redirs

    def parse_block(self):
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.take()
        cmd = self.parse_line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.take()
        return _wrap(cmd, self.parse_redirs())

    def parse_exec(self):
        if self.peek("("):
            return self.parse_block()
        argv = []
        redirs = self.parse_redirs()
        while not self.peek("|)&;"):
            tok = self.take()
            if tok is None:
                break
            if tok.kind != "a":
                raise ShellSyntaxError("syntax")
            argv.append(tok.text)
            if len(argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            redirs.extend(self.parse_redirs())
        return _wrap(ExecCmd(tuple(argv)), redirs)


def parse_command(line):
    """Parse a whole command line into a command tree."""
    parser = _Parser(line)
    cmd = parser.parse_line()
    rest = parser.leftovers()
    if rest is not None:
        raise ShellSyntaxError("syntax", leftovers=rest)
    return cmd