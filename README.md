# xvutils

A small collection of Unix-style command-line tools, together with pure-Python
models of some data structures a tiny RISC-V teaching kernel works with.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool is installed as a console script with an `xv-` prefix so it never
shadows the system's own commands.

| Command      | What it does                                                          |
|--------------|-----------------------------------------------------------------------|
| `xv-cat`     | copy files (or standard input) to standard output                     |
| `xv-echo`    | print its arguments separated by spaces                               |
| `xv-grep`    | print lines matching a pattern (`^`, `.`, `*` and `$` only)           |
| `xv-ls`      | list a file, or a directory's entries, with type, inode number and size |
| `xv-ln`      | create a hard link                                                    |
| `xv-mkdir`   | create directories, stopping at the first failure                     |
| `xv-rm`      | remove files or empty directories, stopping at the first failure      |
| `xv-primes`  | print the primes below 36 found by a staged sieve                     |

`xv-ls` prints type numbers 1 for a directory, 2 for a regular file and 3 for
anything else; a directory listing starts with `.` and `..` followed by the
entries in sorted order.

Examples:

```
xv-grep '^def ' xvutils/grep.py
xv-echo hello world
xv-ls .
xv-primes
```

## Library

The same functionality is available from Python.

### Text tools

```python
from xvutils.grep import match
from xvutils.printf import format

match("^ab*c$", "abbbc")             # True
format("%d %x %s", 255, 255, "ok")   # "255 FF ok"
```

`xvutils.printf` understands `%d`, `%l`, `%x`, `%p`, `%s`, `%c` and `%%`;
`fprintf` writes to a given stream and `printf` to standard output.
`xvutils.grep.grep(pattern, stream, out)` filters a text stream, and
`xvutils.fileutils.cat(stream, out)` copies one.

### Shell parsing

`xvutils.shparse.parse_command` turns a command line into a tree of
`ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd` and `BackCmd` nodes;
`tokenize` yields the `Token` stream. Malformed input raises
`ShellSyntaxError`.

```python
from xvutils.shparse import parse_command

tree = parse_command("cat < in | grep x > out; echo done &")
```

### A first-fit allocator

`xvutils.umalloc.Heap` simulates a circular free-list allocator over an arena
of at most `limit` bytes; `malloc` raises `OutOfMemory` when the limit is
reached, `free` returns a block, and `free_blocks` shows the current free list.

### Kernel data structures

- `xvutils.memlayout` – the physical memory map and helpers such as
  `kstack`, `clint_mtimecmp`, `plic_sclaim`, `pg_round_up` and
  `pg_round_down`.
- `xvutils.elf` – `ElfHeader` and `ProgramHeader` parsing and packing, and
  `program_headers` to list the segments of an image; bad input raises
  `ElfError`.
- `xvutils.virtio` – register offsets (`MmioRegister`), status bits
  (`DeviceStatus`), feature bits (`BlkFeature`) and binary layouts of the
  virtqueue structures (`VirtqDesc`, `VirtqAvail`, `VirtqUsed`,
  `VirtqUsedElem`, `VirtioBlkReq`).

### Random numbers

`xvutils.prng.ParkMiller` is the minimal-standard Park–Miller generator;
`do_rand` performs a single step from a given state.

```python
from xvutils.prng import ParkMiller

gen = ParkMiller(31)
values = [gen.next() for _ in range(5)]
```

## What it does not do

- There is no word-count tool and no process tools (no kill, sleep or
  fork-and-pipe demonstrations).
- The shell support only parses command lines; nothing runs the parsed
  commands.
- There is no page-table or virtual-memory simulation; `xvutils.memlayout`
  only describes addresses.