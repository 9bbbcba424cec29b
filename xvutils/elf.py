"""ELF64 file and program headers."""

import struct
from dataclasses import dataclass
from typing import ClassVar

ELF_MAGIC = 0x464C457F  # "\x7FELF" read as a little-endian word

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4


class ElfError(ValueError):
    """Raised for malformed ELF data."""


def _unpack(layout, data, what):
    try:
        return layout.unpack_from(bytes(data), 0)
    except struct.error as exc:
        raise ElfError(f"truncated {what}") from exc


@dataclass
class ElfHeader:
    """The file header."""

    STRUCT: ClassVar[struct.Struct] = struct.Struct("<I12sHHIQQQIHHHHHH")

    magic: int = ELF_MAGIC
    elf: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    @classmethod
    def parse(cls, data):
        """Decode a header from the start of data; the magic must match."""
        header = cls(*_unpack(cls.STRUCT, data, "ELF header"))
        if header.magic != ELF_MAGIC:
            raise ElfError(f"bad ELF magic {header.magic:#x}")
        return header

    def pack(self):
        return self.STRUCT.pack(
            self.magic, self.elf, self.type, self.machine, self.version,
            self.entry, self.phoff, self.shoff, self.flags, self.ehsize,
            self.phentsize, self.phnum, self.shentsize, self.shnum, self.shstrndx,
        )


@dataclass
class ProgramHeader:
    """A program section header."""

    STRUCT: ClassVar[struct.Struct] = struct.Struct("<IIQQQQQQ")

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    @classmethod
    def parse(cls, data):
        return cls(*_unpack(cls.STRUCT, data, "program header"))

    def pack(self):
        return self.STRUCT.pack(
            self.type, self.flags, self.off, self.vaddr,
            self.paddr, self.filesz, self.memsz, self.align,
        )


def program_headers(data):
    """Return the program headers of the ELF image in data."""
    header = ElfHeader.parse(data)
    size = ProgramHeader.STRUCT.size
    offsets = range(header.phoff, header.phoff + header.phnum * size, size)
    return [ProgramHeader.parse(data[off:off + size]) for off in offsets]