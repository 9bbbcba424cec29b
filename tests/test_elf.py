import pytest

from xvutils.elf import (
    ELF_MAGIC,
    ELF_PROG_FLAG_READ,
    ELF_PROG_FLAG_WRITE,
    ELF_PROG_LOAD,
    ElfError,
    ElfHeader,
    ProgramHeader,
    program_headers,
)


def test_header_starts_with_magic_bytes():
    assert ElfHeader().pack()[:4] == b"\x7fELF"


def test_header_size():
    assert len(ElfHeader().pack()) == 64


def test_header_round_trip():
    header = ElfHeader(entry=0x1000, phoff=64, phnum=3, machine=243, elf=b"\x02\x01\x01" + bytes(9))
    assert ElfHeader.parse(header.pack()) == header


def test_bad_magic_raises():
    data = ElfHeader(magic=0x12345678).pack()
    with pytest.raises(ElfError):
        ElfHeader.parse(data)


def test_short_header_raises():
    with pytest.raises(ElfError):
        ElfHeader.parse(ElfHeader().pack()[:20])


def test_program_header_round_trip():
    ph = ProgramHeader(
        type=ELF_PROG_LOAD,
        flags=ELF_PROG_FLAG_READ | ELF_PROG_FLAG_WRITE,
        off=0x1000, vaddr=0x2000, paddr=0x2000, filesz=10, memsz=20, align=4096,
    )
    assert ProgramHeader.parse(ph.pack()) == ph


def test_short_program_header_raises():
    with pytest.raises(ElfError):
        ProgramHeader.parse(b"\x01\x00")


def test_program_headers_from_image():
    phs = [
        ProgramHeader(type=ELF_PROG_LOAD, vaddr=0, filesz=5, memsz=5),
        ProgramHeader(type=ELF_PROG_LOAD, vaddr=0x1000, filesz=7, memsz=9),
    ]
    header = ElfHeader(phoff=len(ElfHeader().pack()), phnum=len(phs))
    image = header.pack() + b"".join(ph.pack() for ph in phs)
    assert program_headers(image) == phs


def test_program_headers_truncated_image_raises():
    header = ElfHeader(phoff=len(ElfHeader().pack()), phnum=2)
    image = header.pack() + ProgramHeader().pack()
    with pytest.raises(ElfError):
        program_headers(image)


def test_default_magic_constant():
    assert ElfHeader().magic == ELF_MAGIC