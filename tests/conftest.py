"""Shared fixtures: synthetic little-endian ELF32 buffers built with struct."""

from __future__ import annotations

import struct

import pytest


EHDR_FORMAT = "<HHIIIIIHHHHHH"
PHDR_FORMAT = "<IIIIIIII"


def make_ident(
    magic: bytes = b"\x7fELF",
    elf_class: int = 1,
    encoding: int = 1,
    version: int = 1,
    os_abi: int = 0,
    abi_version: int = 0,
) -> bytes:
    return magic + bytes([elf_class, encoding, version, os_abi, abi_version]) + b"\x00" * 7


def make_header(
    file_type: int = 2,
    machine: int = 3,
    entry: int = 0x08048000,
    phoff: int = 52,
    shoff: int = 0,
    flags: int = 0,
    ehsize: int = 52,
    phentsize: int = 32,
    phnum: int = 1,
    shentsize: int = 40,
    shnum: int = 0,
    shstrndx: int = 0,
) -> bytes:
    return struct.pack(
        EHDR_FORMAT,
        file_type, machine, 1, entry, phoff, shoff, flags,
        ehsize, phentsize, phnum, shentsize, shnum, shstrndx,
    )


def make_phdr(
    p_type: int = 1,
    offset: int = 0,
    vaddr: int = 0x08048000,
    paddr: int = 0x08048000,
    filesz: int = 0x100,
    memsz: int = 0x100,
    flags: int = 5,
    align: int = 0x1000,
) -> bytes:
    return struct.pack(PHDR_FORMAT, p_type, offset, vaddr, paddr, filesz, memsz, flags, align)


def make_elf(phdrs: list[bytes] | None = None, ident: bytes | None = None, **header) -> bytes:
    """Ident + header + program headers laid out contiguously at offset 52."""
    if phdrs is None:
        phdrs = [make_phdr()]
    header.setdefault("phnum", len(phdrs))
    return (ident or make_ident()) + make_header(**header) + b"".join(phdrs)


@pytest.fixture
def worked_example() -> bytes:
    """EXEC, Intel 80386, entry 0x08048000, one LOAD segment."""
    return make_elf()


@pytest.fixture
def multi_segment() -> bytes:
    phdrs = [
        make_phdr(p_type=6, offset=0x34, vaddr=0x08048034, paddr=0x08048034,
                  filesz=0x60, memsz=0x60, flags=4, align=4),
        make_phdr(p_type=3, offset=0x94, vaddr=0x08048094, paddr=0x08048094,
                  filesz=0x13, memsz=0x13, flags=4, align=1),
        make_phdr(),
        make_phdr(p_type=0x6474E551, offset=0, vaddr=0, paddr=0,
                  filesz=0, memsz=0, flags=6, align=0x10),
    ]
    return make_elf(phdrs)


@pytest.fixture
def elf_file(tmp_path, worked_example):
    path = tmp_path / "sample.elf"
    path.write_bytes(worked_example)
    return path
