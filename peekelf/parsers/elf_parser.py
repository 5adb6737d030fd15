"""
ELF32 Header Decoder
=====================

Manual, cursor-based decoder for the fixed-layout header region of a
little-endian ELF32 object file: the file header and the program header
table.  Section headers, symbols, relocations and dynamic-linking data
are out of scope.

Decoding is pure and reentrant: no I/O, no logging, no shared state.
Each call either returns a fully validated structure or raises a single
:class:`~peekelf.core.errors.ElfParseError` subclass; partial results
are never returned.

Layout (offsets relative to the start of the file)::

    0   e_ident[16]     verified by peekelf.parsers.ident
    16  e_type          u16
    18  e_machine       u16
    20  e_version       u32   (skipped, already verified in e_ident)
    24  e_entry         u32
    28  e_phoff         u32
    32  e_shoff         u32
    36  e_flags         u32   (skipped)
    40  e_ehsize        u16
    42  e_phentsize     u16
    44  e_phnum         u16
    46  e_shentsize     u16
    48  e_shnum         u16
    50  e_shstrndx      u16

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
    - Linux man page: elf(5).
"""

from __future__ import annotations

from peekelf.core.errors import (
    EntrySizeMismatchError,
    UnsupportedFileTypeError,
    UnsupportedSegmentTypeError,
)
from peekelf.core.models import (
    ElfImage,
    FileHeader,
    FileType,
    Machine,
    OsAbi,
    ProgramHeaderEntry,
    SegmentType,
)
from peekelf.parsers.cursor import ByteCursor
from peekelf.parsers.ident import EI_NIDENT, verify_identification


# ---------------------------------------------------------------------------
# ELF32 structure sizes
# ---------------------------------------------------------------------------

ELF32_EHDR_SIZE: int = 52
ELF32_EHDR_BODY_SIZE: int = ELF32_EHDR_SIZE - EI_NIDENT  # 36
ELF32_PHDR_SIZE: int = 32

_FILE_TYPES: dict[int, FileType] = {ft.value: ft for ft in FileType}
_SEGMENT_TYPES: dict[int, SegmentType] = {st.value: st for st in SegmentType}


# ---------------------------------------------------------------------------
# Code mapping
# ---------------------------------------------------------------------------

def _file_type(code: int) -> FileType:
    try:
        return _FILE_TYPES[code]
    except KeyError:
        raise UnsupportedFileTypeError(code) from None


def _segment_type(code: int) -> SegmentType:
    try:
        return _SEGMENT_TYPES[code]
    except KeyError:
        raise UnsupportedSegmentTypeError(code) from None


# ---------------------------------------------------------------------------
# File header
# ---------------------------------------------------------------------------

def decode_file_header(data: bytes, os_abi: int, abi_version: int) -> FileHeader:
    """Decode the 36 bytes that follow ``e_ident`` into a :class:`FileHeader`.

    Args:
        data: The complete input buffer (decoding starts at offset 16).
        os_abi: OS/ABI byte returned by the identification verifier.
        abi_version: ABI-version byte returned by the identification verifier.

    Raises:
        UnsupportedFileTypeError: ``e_type`` is not NONE/REL/EXEC/DYN/CORE.
        OutOfBoundsError: The buffer ends before the header does.
    """
    cursor = ByteCursor(data, offset=EI_NIDENT)

    file_type = _file_type(cursor.read_u16())
    machine = cursor.read_u16()
    cursor.skip(4)  # e_version
    entry = cursor.read_u32()
    phoff = cursor.read_u32()
    shoff = cursor.read_u32()
    cursor.skip(4)  # e_flags
    ehsize = cursor.read_u16()
    phentsize = cursor.read_u16()
    phnum = cursor.read_u16()
    shentsize = cursor.read_u16()
    shnum = cursor.read_u16()
    shstrndx = cursor.read_u16()

    return FileHeader(
        os_abi=OsAbi(code=os_abi),
        abi_version=abi_version,
        file_type=file_type,
        machine=Machine(code=machine),
        entry=entry,
        program_header_offset=phoff,
        section_header_offset=shoff,
        header_size=ehsize,
        program_header_entry_size=phentsize,
        program_header_entries=phnum,
        section_header_entry_size=shentsize,
        section_header_entries=shnum,
        string_table_index=shstrndx,
    )


# ---------------------------------------------------------------------------
# Program header table
# ---------------------------------------------------------------------------

def _decode_program_header(cursor: ByteCursor) -> ProgramHeaderEntry:
    segment_type = _segment_type(cursor.read_u32())
    return ProgramHeaderEntry(
        segment_type=segment_type,
        offset=cursor.read_u32(),
        virtual_address=cursor.read_u32(),
        physical_address=cursor.read_u32(),
        size_in_file=cursor.read_u32(),
        size_in_memory=cursor.read_u32(),
        flags=cursor.read_u32(),
        alignment=cursor.read_u32(),
    )


def decode_program_headers(
    data: bytes,
    offset: int,
    entry_size: int,
    count: int,
    *,
    strict_entry_size: bool = True,
) -> list[ProgramHeaderEntry]:
    """Decode *count* consecutive 32-byte program headers starting at *offset*.

    The table is read with its own cursor; it need not follow the file
    header.  Entries are returned in file order.

    Args:
        data: The complete input buffer.
        offset: ``e_phoff`` from the file header.
        entry_size: ``e_phentsize`` from the file header.
        count: ``e_phnum`` from the file header.
        strict_entry_size: Reject tables whose declared entry size is not
            the ELF32 stride.  When ``False`` the declared size is ignored.

    Raises:
        EntrySizeMismatchError: Strict mode and ``entry_size != 32``.
        UnsupportedSegmentTypeError: Any entry has an unrecognised type.
        OutOfBoundsError: Any entry extends past the end of the buffer.
    """
    if strict_entry_size and count and entry_size != ELF32_PHDR_SIZE:
        raise EntrySizeMismatchError(entry_size, ELF32_PHDR_SIZE)

    cursor = ByteCursor(data, offset=offset)
    return [_decode_program_header(cursor) for _ in range(count)]


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def parse_elf32(data: bytes, *, strict_entry_size: bool = True) -> ElfImage:
    """Decode the ELF32 file header and program header table of *data*.

    Args:
        data: Raw file contents (at least the header region).
        strict_entry_size: See :func:`decode_program_headers`.

    Returns:
        An :class:`ElfImage` with ``size`` set to ``len(data)``.

    Raises:
        ElfParseError: Any subclass, on the first structural violation.
    """
    ident = ByteCursor(data).read_bytes(EI_NIDENT)
    os_abi, abi_version = verify_identification(ident)

    header = decode_file_header(data, os_abi, abi_version)
    program_headers = decode_program_headers(
        data,
        header.program_header_offset,
        header.program_header_entry_size,
        header.program_header_entries,
        strict_entry_size=strict_entry_size,
    )

    return ElfImage(header=header, program_headers=program_headers, size=len(data))
