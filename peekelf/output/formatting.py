"""
readelf-style Text Formatting
==============================

Pure functions turning already-decoded ELF32 records into the text
lines printed by the inspector.  Nothing here performs I/O, so the
layout can be tested independently of both decoding and the terminal.

Layout conventions follow GNU ``readelf -h`` / ``readelf -l``:

* File header rows are ``  Label:<pad>value`` with the value column
  aligned one space past the longest label.
* Program header rows start with the segment type name, left-aligned
  and padded to the longest type name present plus a fixed gap,
  followed by zero-padded uppercase hexadecimal columns.  Each column
  width includes the ``0x`` prefix: offset 8, addresses 10, sizes 7,
  flags 3, alignment 6.

References:
    - GNU binutils ``readelf.c`` (process_file_header, process_program_headers).
"""

from __future__ import annotations

from typing import Sequence

from peekelf.core.models import FileHeader, FileType, ProgramHeaderEntry
from peekelf.parsers.ident import EI_NIDENT, ELF_MAGIC, ELFCLASS32, ELFDATA2LSB, EV_CURRENT


# ---------------------------------------------------------------------------
# Column widths (including the "0x" prefix)
# ---------------------------------------------------------------------------

OFFSET_WIDTH: int = 8
ADDRESS_WIDTH: int = 10
SIZE_WIDTH: int = 7
FLAGS_WIDTH: int = 3
ALIGN_WIDTH: int = 6

DEFAULT_TYPE_GAP: int = 6

TYPE_HEADING: str = "Type"
COLUMNS_HEADING: str = "Offset   VirtAddr   PhysAddr   FileSiz MemSiz  Flg Align"


def hex_field(value: int, width: int) -> str:
    """Render *value* as ``0x`` + zero-padded uppercase hex, *width* chars wide.

    Values needing more digits than the width allows are printed in
    full rather than truncated.

    >>> hex_field(0x100, 7)
    '0x00100'
    """
    digits = max(width - 2, 1)
    return f"0x{value:0{digits}X}"


def describe_file_type(file_type: FileType) -> str:
    """``EXEC (Executable file)``-style rendering of a file type."""
    return f"{file_type.name} ({file_type.description})"


# ---------------------------------------------------------------------------
# File header
# ---------------------------------------------------------------------------

def _magic_string(header: FileHeader) -> str:
    # Padding bytes are not retained by the decoder and render as zero.
    ident = bytearray(EI_NIDENT)
    ident[0:4] = ELF_MAGIC
    ident[4] = ELFCLASS32
    ident[5] = ELFDATA2LSB
    ident[6] = EV_CURRENT
    ident[7] = header.os_abi.code
    ident[8] = header.abi_version
    return " ".join(f"{b:02x}" for b in ident)


def file_header_rows(header: FileHeader) -> list[tuple[str, str]]:
    """Return the ``(label, value)`` pairs of the ``ELF Header:`` block."""
    return [
        ("Magic", _magic_string(header)),
        ("Class", "ELF32"),
        ("Data", "2's complement, little endian"),
        ("Version", f"{EV_CURRENT} (current)"),
        ("OS/ABI", str(header.os_abi)),
        ("ABI Version", str(header.abi_version)),
        ("Type", describe_file_type(header.file_type)),
        ("Machine", str(header.machine)),
        ("Version", f"{EV_CURRENT:#x}"),
        ("Entry point address", f"{header.entry:#x}"),
        ("Start of program headers", f"{header.program_header_offset} (bytes into file)"),
        ("Start of section headers", f"{header.section_header_offset} (bytes into file)"),
        ("Flags", "0x0"),
        ("Size of this header", f"{header.header_size} (bytes)"),
        ("Size of program headers", f"{header.program_header_entry_size} (bytes)"),
        ("Number of program headers", str(header.program_header_entries)),
        ("Size of section headers", f"{header.section_header_entry_size} (bytes)"),
        ("Number of section headers", str(header.section_header_entries)),
        ("Section header string table index", str(header.string_table_index)),
    ]


def format_file_header(header: FileHeader) -> list[str]:
    """Render the ``ELF Header:`` block, one string per line."""
    rows = file_header_rows(header)
    width = max(len(label) for label, _ in rows) + 2

    lines = ["ELF Header:"]
    for label, value in rows:
        lines.append(f"  {label + ':':<{width}}{value}")
    return lines


# ---------------------------------------------------------------------------
# Program headers
# ---------------------------------------------------------------------------

def format_program_header_prelude(header: FileHeader) -> list[str]:
    """Summary lines readelf prints before a stand-alone program header table."""
    return [
        f"Elf file type is {describe_file_type(header.file_type)}",
        f"Entry point {header.entry:#x}",
        (
            f"There are {header.program_header_entries} program headers, "
            f"starting at offset {header.program_header_offset}"
        ),
        "",
    ]


def program_header_columns(entry: ProgramHeaderEntry) -> list[str]:
    """Fixed-width hexadecimal cells for one program header, in column order."""
    return [
        hex_field(entry.offset, OFFSET_WIDTH),
        hex_field(entry.virtual_address, ADDRESS_WIDTH),
        hex_field(entry.physical_address, ADDRESS_WIDTH),
        hex_field(entry.size_in_file, SIZE_WIDTH),
        hex_field(entry.size_in_memory, SIZE_WIDTH),
        hex_field(entry.flags, FLAGS_WIDTH),
        hex_field(entry.alignment, ALIGN_WIDTH),
    ]


def type_column_width(
    entries: Sequence[ProgramHeaderEntry],
    gap: int = DEFAULT_TYPE_GAP,
) -> int:
    """Width of the type column: longest type name (or heading) plus *gap*."""
    longest = max(
        [len(TYPE_HEADING)] + [len(entry.segment_type.name) for entry in entries]
    )
    return longest + gap


def format_program_headers(
    entries: Sequence[ProgramHeaderEntry],
    gap: int = DEFAULT_TYPE_GAP,
) -> list[str]:
    """Render the ``Program Headers:`` table, one string per line."""
    width = type_column_width(entries, gap)

    lines = ["Program Headers:", f"{TYPE_HEADING:<{width}}{COLUMNS_HEADING}"]
    for entry in entries:
        cells = " ".join(program_header_columns(entry))
        lines.append(f"{entry.segment_type.name:<{width}}{cells}")
    return lines
