"""
peekelf Data Models
====================

Pydantic-based, immutable data models for the decoded ELF32 header
region: the file header, the program header table entries, and the
small value types wrapping numeric OS/ABI and machine codes.

The models hold already-validated values only.  Name resolution for
OS/ABI and machine codes is deferred to display time: the wrappers keep
the raw code and resolve a name on demand, so an unrecognised code
never aborts a parse.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from peekelf.core import names


_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF

# Program header flags
PF_X: int = 0x1
PF_W: int = 0x2
PF_R: int = 0x4


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FileType(enum.IntEnum):
    """Object file type (``e_type``).  Closed: other codes are rejected."""
    NONE = 0
    REL = 1
    EXEC = 2
    DYN = 3
    CORE = 4

    @property
    def description(self) -> str:
        """Human-readable description, as printed by readelf."""
        return _FILE_TYPE_DESCRIPTIONS[self]


_FILE_TYPE_DESCRIPTIONS: dict[FileType, str] = {
    FileType.NONE: "No file type",
    FileType.REL: "Relocatable file",
    FileType.EXEC: "Executable file",
    FileType.DYN: "Shared object file",
    FileType.CORE: "Core file",
}


class SegmentType(enum.IntEnum):
    """Program header type (``p_type``).  Closed: other codes are rejected.

    Member names double as the readelf display names.
    """
    NULL = 0
    LOAD = 1
    DYNAMIC = 2
    INTERP = 3
    NOTE = 4
    PHDR = 6
    GNU_STACK = 0x6474E551


# ---------------------------------------------------------------------------
# Numeric-code value types
# ---------------------------------------------------------------------------

class OsAbi(BaseModel):
    """Raw ``e_ident[EI_OSABI]`` byte with lazy name resolution.

    Attributes:
        code: The OS/ABI byte exactly as found in the file.
    """
    model_config = ConfigDict(frozen=True)

    code: int = Field(ge=0, le=_U8)

    @property
    def name(self) -> Optional[str]:
        """Symbolic ``ELFOSABI_*`` name, or ``None`` when unrecognised."""
        return names.osabi_name(self.code)

    @property
    def display_name(self) -> Optional[str]:
        """Human-readable name, or ``None`` when unrecognised."""
        return names.osabi_display_name(self.code)

    def __str__(self) -> str:
        return self.display_name or f"<unknown: {self.code:#x}>"


class Machine(BaseModel):
    """Raw ``e_machine`` half-word with lazy name resolution.

    Attributes:
        code: The machine code exactly as found in the file.
    """
    model_config = ConfigDict(frozen=True)

    code: int = Field(ge=0, le=_U16)

    @property
    def name(self) -> Optional[str]:
        """Symbolic ``EM_*`` name, or ``None`` when unrecognised."""
        return names.machine_name(self.code)

    @property
    def display_name(self) -> Optional[str]:
        """Human-readable name, or ``None`` when unrecognised."""
        return names.machine_display_name(self.code)

    def __str__(self) -> str:
        return self.display_name or f"<unknown: {self.code:#x}>"


# ---------------------------------------------------------------------------
# File header
# ---------------------------------------------------------------------------

class FileHeader(BaseModel):
    """Decoded ELF32 file header.

    Only the identification fields (magic, class, data encoding,
    version) and the file type are validated.  Offsets and counts are
    stored as declared; they are checked implicitly when the program
    header table is read.

    Attributes:
        os_abi: OS/ABI identification byte.
        abi_version: ABI version byte, verbatim.
        file_type: Object file type.
        machine: Target architecture.
        entry: Virtual address of the entry point.
        program_header_offset: File offset of the program header table.
        section_header_offset: File offset of the section header table.
        header_size: Declared size of this header in bytes.
        program_header_entry_size: Declared size of one program header.
        program_header_entries: Number of program header entries.
        section_header_entry_size: Declared size of one section header.
        section_header_entries: Number of section header entries.
        string_table_index: Section index of the section-name string table.
    """
    model_config = ConfigDict(frozen=True)

    os_abi: OsAbi
    abi_version: int = Field(ge=0, le=_U8)
    file_type: FileType
    machine: Machine
    entry: int = Field(ge=0, le=_U32)
    program_header_offset: int = Field(ge=0, le=_U32)
    section_header_offset: int = Field(ge=0, le=_U32)
    header_size: int = Field(ge=0, le=_U16)
    program_header_entry_size: int = Field(ge=0, le=_U16)
    program_header_entries: int = Field(ge=0, le=_U16)
    section_header_entry_size: int = Field(ge=0, le=_U16)
    section_header_entries: int = Field(ge=0, le=_U16)
    string_table_index: int = Field(ge=0, le=_U16)


# ---------------------------------------------------------------------------
# Program header table
# ---------------------------------------------------------------------------

class ProgramHeaderEntry(BaseModel):
    """A single ELF32 program header (segment descriptor).

    Attributes:
        segment_type: Segment type.
        offset: File offset of the segment contents.
        virtual_address: Virtual address of the segment in memory.
        physical_address: Physical address, where relevant.
        size_in_file: Number of bytes in the file image.
        size_in_memory: Number of bytes in the memory image.
        flags: Raw ``p_flags`` bitfield.
        alignment: Required alignment.
    """
    model_config = ConfigDict(frozen=True)

    segment_type: SegmentType
    offset: int = Field(ge=0, le=_U32)
    virtual_address: int = Field(ge=0, le=_U32)
    physical_address: int = Field(ge=0, le=_U32)
    size_in_file: int = Field(ge=0, le=_U32)
    size_in_memory: int = Field(ge=0, le=_U32)
    flags: int = Field(ge=0, le=_U32)
    alignment: int = Field(ge=0, le=_U32)

    @property
    def flags_string(self) -> str:
        """Three-character ``RWE`` rendering of the permission bits."""
        return (
            ("R" if self.flags & PF_R else " ")
            + ("W" if self.flags & PF_W else " ")
            + ("E" if self.flags & PF_X else " ")
        )


# ---------------------------------------------------------------------------
# Aggregate result
# ---------------------------------------------------------------------------

class ElfImage(BaseModel):
    """Everything decoded from one ELF32 buffer.

    Attributes:
        header: The decoded file header.
        program_headers: Program header entries in file order.
        path: Source path when read from disk, else empty.
        size: Size of the source buffer in bytes.
    """
    model_config = ConfigDict(frozen=True)

    header: FileHeader
    program_headers: list[ProgramHeaderEntry] = Field(default_factory=list)
    path: str = ""
    size: int = 0
