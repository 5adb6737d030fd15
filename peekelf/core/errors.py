"""
peekelf Error Taxonomy
=======================

Closed set of exceptions raised while decoding an ELF32 header region.
Every decode step is fallible and short-circuits its caller: either a
complete, validated structure is produced or exactly one of the
exceptions below is raised.  Each exception carries the offending
values as attributes so callers can inspect them without parsing the
message.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
"""

from __future__ import annotations


def _hex_bytes(data: bytes) -> str:
    return " ".join(f"{b:02X}" for b in data)


class ElfParseError(Exception):
    """Base class for every decode failure of the ELF32 core."""

    pass


class BadMagicError(ElfParseError):
    """The first four bytes are not ``7F 45 4C 46``."""

    def __init__(self, magic: bytes) -> None:
        self.magic = bytes(magic)
        super().__init__(f"Invalid magic bytes: {_hex_bytes(self.magic)}")


class UnsupportedClassError(ElfParseError):
    """``e_ident[EI_CLASS]`` is not ELFCLASS32."""

    def __init__(self, elf_class: int) -> None:
        self.elf_class = elf_class
        super().__init__(f"Unsupported ELF class: {elf_class}")


class UnsupportedEndiannessError(ElfParseError):
    """``e_ident[EI_DATA]`` is not ELFDATA2LSB."""

    def __init__(self, encoding: int) -> None:
        self.encoding = encoding
        super().__init__(f"Unsupported ELF endianness: {encoding}")


class UnsupportedVersionError(ElfParseError):
    """``e_ident[EI_VERSION]`` is not EV_CURRENT."""

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(
            f"Unsupported ELF version field found: {found} expected: {expected}"
        )


class UnsupportedFileTypeError(ElfParseError):
    """``e_type`` is outside the closed set NONE/REL/EXEC/DYN/CORE."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Unsupported ELF file type: {code:#x}")


class UnsupportedSegmentTypeError(ElfParseError):
    """``p_type`` is not one of the recognised segment types."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Unsupported program header type: {code:#x}")


class OutOfBoundsError(ElfParseError):
    """A read requested the byte range ``[start, end)`` past the buffer end."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Could not read bytes in range [0x{start:X}, 0x{end:X})")


class EntrySizeMismatchError(ElfParseError):
    """The declared program header entry size differs from the ELF32 stride."""

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(
            f"Invalid program header entry size. Expected: {expected}, "
            f"Found: {found}"
        )


__all__ = [
    "ElfParseError",
    "BadMagicError",
    "UnsupportedClassError",
    "UnsupportedEndiannessError",
    "UnsupportedVersionError",
    "UnsupportedFileTypeError",
    "UnsupportedSegmentTypeError",
    "OutOfBoundsError",
    "EntrySizeMismatchError",
]
