"""
ELF Identification Verifier
============================

Validates the 16-byte ``e_ident`` prefix of an ELF file before any
multi-byte field is interpreted.  Checks run in a fixed order and stop
at the first failure:

    1. magic number ``7F 'E' 'L' 'F'``
    2. class is ELFCLASS32
    3. data encoding is ELFDATA2LSB (little-endian)
    4. version is EV_CURRENT

The OS/ABI and ABI-version bytes are returned verbatim; the seven
padding bytes are ignored.

References:
    - TIS Committee. (1995). ELF Specification, Version 1.2, Figure 1-4.
"""

from __future__ import annotations

from peekelf.core.errors import (
    BadMagicError,
    UnsupportedClassError,
    UnsupportedEndiannessError,
    UnsupportedVersionError,
)


# ---------------------------------------------------------------------------
# e_ident layout
# ---------------------------------------------------------------------------

EI_NIDENT: int = 16

EI_MAG0: int = 0
EI_CLASS: int = 4
EI_DATA: int = 5
EI_VERSION: int = 6
EI_OSABI: int = 7
EI_ABIVERSION: int = 8

ELF_MAGIC: bytes = b"\x7fELF"

# ELF class
ELFCLASSNONE: int = 0
ELFCLASS32: int = 1
ELFCLASS64: int = 2

# Data encoding
ELFDATANONE: int = 0
ELFDATA2LSB: int = 1
ELFDATA2MSB: int = 2

# Version
EV_NONE: int = 0
EV_CURRENT: int = 1


def verify_identification(ident: bytes) -> tuple[int, int]:
    """Validate an ``e_ident`` region and return ``(os_abi, abi_version)``.

    Args:
        ident: Exactly :data:`EI_NIDENT` bytes from the start of the file.

    Returns:
        The OS/ABI byte and the ABI-version byte, unvalidated.

    Raises:
        ValueError: If *ident* is not exactly 16 bytes long.
        BadMagicError: The first four bytes are not the ELF magic.
        UnsupportedClassError: The class byte is not ELFCLASS32.
        UnsupportedEndiannessError: The encoding byte is not ELFDATA2LSB.
        UnsupportedVersionError: The version byte is not EV_CURRENT.
    """
    if len(ident) != EI_NIDENT:
        raise ValueError(
            f"identification region must be {EI_NIDENT} bytes, got {len(ident)}"
        )

    magic = bytes(ident[EI_MAG0:EI_MAG0 + len(ELF_MAGIC)])
    if magic != ELF_MAGIC:
        raise BadMagicError(magic)

    if ident[EI_CLASS] != ELFCLASS32:
        raise UnsupportedClassError(ident[EI_CLASS])

    if ident[EI_DATA] != ELFDATA2LSB:
        raise UnsupportedEndiannessError(ident[EI_DATA])

    if ident[EI_VERSION] != EV_CURRENT:
        raise UnsupportedVersionError(ident[EI_VERSION], EV_CURRENT)

    return ident[EI_OSABI], ident[EI_ABIVERSION]
