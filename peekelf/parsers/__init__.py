"""
peekelf Parsers
================

Pure, I/O-free decoding of the ELF32 header region: the bounds-checked
byte cursor, the identification verifier and the structured decoder.
"""

from peekelf.parsers.cursor import ByteCursor
from peekelf.parsers.ident import verify_identification
from peekelf.parsers.elf_parser import (
    decode_file_header,
    decode_program_headers,
    parse_elf32,
)

__all__ = [
    "ByteCursor",
    "decode_file_header",
    "decode_program_headers",
    "parse_elf32",
    "verify_identification",
]
