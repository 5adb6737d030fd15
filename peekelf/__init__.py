"""
peekelf -- ELF32 Header Inspector
==================================

peekelf decodes the fixed-layout header region of 32-bit little-endian
ELF object files and prints it in the layout of GNU ``readelf``.

Capabilities:
    - Identification verification (magic, class, data encoding, version)
    - File header decoding with closed file-type set
    - Program header table decoding with closed segment-type set
    - Bounds-checked, cursor-based little-endian reads
    - readelf-style text output, Rich tables and JSON reports

References:
    - TIS Committee. (1995). ELF Specification, Version 1.2.
    - Linux man page: elf(5).
"""

__version__ = "0.1.0"

from peekelf.core.engine import ElfInspector  # noqa: E402
from peekelf.core.models import ElfImage  # noqa: E402
from peekelf.output.console import PeekConsoleOutput  # noqa: E402
from peekelf.output.report import PeekReportGenerator  # noqa: E402
from peekelf.parsers.elf_parser import parse_elf32  # noqa: E402

__all__ = [
    "ElfInspector",
    "ElfImage",
    "PeekConsoleOutput",
    "PeekReportGenerator",
    "parse_elf32",
]
