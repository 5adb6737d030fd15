"""
peekelf Core Module
====================

Data models, error taxonomy, name tables and the inspection engine.
"""

from peekelf.core.errors import ElfParseError
from peekelf.core.models import (
    ElfImage,
    FileHeader,
    FileType,
    Machine,
    OsAbi,
    ProgramHeaderEntry,
    SegmentType,
)
from peekelf.core.engine import ElfInspector, InspectionError

__all__ = [
    "ElfImage",
    "ElfInspector",
    "ElfParseError",
    "FileHeader",
    "FileType",
    "InspectionError",
    "Machine",
    "OsAbi",
    "ProgramHeaderEntry",
    "SegmentType",
]
