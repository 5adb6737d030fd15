"""
peekelf Report Generator
=========================

Generates machine-readable JSON reports from a decoded
:class:`~peekelf.core.models.ElfImage`.

Numeric fields are emitted as plain integers; enumerated fields carry
both the raw code and its symbolic name so downstream consumers do not
need their own ELF lookup tables.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from peekelf import __version__
from peekelf.core.models import ElfImage, FileHeader, ProgramHeaderEntry


REPORT_TYPE: str = "peekelf_elf32_headers"


class PeekReportGenerator:
    """Build and write JSON reports for decoded ELF32 images.

    Usage::

        generator = PeekReportGenerator()
        data = generator.build_report(image)
        generator.generate_json(image, "report.json")
    """

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    # ------------------------------------------------------------------ #
    #  Public API
    # ------------------------------------------------------------------ #

    def build_report(self, image: ElfImage) -> dict[str, Any]:
        """Return the report for *image* as a JSON-compatible dictionary."""
        return {
            "report_type": REPORT_TYPE,
            "version": __version__,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "file": {
                "path": image.path,
                "size": image.size,
            },
            "header": self._header_dict(image.header),
            "program_headers": [
                self._program_header_dict(entry) for entry in image.program_headers
            ],
        }

    def render_json(self, image: ElfImage) -> str:
        """Serialise the report for *image* to a JSON string."""
        return json.dumps(
            self.build_report(image),
            indent=self._indent,
            ensure_ascii=False,
        )

    def generate_json(self, image: ElfImage, output_path: str | Path) -> str:
        """Write a JSON report for *image* to *output_path*.

        Args:
            image: The decoded ELF image.
            output_path: Filesystem path for the output JSON file.
                Missing parent directories are created.

        Returns:
            The absolute path of the generated report.
        """
        path = Path(output_path).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(self.render_json(image))
            f.write("\n")

        return str(path)

    # ------------------------------------------------------------------ #
    #  Section builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _header_dict(header: FileHeader) -> dict[str, Any]:
        return {
            "os_abi": header.os_abi.code,
            "os_abi_name": header.os_abi.name,
            "abi_version": header.abi_version,
            "file_type": int(header.file_type),
            "file_type_name": header.file_type.name,
            "machine": header.machine.code,
            "machine_name": header.machine.name,
            "entry": header.entry,
            "program_header_offset": header.program_header_offset,
            "section_header_offset": header.section_header_offset,
            "header_size": header.header_size,
            "program_header_entry_size": header.program_header_entry_size,
            "program_header_entries": header.program_header_entries,
            "section_header_entry_size": header.section_header_entry_size,
            "section_header_entries": header.section_header_entries,
            "string_table_index": header.string_table_index,
        }

    @staticmethod
    def _program_header_dict(entry: ProgramHeaderEntry) -> dict[str, Any]:
        return {
            "type": int(entry.segment_type),
            "type_name": entry.segment_type.name,
            "offset": entry.offset,
            "virtual_address": entry.virtual_address,
            "physical_address": entry.physical_address,
            "size_in_file": entry.size_in_file,
            "size_in_memory": entry.size_in_memory,
            "flags": entry.flags,
            "flags_string": entry.flags_string,
            "alignment": entry.alignment,
        }
