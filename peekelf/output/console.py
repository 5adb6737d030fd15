"""
peekelf Console Output
=======================

Terminal display of a decoded :class:`~peekelf.core.models.ElfImage`.
The default mode prints the exact readelf-style lines produced by
:mod:`peekelf.output.formatting`; table mode renders the same cells as
Rich tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from shared.console import PeekConsole

from peekelf.core.models import ElfImage, FileHeader, ProgramHeaderEntry
from peekelf.output.formatting import (
    DEFAULT_TYPE_GAP,
    file_header_rows,
    format_file_header,
    format_program_header_prelude,
    format_program_headers,
    program_header_columns,
)


_TABLE_COLUMNS: list[str] = [
    "Type", "Offset", "VirtAddr", "PhysAddr", "FileSiz", "MemSiz", "Flg", "Align",
]

NO_PROGRAM_HEADERS: str = "There are no program headers in this file."


class PeekConsoleOutput:
    """Render ELF32 header data on a :class:`PeekConsole`.

    Usage::

        output = PeekConsoleOutput()
        output.display(image, file_header=True, program_headers=True)
    """

    def __init__(
        self,
        console: PeekConsole | None = None,
        *,
        type_column_gap: int = DEFAULT_TYPE_GAP,
        table: bool = False,
    ) -> None:
        """Initialise the renderer.

        Args:
            console: Console to print on.  A new one is created if omitted.
            type_column_gap: Spaces between the longest segment type name
                and the first hexadecimal column.
            table: Render Rich tables instead of readelf-style text.
        """
        self._console: PeekConsole = console or PeekConsole()
        self._gap = type_column_gap
        self._table = table

    def display(
        self,
        image: ElfImage,
        *,
        file_header: bool = True,
        program_headers: bool = True,
    ) -> None:
        """Display the requested parts of *image*.

        When the program headers are shown without the file header, the
        readelf summary prelude (file type, entry point, table position)
        is printed first.
        """
        if file_header:
            self.display_file_header(image.header)

        if program_headers:
            if file_header:
                self._console.blank()
            self.display_program_headers(
                image.header,
                image.program_headers,
                include_prelude=not file_header,
            )

    def display_file_header(self, header: FileHeader) -> None:
        if self._table:
            self._console.table("ELF Header", ["Field", "Value"], file_header_rows(header))
            return

        self._console.lines(format_file_header(header))

    def display_program_headers(
        self,
        header: FileHeader,
        entries: list[ProgramHeaderEntry],
        *,
        include_prelude: bool = False,
    ) -> None:
        if not entries:
            self._console.line(NO_PROGRAM_HEADERS)
            return

        if include_prelude:
            self._console.lines(format_program_header_prelude(header))

        if self._table:
            rows = [
                [entry.segment_type.name, *program_header_columns(entry)]
                for entry in entries
            ]
            self._console.table(
                "Program Headers",
                _TABLE_COLUMNS,
                rows,
                justify=["left"] + ["right"] * (len(_TABLE_COLUMNS) - 1),
            )
            return

        self._console.lines(format_program_headers(entries, self._gap))
