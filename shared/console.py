"""
peekelf Console Interface
==========================

Rich-powered console abstraction providing a single presentation layer
for the inspector: plain readelf-style lines, section rules,
severity-coloured status messages and tables, all with consistent
styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all peekelf output
# ---------------------------------------------------------------------------
_PEEK_THEME = Theme(
    {
        "peek.section": "bold bright_magenta",
        "peek.success": "bold green",
        "peek.warning": "bold yellow",
        "peek.error": "bold red",
        "peek.info": "bold bright_blue",
        "peek.dim": "dim white",
    }
)


class PeekConsole:
    """Unified console interface for peekelf output.

    Wraps :class:`rich.console.Console`.  Data rows go through
    :meth:`line`, which disables markup, highlighting and wrapping so
    fixed-width columns survive narrow terminals intact.

    Usage::

        con = PeekConsole()
        con.line("ELF Header:")
        con.error("Invalid magic bytes: 00 00 00 00")
    """

    # ------------------------------------------------------------------ #
    #  Construction
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        *,
        quiet: bool = False,
        record: bool = False,
        stderr: bool = False,
    ) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text export.
            stderr: Write to standard error instead of standard output.
        """
        self._console = Console(
            theme=_PEEK_THEME,
            quiet=quiet,
            record=record,
            stderr=stderr,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Plain output
    # ------------------------------------------------------------------ #

    def line(self, text: str = "") -> None:
        """Print *text* verbatim: no markup, no highlighting, no wrapping."""
        self._console.print(text, markup=False, highlight=False, soft_wrap=True)

    def lines(self, texts: Sequence[str]) -> None:
        for text in texts:
            self.line(text)

    def section(self, title: str) -> None:
        """Print a section rule."""
        self._console.rule(f"  {title}  ", style="peek.section")

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[peek.success]SUCCESS:[/peek.success] {escape(message)}", soft_wrap=True
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[peek.warning]WARNING:[/peek.warning] {escape(message)}", soft_wrap=True
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[peek.error]ERROR:[/peek.error] {escape(message)}", soft_wrap=True
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[peek.info]INFO:[/peek.info] {escape(message)}", soft_wrap=True
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        justify: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; each element is stringified.
            justify:  Optional per-column justification (``"left"``/``"right"``).
        """
        tbl = Table(
            title=title,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            how = justify[idx] if justify and idx < len(justify) else "left"
            tbl.add_column(col_name, justify=how, no_wrap=True)  # type: ignore[arg-type]

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        for _ in range(count):
            self._console.print()

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
