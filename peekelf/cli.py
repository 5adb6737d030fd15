"""
peekelf CLI -- ELF32 Header Inspector
======================================

Click-based command-line interface printing the file header and
program header table of a little-endian ELF32 file in the layout of
``readelf -h`` / ``readelf -l``.

Usage::

    # File header and program headers
    peekelf /path/to/binary

    # File header only
    peekelf /path/to/binary -h

    # Program headers only (with the readelf summary prelude)
    peekelf /path/to/binary -l

    # Rich tables instead of plain text
    peekelf /path/to/binary --table

    # JSON to stdout, or to a file
    peekelf /path/to/binary --json
    peekelf /path/to/binary --output report.json

References:
    - Click documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys
import tomllib

import click

from shared.config import PeekConfig
from shared.console import PeekConsole
from shared.logger import PeekLogger

from peekelf import __version__
from peekelf.core.engine import ElfInspector, InspectionError
from peekelf.core.errors import ElfParseError
from peekelf.output.console import PeekConsoleOutput
from peekelf.output.report import PeekReportGenerator


def _load_config(config_path: str | None, console: PeekConsole) -> PeekConfig:
    if config_path is None:
        try:
            return PeekConfig.load()
        except (OSError, tomllib.TOMLDecodeError):
            return PeekConfig()

    try:
        return PeekConfig.load(config_path)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        console.error(f"Could not load configuration {config_path}: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command("peekelf")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option(
    "--file-header", "-h",
    is_flag=True,
    default=False,
    help="Display the ELF file header.",
)
@click.option(
    "--program-headers", "-l",
    is_flag=True,
    default=False,
    help="Display the program headers.",
)
@click.option(
    "--all", "-a",
    "show_all",
    is_flag=True,
    default=False,
    help="Equivalent to -h -l (the default when neither is given).",
)
@click.option(
    "--table",
    is_flag=True,
    default=False,
    help="Render Rich tables instead of readelf-style text.",
)
@click.option(
    "--json", "json_output",
    is_flag=True,
    default=False,
    help="Output the decoded headers as JSON to stdout.",
)
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a JSON report to this path.",
)
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a peekelf.toml configuration file.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging on stderr.",
)
@click.version_option(__version__, prog_name="peekelf")
def peekelf_cli(
    path: str,
    file_header: bool,
    program_headers: bool,
    show_all: bool,
    table: bool,
    json_output: bool,
    output_path: str | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """peekelf -- ELF32 header inspector.

    Decode and display the file header and program header table of a
    32-bit little-endian ELF file.

    PATH is the path to the ELF file to inspect.

    Examples:

    \b
        # Everything
        peekelf ./a.out

    \b
        # Program headers only
        peekelf ./a.out -l
    """
    console = PeekConsole()
    config = _load_config(config_path, console)

    settings = config.global_settings
    logger = PeekLogger(
        "cli",
        log_level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.log_json,
    )

    inspector = ElfInspector(config=config, logger=logger)

    try:
        image = inspector.inspect(path)
    except (InspectionError, ElfParseError) as exc:
        logger.debug("Inspection of %s failed", path, error=type(exc).__name__)
        console.error(str(exc))
        sys.exit(1)

    report_gen = PeekReportGenerator(indent=config.inspector.report_indent)

    # JSON output mode
    if json_output:
        click.echo(report_gen.render_json(image))
    else:
        if show_all or not (file_header or program_headers):
            file_header = program_headers = True

        output_display = PeekConsoleOutput(
            console=console,
            type_column_gap=config.inspector.type_column_gap,
            table=table,
        )
        output_display.display(
            image,
            file_header=file_header,
            program_headers=program_headers,
        )

    if output_path:
        try:
            report_path = report_gen.generate_json(image, output_path)
        except OSError as exc:
            console.error(f"Could not write report {output_path}: {exc}")
            sys.exit(1)
        if not json_output:
            console.success(f"JSON report saved: {report_path}")


# ---------------------------------------------------------------------------
# Module entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Entry point for the ``peekelf`` console script."""
    peekelf_cli()


if __name__ == "__main__":
    main()
