"""
peekelf Inspection Engine
==========================

Connects the filesystem to the pure decoder: reads a file, enforces
the configured size cap, and hands the bytes to
:func:`~peekelf.parsers.elf_parser.parse_elf32`.

Pipeline:
    1. Check the path exists and is a regular file
    2. Reject files larger than ``[peekelf] max_file_size``
    3. Read the whole file into memory
    4. Verify identification, decode the file header and program headers
    5. Attach path and size metadata to the resulting :class:`ElfImage`

Decode failures propagate unchanged as
:class:`~peekelf.core.errors.ElfParseError` subclasses; file-level
problems raise :class:`InspectionError`.

References:
    - Linux man page: elf(5).
"""

from __future__ import annotations

from pathlib import Path

from shared.config import PeekConfig
from shared.logger import PeekLogger

from peekelf.core.errors import ElfParseError
from peekelf.core.models import ElfImage
from peekelf.parsers.elf_parser import parse_elf32


class InspectionError(Exception):
    """The input file could not be read for inspection."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


# ---------------------------------------------------------------------------
# ElfInspector
# ---------------------------------------------------------------------------

class ElfInspector:
    """Reads ELF32 files from disk and decodes their header region.

    Usage::

        inspector = ElfInspector()
        image = inspector.inspect("/path/to/binary")
        print(image.header.entry)
    """

    def __init__(
        self,
        config: PeekConfig | None = None,
        logger: PeekLogger | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config: peekelf configuration.  Defaults are used if not provided.
            logger: Logger instance.  A new one is created if not provided.
        """
        self._config: PeekConfig = config or PeekConfig()
        self._logger: PeekLogger = logger or PeekLogger(
            "engine",
            log_level=self._config.global_settings.log_level,
        )

    @property
    def config(self) -> PeekConfig:
        return self._config

    # ------------------------------------------------------------------ #
    #  Entry points
    # ------------------------------------------------------------------ #

    def inspect(self, file_path: str | Path) -> ElfImage:
        """Read *file_path* and decode its ELF32 header region.

        Args:
            file_path: Path to the ELF file.

        Returns:
            The decoded image, carrying the resolved path and file size.

        Raises:
            InspectionError: If the file is missing, not a regular file,
                unreadable, or larger than the configured maximum.
            ElfParseError: If the contents are not a supported ELF32 file.
        """
        path = Path(file_path)

        with self._logger.operation("read"):
            if not path.exists():
                raise InspectionError(path, "File not found")
            if not path.is_file():
                raise InspectionError(path, "Not a regular file")

            file_size = path.stat().st_size
            max_size = self._config.inspector.max_file_size
            if file_size > max_size:
                raise InspectionError(
                    path,
                    f"File too large ({file_size:,} bytes, max {max_size:,} bytes)",
                )

            try:
                data = path.read_bytes()
            except OSError as exc:
                raise InspectionError(path, f"Could not read file ({exc.strerror})") from exc

            self._logger.info("Read %d bytes from %s", len(data), path)

        image = self.inspect_bytes(data)
        return image.model_copy(update={"path": str(path.resolve()), "size": len(data)})

    def inspect_bytes(self, data: bytes) -> ElfImage:
        """Decode an in-memory buffer.

        Useful for testing or inspecting data that is already loaded.
        """
        strict = self._config.inspector.strict_entry_size

        with self._logger.operation("decode"), self._logger.timed("ELF32 header decode"):
            try:
                image = parse_elf32(data, strict_entry_size=strict)
            except ElfParseError as exc:
                self._logger.debug("Decode failed: %s", exc, error=type(exc).__name__)
                raise

            self._logger.info(
                "Decoded %s header with %d program header(s)",
                image.header.file_type.name,
                len(image.program_headers),
            )
        return image
