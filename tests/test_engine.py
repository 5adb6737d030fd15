import json

import pytest

from conftest import make_elf
from shared.config import PeekConfig
from shared.logger import PeekLogger

from peekelf.core.engine import ElfInspector, InspectionError
from peekelf.core.errors import BadMagicError, EntrySizeMismatchError
from peekelf.core.models import FileType


@pytest.fixture
def quiet_logger():
    return PeekLogger("test", console_output=False)


def test_inspect_file(elf_file, quiet_logger):
    image = ElfInspector(logger=quiet_logger).inspect(elf_file)

    assert image.header.file_type is FileType.EXEC
    assert image.path == str(elf_file.resolve())
    assert image.size == elf_file.stat().st_size


def test_missing_file(tmp_path, quiet_logger):
    with pytest.raises(InspectionError, match="File not found"):
        ElfInspector(logger=quiet_logger).inspect(tmp_path / "nope")


def test_directory_rejected(tmp_path, quiet_logger):
    with pytest.raises(InspectionError, match="Not a regular file"):
        ElfInspector(logger=quiet_logger).inspect(tmp_path)


def test_oversize_file(elf_file, quiet_logger):
    config = PeekConfig()
    config.inspector.max_file_size = 16

    with pytest.raises(InspectionError, match="File too large"):
        ElfInspector(config=config, logger=quiet_logger).inspect(elf_file)


def test_decode_errors_propagate(tmp_path, quiet_logger):
    path = tmp_path / "junk.bin"
    path.write_bytes(b"\x00" * 64)

    with pytest.raises(BadMagicError):
        ElfInspector(logger=quiet_logger).inspect(path)


def test_strict_entry_size_follows_config(quiet_logger):
    data = make_elf(phentsize=40)
    config = PeekConfig()

    with pytest.raises(EntrySizeMismatchError):
        ElfInspector(config=config, logger=quiet_logger).inspect_bytes(data)

    config.inspector.strict_entry_size = False
    image = ElfInspector(config=config, logger=quiet_logger).inspect_bytes(data)
    assert len(image.program_headers) == 1


def test_json_log_file_records_operations(tmp_path, elf_file):
    log_path = tmp_path / "logs" / "peekelf.log"
    logger = PeekLogger(
        "engine-test",
        log_level="DEBUG",
        log_file=log_path,
        json_logs=True,
        console_output=False,
    )

    ElfInspector(logger=logger).inspect(elf_file)
    for handler in logger.underlying.handlers:
        handler.flush()

    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert {r["operation"] for r in records} == {"read", "decode"}
    assert all(r["tool_name"] == "engine-test" for r in records)
    assert any("program header" in r["message"] for r in records)
