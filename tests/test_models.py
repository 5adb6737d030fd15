import pytest
from pydantic import ValidationError

from peekelf.core.models import (
    FileType,
    Machine,
    OsAbi,
    ProgramHeaderEntry,
    SegmentType,
)
from peekelf.parsers.elf_parser import parse_elf32


def _entry(flags: int) -> ProgramHeaderEntry:
    return ProgramHeaderEntry(
        segment_type=SegmentType.LOAD,
        offset=0,
        virtual_address=0,
        physical_address=0,
        size_in_file=0,
        size_in_memory=0,
        flags=flags,
        alignment=0,
    )


def test_os_abi_names():
    linux = OsAbi(code=3)

    assert linux.name == "ELFOSABI_LINUX"
    assert linux.display_name == "UNIX - GNU"
    assert str(linux) == "UNIX - GNU"
    assert str(OsAbi(code=0)) == "UNIX - System V"


def test_unknown_codes_render_placeholder():
    assert OsAbi(code=0x80).name is None
    assert str(OsAbi(code=0x80)) == "<unknown: 0x80>"
    assert str(Machine(code=0x1234)) == "<unknown: 0x1234>"


def test_machine_names():
    assert Machine(code=3).display_name == "Intel 80386"
    assert Machine(code=62).name == "EM_X86_64"
    assert str(Machine(code=40)) == "ARM"


def test_file_type_descriptions():
    assert FileType.EXEC.description == "Executable file"
    assert FileType.DYN.description == "Shared object file"
    assert FileType(0).description == "No file type"


def test_segment_type_codes():
    assert SegmentType(0x6474E551) is SegmentType.GNU_STACK
    assert SegmentType.PHDR == 6
    with pytest.raises(ValueError):
        SegmentType(5)


@pytest.mark.parametrize(
    "flags, expected",
    [(0, "   "), (4, "R  "), (5, "R E"), (6, "RW "), (7, "RWE")],
)
def test_flags_string(flags, expected):
    assert _entry(flags).flags_string == expected


def test_models_are_frozen(worked_example):
    image = parse_elf32(worked_example)

    with pytest.raises(ValidationError):
        image.header.entry = 0


def test_field_ranges_enforced():
    with pytest.raises(ValidationError):
        OsAbi(code=256)
    with pytest.raises(ValidationError):
        _entry(flags=1 << 32)
