import pytest

from conftest import make_elf, make_header, make_ident, make_phdr
from peekelf.core.errors import (
    BadMagicError,
    ElfParseError,
    EntrySizeMismatchError,
    OutOfBoundsError,
    UnsupportedFileTypeError,
    UnsupportedSegmentTypeError,
)
from peekelf.core.models import FileType, SegmentType
from peekelf.parsers.elf_parser import (
    ELF32_EHDR_SIZE,
    decode_file_header,
    decode_program_headers,
    parse_elf32,
)


def test_worked_example(worked_example):
    image = parse_elf32(worked_example)
    header = image.header

    assert header.file_type is FileType.EXEC
    assert header.machine.code == 3
    assert header.machine.name == "EM_386"
    assert header.os_abi.code == 0
    assert header.abi_version == 0
    assert header.entry == 0x08048000
    assert header.program_header_offset == 52
    assert header.program_header_entry_size == 32
    assert header.program_header_entries == 1
    assert header.header_size == 52
    assert header.section_header_entry_size == 40

    assert len(image.program_headers) == 1
    load = image.program_headers[0]
    assert load.segment_type is SegmentType.LOAD
    assert load.offset == 0
    assert load.virtual_address == 0x08048000
    assert load.physical_address == 0x08048000
    assert load.size_in_file == 0x100
    assert load.size_in_memory == 0x100
    assert load.flags == 5
    assert load.alignment == 0x1000

    assert image.size == len(worked_example)
    assert image.path == ""


def test_entries_decoded_in_file_order(multi_segment):
    image = parse_elf32(multi_segment)

    assert [e.segment_type for e in image.program_headers] == [
        SegmentType.PHDR,
        SegmentType.INTERP,
        SegmentType.LOAD,
        SegmentType.GNU_STACK,
    ]
    assert image.program_headers[1].offset == 0x94


def test_all_header_fields_round_trip():
    data = make_ident(os_abi=3, abi_version=1) + make_header(
        file_type=3, machine=40, entry=0x1234, phoff=0x40, shoff=0x2000,
        ehsize=52, phentsize=32, phnum=0, shentsize=40, shnum=27, shstrndx=26,
    )

    header = parse_elf32(data).header

    assert header.os_abi.code == 3
    assert header.abi_version == 1
    assert header.file_type is FileType.DYN
    assert header.machine.code == 40
    assert header.entry == 0x1234
    assert header.program_header_offset == 0x40
    assert header.section_header_offset == 0x2000
    assert header.section_header_entries == 27
    assert header.string_table_index == 26


def test_flags_and_version_words_are_skipped():
    data = make_ident() + make_header(flags=0x05000200, phnum=0)

    assert parse_elf32(data).header.header_size == 52


def test_unknown_machine_is_not_an_error():
    image = parse_elf32(make_elf(machine=0xBEEF))

    assert image.header.machine.code == 0xBEEF
    assert image.header.machine.name is None


def test_zero_program_headers_reads_nothing():
    # phoff points far past the end; with no entries it is never dereferenced
    data = make_ident() + make_header(phoff=0xFFFF, phnum=0)

    assert parse_elf32(data).program_headers == []


@pytest.mark.parametrize("code", [5, 0xFE00, 0xFFFF])
def test_unsupported_file_type(code):
    with pytest.raises(UnsupportedFileTypeError) as excinfo:
        parse_elf32(make_elf(file_type=code))

    assert excinfo.value.code == code


def test_unknown_segment_type_in_later_entry_fails_whole_table():
    data = make_elf([make_phdr(), make_phdr(), make_phdr(p_type=0x70000000)])

    with pytest.raises(UnsupportedSegmentTypeError) as excinfo:
        parse_elf32(data)

    assert excinfo.value.code == 0x70000000


def test_bad_magic_surfaces_from_parse():
    with pytest.raises(BadMagicError):
        parse_elf32(b"\x00" * 64)


def test_buffer_shorter_than_ident():
    with pytest.raises(OutOfBoundsError) as excinfo:
        parse_elf32(b"\x7fELF\x01")

    assert (excinfo.value.start, excinfo.value.end) == (0, 16)


@pytest.mark.parametrize(
    "field_offset, width",
    [
        (16, 2),   # e_type
        (18, 2),   # e_machine
        (24, 4),   # e_entry
        (28, 4),   # e_phoff
        (32, 4),   # e_shoff
        (44, 2),   # e_phnum
        (50, 2),   # e_shstrndx
        (52, 4),   # p_type of entry 0
        (56, 4),   # p_offset of entry 0
        (80, 4),   # p_align of entry 0
    ],
)
def test_truncation_reports_field_range(worked_example, field_offset, width):
    truncated = worked_example[: field_offset + width - 1]

    with pytest.raises(OutOfBoundsError) as excinfo:
        parse_elf32(truncated)

    assert excinfo.value.start == field_offset
    assert excinfo.value.end == field_offset + width


def test_table_may_live_anywhere_in_the_file():
    gap = b"\xcc" * 12
    data = make_ident() + make_header(phoff=ELF32_EHDR_SIZE + len(gap), phnum=2)
    data += gap + make_phdr(p_type=4) + make_phdr(p_type=2)

    entries = parse_elf32(data).program_headers

    assert [e.segment_type for e in entries] == [SegmentType.NOTE, SegmentType.DYNAMIC]


def test_table_offset_past_end():
    data = make_elf(phoff=0x1000)

    with pytest.raises(OutOfBoundsError) as excinfo:
        parse_elf32(data)

    assert excinfo.value.start == 0x1000


def test_entry_size_mismatch_strict():
    data = make_elf(phentsize=56)

    with pytest.raises(EntrySizeMismatchError) as excinfo:
        parse_elf32(data)

    assert (excinfo.value.found, excinfo.value.expected) == (56, 32)


def test_entry_size_mismatch_relaxed_uses_fixed_stride():
    data = make_elf([make_phdr(), make_phdr(p_type=4)], phentsize=56)

    entries = parse_elf32(data, strict_entry_size=False).program_headers

    assert [e.segment_type for e in entries] == [SegmentType.LOAD, SegmentType.NOTE]


def test_entry_size_ignored_without_entries():
    data = make_ident() + make_header(phentsize=0, phnum=0)

    assert parse_elf32(data).program_headers == []


def test_decode_file_header_directly(worked_example):
    header = decode_file_header(worked_example, os_abi=0x61, abi_version=2)

    assert header.os_abi.code == 0x61
    assert header.abi_version == 2
    assert header.file_type is FileType.EXEC


def test_decode_program_headers_directly():
    data = b"\x00" * 8 + make_phdr(p_type=6) + make_phdr()

    entries = decode_program_headers(data, offset=8, entry_size=32, count=2)

    assert [e.segment_type for e in entries] == [SegmentType.PHDR, SegmentType.LOAD]


def test_every_failure_is_an_elf_parse_error():
    for data in (b"", b"\x00" * 52, make_elf(file_type=9), make_elf(phentsize=1)):
        with pytest.raises(ElfParseError):
            parse_elf32(data)
