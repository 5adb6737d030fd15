from shared.console import PeekConsole

from conftest import make_elf
from peekelf.output.console import NO_PROGRAM_HEADERS, PeekConsoleOutput
from peekelf.parsers.elf_parser import parse_elf32


def _render(image, **kwargs) -> list[str]:
    console = PeekConsole(record=True)
    table = kwargs.pop("table", False)
    PeekConsoleOutput(console=console, table=table).display(image, **kwargs)
    return console.export_text().splitlines()


def test_display_all_has_no_prelude(worked_example):
    lines = _render(parse_elf32(worked_example))

    assert lines[0] == "ELF Header:"
    assert "Program Headers:" in lines
    assert lines[lines.index("Program Headers:") - 1] == ""
    assert not any(line.startswith("Elf file type is") for line in lines)


def test_program_headers_alone_print_prelude(worked_example):
    lines = _render(parse_elf32(worked_example), file_header=False)

    assert lines[0] == "Elf file type is EXEC (Executable file)"
    assert lines[2] == "There are 1 program headers, starting at offset 52"
    assert lines[4] == "Program Headers:"
    assert "ELF Header:" not in lines


def test_file_header_alone(worked_example):
    lines = _render(parse_elf32(worked_example), program_headers=False)

    assert lines[0] == "ELF Header:"
    assert "Program Headers:" not in lines
    assert len(lines) == 20


def test_no_program_headers():
    image = parse_elf32(make_elf([], phnum=0))

    lines = _render(image, file_header=False)

    assert lines == [NO_PROGRAM_HEADERS]


def test_table_mode(worked_example):
    text = "\n".join(_render(parse_elf32(worked_example), table=True))

    assert "ELF Header" in text
    assert "Program Headers" in text
    assert "LOAD" in text
