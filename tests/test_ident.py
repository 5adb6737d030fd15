import pytest

from conftest import make_ident
from peekelf.core.errors import (
    BadMagicError,
    UnsupportedClassError,
    UnsupportedEndiannessError,
    UnsupportedVersionError,
)
from peekelf.parsers.ident import verify_identification


def test_valid_ident_returns_os_abi_and_abi_version():
    assert verify_identification(make_ident(os_abi=3, abi_version=7)) == (3, 7)


def test_padding_is_ignored():
    ident = make_ident()[:9] + b"\xff" * 7

    assert verify_identification(ident) == (0, 0)


def test_bad_magic_carries_the_four_bytes():
    with pytest.raises(BadMagicError) as excinfo:
        verify_identification(make_ident(magic=b"MZ\x90\x00"))

    assert excinfo.value.magic == b"MZ\x90\x00"
    assert str(excinfo.value) == "Invalid magic bytes: 4D 5A 90 00"


def test_elf64_rejected_with_class():
    with pytest.raises(UnsupportedClassError) as excinfo:
        verify_identification(make_ident(elf_class=2))

    assert excinfo.value.elf_class == 2


def test_big_endian_rejected():
    with pytest.raises(UnsupportedEndiannessError) as excinfo:
        verify_identification(make_ident(encoding=2))

    assert excinfo.value.encoding == 2


def test_bad_version_rejected():
    with pytest.raises(UnsupportedVersionError) as excinfo:
        verify_identification(make_ident(version=0))

    assert (excinfo.value.found, excinfo.value.expected) == (0, 1)


def test_checks_run_in_order():
    """Magic is checked before class, class before encoding."""
    with pytest.raises(BadMagicError):
        verify_identification(make_ident(magic=b"\x7fELG", elf_class=2, encoding=2, version=9))

    with pytest.raises(UnsupportedClassError):
        verify_identification(make_ident(elf_class=0, encoding=2, version=9))

    with pytest.raises(UnsupportedEndiannessError):
        verify_identification(make_ident(encoding=0, version=9))


def test_wrong_length_is_a_programming_error():
    with pytest.raises(ValueError):
        verify_identification(make_ident()[:15])
