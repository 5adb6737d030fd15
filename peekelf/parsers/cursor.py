"""
Byte Cursor
============

Sequential fixed-width reader over an immutable byte buffer.

A :class:`ByteCursor` pairs a read-only view of the input with a read
offset.  Every read either advances the offset by exactly the field
width or raises :class:`~peekelf.core.errors.OutOfBoundsError` carrying
the requested ``[start, end)`` range, leaving the offset untouched.
All multi-byte reads are little-endian.
"""

from __future__ import annotations

import struct

from peekelf.core.errors import OutOfBoundsError


_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class ByteCursor:
    """Little-endian reader with an explicit, bounds-checked offset.

    Usage::

        cursor = ByteCursor(data, offset=16)
        e_type = cursor.read_u16()
        cursor.skip(4)
    """

    __slots__ = ("_view", "_offset")

    def __init__(self, data: bytes, offset: int = 0) -> None:
        """Create a cursor over *data* positioned at *offset*.

        The starting offset is not checked against the buffer length;
        an offset past the end surfaces as an error on the first read.
        """
        if offset < 0:
            raise ValueError(f"negative cursor offset: {offset}")
        self._view = memoryview(data).toreadonly()
        self._offset = offset

    @property
    def offset(self) -> int:
        """Offset of the next byte to be read."""
        return self._offset

    def __len__(self) -> int:
        return len(self._view)

    def _take(self, width: int) -> memoryview:
        start = self._offset
        end = start + width
        if end > len(self._view):
            raise OutOfBoundsError(start, end)
        self._offset = end
        return self._view[start:end]

    def read_bytes(self, width: int) -> bytes:
        """Read *width* raw bytes."""
        return bytes(self._take(width))

    def read_u8(self) -> int:
        return _U8.unpack(self._take(_U8.size))[0]

    def read_u16(self) -> int:
        return _U16.unpack(self._take(_U16.size))[0]

    def read_u32(self) -> int:
        return _U32.unpack(self._take(_U32.size))[0]

    def skip(self, width: int) -> None:
        """Advance past *width* bytes, with the same bounds check as a read."""
        self._take(width)
