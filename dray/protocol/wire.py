"""Big-endian SFTP wire primitives: a reader for incoming data and encoders."""

from __future__ import annotations

import struct

from ..errors import BadMessage

__all__ = ["Reader", "encode_u32", "encode_u64", "encode_string"]

_U8 = struct.Struct(">B")
_U32 = struct.Struct(">I")
_U64 = struct.Struct(">Q")


class Reader:
    """Consumes values from a byte string in SFTP wire order.

    Every read that would run past the end of the data raises
    :class:`BadMessage` and consumes nothing.
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._offset = 0

    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self._data) - self._offset

    def _take(self, length: int) -> bytes:
        if length < 0 or length > self.remaining():
            raise BadMessage()
        start = self._offset
        self._offset += length
        return self._data[start : self._offset]

    def read_u8(self) -> int:
        return _U8.unpack(self._take(_U8.size))[0]

    def read_u32(self) -> int:
        return _U32.unpack(self._take(_U32.size))[0]

    def read_u64(self) -> int:
        return _U64.unpack(self._take(_U64.size))[0]

    def read_bytes(self, length: int) -> bytes:
        return self._take(length)

    def read_string(self) -> str:
        """Read a length-prefixed UTF-8 string."""
        start = self._offset
        length = self.read_u32()
        try:
            raw = self._take(length)
            return raw.decode("utf-8")
        except (BadMessage, UnicodeDecodeError) as exc:
            self._offset = start
            raise BadMessage() from exc


def _pack(packer: struct.Struct, value: int) -> bytes:
    try:
        return packer.pack(value)
    except struct.error as exc:
        raise ValueError(f"{value!r} does not fit in {packer.size} bytes") from exc


def encode_u32(value: int) -> bytes:
    return _pack(_U32, value)


def encode_u64(value: int) -> bytes:
    return _pack(_U64, value)


def encode_string(value: str | bytes) -> bytes:
    """Encode text (as UTF-8) or raw bytes with a 32-bit length prefix."""
    raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return encode_u32(len(raw)) + raw