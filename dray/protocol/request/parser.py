"""Decoding of framed SFTP request packets."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from ...errors import BadMessage
from ..wire import Reader
from .attributes import HandleAttributes, Open, PathAttributes
from .messages import Handle, Init, Path, Read, Rename, Symlink, Write

__all__ = ["RequestType", "Request", "parse_request"]

# The type byte is counted in the packet length.
_DATA_TYPE_LENGTH = 1

RequestBody = Union[
    Init, Open, Handle, Read, Write, Path, PathAttributes, HandleAttributes, Rename, Symlink
]


class RequestType(enum.IntEnum):
    """SFTP request packet types understood by the server."""

    INIT = 1
    OPEN = 3
    CLOSE = 4
    READ = 5
    WRITE = 6
    LSTAT = 7
    FSTAT = 8
    SETSTAT = 9
    FSETSTAT = 10
    OPENDIR = 11
    READDIR = 12
    REMOVE = 13
    MKDIR = 14
    RMDIR = 15
    REALPATH = 16
    STAT = 17
    RENAME = 18
    READLINK = 19
    SYMLINK = 20


_BODY_TYPES = {
    RequestType.INIT: Init,
    RequestType.OPEN: Open,
    RequestType.CLOSE: Handle,
    RequestType.READ: Read,
    RequestType.WRITE: Write,
    RequestType.LSTAT: Path,
    RequestType.FSTAT: Handle,
    RequestType.SETSTAT: PathAttributes,
    RequestType.FSETSTAT: HandleAttributes,
    RequestType.OPENDIR: Path,
    RequestType.READDIR: Handle,
    RequestType.REMOVE: Path,
    RequestType.MKDIR: PathAttributes,
    RequestType.RMDIR: Path,
    RequestType.REALPATH: Path,
    RequestType.STAT: Path,
    RequestType.RENAME: Rename,
    RequestType.READLINK: Path,
    RequestType.SYMLINK: Symlink,
}


@dataclass
class Request:
    """A decoded request: its packet type and its body."""

    type: RequestType
    body: RequestBody

    def request_id(self) -> int:
        """The id the client gave the request (0 for Init)."""
        return self.body.request_id()


def parse_request(data: bytes | bytearray | memoryview) -> Request:
    """Decode one length-prefixed request packet.

    Raises :class:`BadMessage` when the packet is truncated, malformed or of
    an unknown type. Bytes after the packet are ignored.
    """
    reader = Reader(data)
    data_length = reader.read_u32()
    data_type = reader.read_u8()
    payload = Reader(reader.read_bytes(data_length - _DATA_TYPE_LENGTH))

    try:
        request_type = RequestType(data_type)
    except ValueError:
        raise BadMessage() from None

    body = _BODY_TYPES[request_type].from_reader(payload)
    return Request(type=request_type, body=body)