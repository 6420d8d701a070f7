"""Response bodies and their wire form."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..file_attributes import FileAttributes
from ..wire import encode_string, encode_u32

__all__ = [
    "Version",
    "StatusCode",
    "Status",
    "Handle",
    "Data",
    "Attrs",
    "File",
    "Name",
]

_LANGUAGE_TAG = "en-US"
_DIRECTORY_BIT = 14
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass
class Version:
    """The server's reply to Init, naming the protocol version it speaks."""

    version: int

    def to_bytes(self) -> bytes:
        return encode_u32(self.version)


class StatusCode(enum.IntEnum):
    """SFTP status codes."""

    OK = 0
    EOF = 1
    NO_SUCH_FILE = 2
    PERMISSION_DENIED = 3
    FAILURE = 4
    BAD_MESSAGE = 5
    NO_CONNECTION = 6
    CONNECTION_LOST = 7
    OPERATION_UNSUPPORTED = 8


@dataclass
class Status:
    """The outcome of a request, with a message for the user."""

    id: int
    status_code: StatusCode
    error_message: str

    def to_bytes(self) -> bytes:
        return (
            encode_u32(self.id)
            + encode_u32(int(self.status_code))
            + encode_string(self.error_message)
            + encode_string(_LANGUAGE_TAG)
        )


@dataclass
class Handle:
    """A handle for a file or directory the client has opened."""

    id: int
    handle: str

    def to_bytes(self) -> bytes:
        return encode_u32(self.id) + encode_string(self.handle)


@dataclass(repr=False)
class Data:
    """Bytes read from a file."""

    id: int
    data: bytes = b""

    def to_bytes(self) -> bytes:
        return encode_u32(self.id) + encode_string(bytes(self.data))

    def __repr__(self) -> str:
        # The payload can be large, so only its length is shown.
        return f"Data(id={self.id!r}, len={len(self.data)})"


@dataclass
class Attrs:
    """The attributes of a single file."""

    id: int
    file_attributes: FileAttributes = field(default_factory=FileAttributes)

    def to_bytes(self) -> bytes:
        return encode_u32(self.id) + self.file_attributes.to_bytes()


def _decode_permission(bits: int) -> str:
    return (
        ("r" if bits & 0x4 else "-")
        + ("w" if bits & 0x2 else "-")
        + ("x" if bits & 0x1 else "-")
    )


def _format_mtime(mtime: int) -> str:
    moment = datetime.fromtimestamp(mtime, tz=timezone.utc)
    return (
        f"{_MONTHS[moment.month - 1]} {moment.day:02d} {moment.year} "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


@dataclass
class File:
    """One entry of a name listing."""

    file_name: str
    file_attributes: FileAttributes = field(default_factory=FileAttributes)

    def _permissions(self) -> str:
        permissions = self.file_attributes.permissions or 0
        directory = "d" if (permissions >> _DIRECTORY_BIT) & 0x1 else "-"
        return (
            directory
            + _decode_permission((permissions >> 6) & 0x7)
            + _decode_permission((permissions >> 3) & 0x7)
            + _decode_permission(permissions & 0x7)
        )

    def long_name(self) -> str:
        """An ``ls -l`` style line describing the file; times are in UTC."""
        attributes = self.file_attributes
        return (
            f"{self._permissions()} 0 {attributes.uid or 0} {attributes.gid or 0} "
            f"{attributes.size or 0} {_format_mtime(attributes.mtime or 0)} "
            f"{self.file_name}"
        )

    def to_bytes(self) -> bytes:
        return (
            encode_string(self.file_name)
            + encode_string(self.long_name())
            + self.file_attributes.to_bytes()
        )


@dataclass
class Name:
    """A listing of files, as returned by readdir or realpath."""

    id: int
    files: list[File] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return (
            encode_u32(self.id)
            + encode_u32(len(self.files))
            + b"".join(file.to_bytes() for file in self.files)
        )