"""Request bodies that carry file attributes: open, setstat and fsetstat."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..file_attributes import FileAttributes
from ..wire import Reader

__all__ = ["OpenOptions", "Open", "PathAttributes", "HandleAttributes"]

_READ = 0x00000001
_WRITE = 0x00000002
_APPEND = 0x00000004
_CREAT = 0x00000008
_TRUNC = 0x00000010
_EXCL = 0x00000020


@dataclass
class OpenOptions:
    """How a file is to be opened, decoded from the SFTP pflags."""

    read: bool = False
    write: bool = False
    create: bool = False
    create_new_only: bool = False
    append: bool = False
    truncate: bool = False

    @classmethod
    def from_flags(cls, flags: int) -> "OpenOptions":
        """Build the options from a pflags bitmask."""
        return cls(
            read=flags & _READ == _READ,
            write=flags & _WRITE == _WRITE,
            create=flags & _CREAT == _CREAT,
            create_new_only=flags & _EXCL == _EXCL,
            append=flags & _APPEND == _APPEND,
            truncate=flags & _TRUNC == _TRUNC,
        )

    @classmethod
    def from_reader(cls, reader: Reader) -> "OpenOptions":
        return cls.from_flags(reader.read_u32())


@dataclass
class Open:
    """A request to open ``filename`` with the given options and attributes."""

    id: int
    filename: str
    file_attributes: FileAttributes = field(default_factory=FileAttributes)
    open_options: OpenOptions = field(default_factory=OpenOptions)

    def request_id(self) -> int:
        return self.id

    @classmethod
    def from_reader(cls, reader: Reader) -> "Open":
        request_id = reader.read_u32()
        filename = reader.read_string()
        open_options = OpenOptions.from_reader(reader)
        file_attributes = FileAttributes.from_reader(reader)
        return cls(
            id=request_id,
            filename=filename,
            file_attributes=file_attributes,
            open_options=open_options,
        )


@dataclass
class PathAttributes:
    """A request that applies attributes to a path."""

    id: int
    path: str
    file_attributes: FileAttributes = field(default_factory=FileAttributes)

    def request_id(self) -> int:
        return self.id

    @classmethod
    def from_reader(cls, reader: Reader) -> "PathAttributes":
        request_id = reader.read_u32()
        path = reader.read_string()
        file_attributes = FileAttributes.from_reader(reader)
        return cls(id=request_id, path=path, file_attributes=file_attributes)


@dataclass
class HandleAttributes:
    """A request that applies attributes to an open handle."""

    id: int
    handle: str
    file_attributes: FileAttributes = field(default_factory=FileAttributes)

    def request_id(self) -> int:
        return self.id

    @classmethod
    def from_reader(cls, reader: Reader) -> "HandleAttributes":
        request_id = reader.read_u32()
        handle = reader.read_string()
        file_attributes = FileAttributes.from_reader(reader)
        return cls(id=request_id, handle=handle, file_attributes=file_attributes)