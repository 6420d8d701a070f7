"""Request bodies that carry paths, handles or file data."""

from __future__ import annotations

from dataclasses import dataclass

from ..wire import Reader

__all__ = ["Init", "Handle", "Path", "Rename", "Symlink", "Read", "Write"]


@dataclass
class Init:
    """The client's opening message, naming its protocol version."""

    version: int

    def request_id(self) -> int:
        """Init carries no request id, so it is always 0."""
        return 0

    @classmethod
    def from_reader(cls, reader: Reader) -> "Init":
        return cls(version=reader.read_u8())


@dataclass
class Handle:
    """A request that refers to an open file or directory handle."""

    id: int
    handle: str

    def request_id(self) -> int:
        return self.id

    @classmethod
    def from_reader(cls, reader: Reader) -> "Handle":
        request_id = reader.read_u32()
        handle = reader.read_string()
        return cls(id=request_id, handle=handle)


@dataclass
class Path:
    """A request that refers to a path."""

    id: int
    path: str

    def request_id(self) -> int:
        return self.id

    @classmethod
    def from_reader(cls, reader: Reader) -> "Path":
        request_id = reader.read_u32()
        path = reader.read_string()
        return cls(id=request_id, path=path)

    def normalized(self) -> str:
        """The path made absolute, with empty, ``.`` and ``..`` parts resolved.

        ``..`` never climbs above the root.
        """
        kept: list[str] = []
        to_skip = 0
        for component in reversed(self.path.split("/")):
            if component in ("", "."):
                continue
            if component == "..":
                to_skip += 1
            elif to_skip:
                to_skip -= 1
            else:
                kept.append(component)
        if not kept:
            return "/"
        return "/" + "/".join(reversed(kept))


@dataclass
class Rename:
    """A request to move ``old_path`` to ``new_path``."""

    id: int
    old_path: str
    new_path: str

    def request_id(self) -> int:
        return self.id

    @classmethod
    def from_reader(cls, reader: Reader) -> "Rename":
        request_id = reader.read_u32()
        old_path = reader.read_string()
        new_path = reader.read_string()
        return cls(id=request_id, old_path=old_path, new_path=new_path)


@dataclass
class Symlink:
    """A request to create a symbolic link at ``link_path``."""

    id: int
    link_path: str
    target_path: str

    def request_id(self) -> int:
        return self.id

    @classmethod
    def from_reader(cls, reader: Reader) -> "Symlink":
        request_id = reader.read_u32()
        link_path = reader.read_string()
        target_path = reader.read_string()
        return cls(id=request_id, link_path=link_path, target_path=target_path)


@dataclass
class Read:
    """A request to read ``len`` bytes at ``offset`` from a handle."""

    id: int
    handle: str
    offset: int
    len: int

    def request_id(self) -> int:
        return self.id

    @classmethod
    def from_reader(cls, reader: Reader) -> "Read":
        request_id = reader.read_u32()
        handle = reader.read_string()
        offset = reader.read_u64()
        length = reader.read_u32()
        return cls(id=request_id, handle=handle, offset=offset, len=length)


@dataclass(repr=False)
class Write:
    """A request to write ``data`` at ``offset`` to a handle."""

    id: int
    handle: str
    offset: int
    data: bytes

    def request_id(self) -> int:
        return self.id

    @classmethod
    def from_reader(cls, reader: Reader) -> "Write":
        request_id = reader.read_u32()
        handle = reader.read_string()
        offset = reader.read_u64()
        data_length = reader.read_u32()
        data = reader.read_bytes(data_length)
        return cls(id=request_id, handle=handle, offset=offset, data=data)

    def __repr__(self) -> str:
        # The payload can be large, so only its length is shown.
        return (
            f"Write(id={self.id!r}, handle={self.handle!r}, "
            f"offset={self.offset!r}, len={len(self.data)})"
        )