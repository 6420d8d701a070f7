"""SFTP file attributes and their wire form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .wire import Reader, encode_u32, encode_u64

__all__ = ["FileAttributes"]

_SIZE = 0x00000001
_UIDGID = 0x00000002
_PERMISSIONS = 0x00000004
_ACMODTIME = 0x00000008

_DIRECTORY_BIT = 14


@dataclass
class FileAttributes:
    """Attributes of a file; fields left as ``None`` are not sent."""

    size: Optional[int] = None
    uid: Optional[int] = None
    gid: Optional[int] = None
    permissions: Optional[int] = None
    atime: Optional[int] = None
    mtime: Optional[int] = None

    def is_dir(self) -> bool:
        """Whether the permissions mark the file as a directory."""
        if self.permissions is None:
            return False
        return (self.permissions >> _DIRECTORY_BIT) & 0x1 == 0x1

    @classmethod
    def from_reader(cls, reader: Reader) -> "FileAttributes":
        """Decode attributes from ``reader``; raises BadMessage if truncated."""
        flags = reader.read_u32()
        size = reader.read_u64() if flags & _SIZE else None
        uid = gid = None
        if flags & _UIDGID:
            uid = reader.read_u32()
            gid = reader.read_u32()
        permissions = reader.read_u32() if flags & _PERMISSIONS else None
        atime = mtime = None
        if flags & _ACMODTIME:
            atime = reader.read_u32()
            mtime = reader.read_u32()
        return cls(
            size=size,
            uid=uid,
            gid=gid,
            permissions=permissions,
            atime=atime,
            mtime=mtime,
        )

    def to_bytes(self) -> bytes:
        """Encode the attributes; a missing half of a pair is sent as 0."""
        has_ids = self.uid is not None or self.gid is not None
        has_times = self.atime is not None or self.mtime is not None

        flags = 0
        parts = []
        if self.size is not None:
            flags |= _SIZE
            parts.append(encode_u64(self.size))
        if has_ids:
            flags |= _UIDGID
            parts.append(encode_u32(self.uid or 0))
            parts.append(encode_u32(self.gid or 0))
        if self.permissions is not None:
            flags |= _PERMISSIONS
            parts.append(encode_u32(self.permissions))
        if has_times:
            flags |= _ACMODTIME
            parts.append(encode_u32(self.atime or 0))
            parts.append(encode_u32(self.mtime or 0))

        return encode_u32(flags) + b"".join(parts)