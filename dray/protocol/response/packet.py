"""Framing of SFTP response packets and mapping of errors to status replies."""

from __future__ import annotations

import enum
from typing import Union

from ...errors import BadMessage, NoSuchFile, PermissionDenied, Unimplemented
from ..wire import encode_u32
from .bodies import Attrs, Data, Handle, Name, Status, StatusCode, Version

__all__ = [
    "ResponseType",
    "response_type",
    "encode_response",
    "build_error_response",
]

# The type byte is counted in the packet length.
_DATA_TYPE_LENGTH = 1

ResponseBody = Union[Version, Status, Handle, Data, Name, Attrs]


class ResponseType(enum.IntEnum):
    """SFTP response packet types sent by the server."""

    VERSION = 2
    STATUS = 101
    HANDLE = 102
    DATA = 103
    NAME = 104
    ATTRS = 105


_TYPES_BY_BODY = {
    Version: ResponseType.VERSION,
    Status: ResponseType.STATUS,
    Handle: ResponseType.HANDLE,
    Data: ResponseType.DATA,
    Name: ResponseType.NAME,
    Attrs: ResponseType.ATTRS,
}

_ERROR_STATUSES = {
    BadMessage: (StatusCode.BAD_MESSAGE, "The client sent a bad message."),
    NoSuchFile: (StatusCode.NO_SUCH_FILE, "The requested file was not found."),
    PermissionDenied: (
        StatusCode.PERMISSION_DENIED,
        "The client has insufficient privileges to perform the requested operation.",
    ),
    Unimplemented: (
        StatusCode.OPERATION_UNSUPPORTED,
        "The requested operation is unsupported.",
    ),
}

_GENERIC_FAILURE = (StatusCode.FAILURE, "An error occurred on the server.")


def response_type(body: ResponseBody) -> ResponseType:
    """The packet type that carries ``body``.

    Raises :class:`TypeError` for an object that is not a response body.
    """
    try:
        return _TYPES_BY_BODY[type(body)]
    except KeyError:
        raise TypeError(f"{type(body).__name__} is not a response body") from None


def encode_response(body: ResponseBody) -> bytes:
    """Frame ``body`` as a length-prefixed response packet."""
    packet_type = response_type(body)
    payload = body.to_bytes()
    return (
        encode_u32(_DATA_TYPE_LENGTH + len(payload))
        + bytes([int(packet_type)])
        + payload
    )


def build_error_response(request_id: int, error: BaseException) -> Status:
    """The status reply that reports ``error`` for the request ``request_id``."""
    status_code, message = _ERROR_STATUSES.get(type(error), _GENERIC_FAILURE)
    return Status(id=request_id, status_code=status_code, error_message=message)