"""Errors raised while serving SFTP requests."""

from __future__ import annotations

import errno

__all__ = [
    "DrayError",
    "BadMessage",
    "ConfigurationError",
    "EndOfFile",
    "Failure",
    "IOFailure",
    "NoSuchFile",
    "PermissionDenied",
    "StorageError",
    "Unimplemented",
    "error_from_os_error",
]


class DrayError(Exception):
    """Base class for every error the server reports.

    Two errors compare equal when they are of the same class and carry the
    same arguments, so they can be matched and used as dictionary keys.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrayError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class BadMessage(DrayError):
    """A client message could not be decoded."""

    def __init__(self) -> None:
        super().__init__("Bad message received from client.")


class ConfigurationError(DrayError):
    """The server configuration is missing or invalid."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Configuration error: {detail}")
        self.detail = detail


class EndOfFile(DrayError):
    """A stream or file ended before the expected data arrived."""

    def __init__(self) -> None:
        super().__init__("End of file.")


class Failure(DrayError):
    """A general failure described by its message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IOFailure(DrayError):
    """An input/output operation failed; ``kind`` names the failure."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"IO Error: {kind}")
        self.kind = kind


class NoSuchFile(DrayError):
    """The requested file does not exist."""

    def __init__(self) -> None:
        super().__init__("File not found.")


class PermissionDenied(DrayError):
    """The client may not perform the requested operation."""

    def __init__(self) -> None:
        super().__init__("Permission denied.")


class StorageError(DrayError):
    """The storage backend reported a problem."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"An error occurred with the storage backend: {detail}")
        self.detail = detail


class Unimplemented(DrayError):
    """The SFTP request type is not supported."""

    def __init__(self) -> None:
        super().__init__("SFTP request not implemented.")


def error_from_os_error(error: BaseException) -> DrayError:
    """Map an I/O exception to the matching server error.

    An unexpected end of input becomes :class:`EndOfFile`; any other failure
    becomes :class:`IOFailure` named after its errno code, or after its class
    when it carries no errno.
    """
    if isinstance(error, EOFError):
        return EndOfFile()
    code = getattr(error, "errno", None)
    kind = errno.errorcode.get(code) if isinstance(code, int) else None
    return IOFailure(kind or type(error).__name__)