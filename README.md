# dray

`dray` reads and writes the messages of the SFTP protocol, version 3. It
turns raw client packets into request objects and turns response objects
into packets ready to be sent back over an SSH channel. It uses only the
standard library.

## Installation

```
pip install .
```

## Parsing requests

`dray.protocol.request.parser.parse_request` takes one complete packet
(32-bit length prefix, type byte and payload) and returns a `Request`,
which holds the packet's `type` (a `RequestType`) and its `body`. A packet
that is truncated, malformed or of an unknown type raises
`dray.errors.BadMessage`; bytes after the packet are ignored.

```python
from dray.errors import BadMessage
from dray.protocol.request.parser import parse_request

try:
    request = parse_request(packet)
except BadMessage:
    ...
else:
    print(request.type, request.request_id())
```

The bodies are dataclasses:

- `dray.protocol.request.messages`: `Init`, `Handle`, `Path`, `Rename`,
  `Symlink`, `Read` and `Write`.
- `dray.protocol.request.attributes`: `Open` (with its `OpenOptions`),
  `PathAttributes` and `HandleAttributes`.

`request_id()` returns the id the client gave the request; for `Init` it
is always 0. The `repr` of a `Write` shows the length of its data rather
than the data itself.

`Path.normalized()` makes a client path absolute and resolves empty, `.`
and `..` components without climbing above the root:
`"sample/../path/"` becomes `"/path"` and `"/../.."` becomes `"/"`.

## Building responses

Response bodies live in `dray.protocol.response.bodies`: `Version`,
`Status` (with a `StatusCode`), `Handle`, `Data`, `Attrs` and `Name`, a
list of `File` entries. Each has `to_bytes()` for its payload.
`File.long_name()` gives an `ls -l` style line, with the modification time
shown in UTC.

`dray.protocol.response.packet.encode_response` frames a body as a
complete packet, and `response_type` tells which `ResponseType` carries a
body:

```python
from dray.protocol.response.bodies import Status, StatusCode
from dray.protocol.response.packet import encode_response

packet = encode_response(Status(id=1, status_code=StatusCode.OK, error_message="OK"))
```

## Errors

`dray.errors` defines `DrayError` and its subclasses `BadMessage`,
`ConfigurationError`, `EndOfFile`, `Failure`, `IOFailure`, `NoSuchFile`,
`PermissionDenied`, `StorageError` and `Unimplemented`. Errors of the same
class with the same arguments compare equal. `error_from_os_error` turns
an `EOFError` into `EndOfFile` and any other exception into an
`IOFailure` named after its errno code.

`build_error_response(request_id, error)` gives the `Status` that reports
an error: `BadMessage`, `NoSuchFile`, `PermissionDenied` and
`Unimplemented` get their own status codes and messages, and everything
else becomes a generic failure.

## File attributes and wire primitives

`dray.protocol.file_attributes.FileAttributes` holds the optional size,
uid, gid, permissions, atime and mtime fields. `to_bytes()` writes only
the fields that are set (when one of uid/gid or atime/mtime is set, the
other of the pair is sent as 0), and `FileAttributes.from_reader()` reads
them back. `is_dir()` checks the directory bit of the permissions.

`dray.protocol.wire.Reader` consumes big-endian integers, byte runs and
length-prefixed strings, raising `BadMessage` on a read past the end;
`encode_u32`, `encode_u64` and `encode_string` write them.

## What this package does not do

It handles messages only. It has no SSH server, no session handling, no
storage backend that carries out the requests, and no command to run.

## Running the tests

```
pip install ".[test]"
pytest
```