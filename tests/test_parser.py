import pytest

from dray.errors import BadMessage
from dray.protocol.file_attributes import FileAttributes
from dray.protocol.request.attributes import (
    HandleAttributes,
    Open,
    OpenOptions,
    PathAttributes,
)
from dray.protocol.request.messages import (
    Handle,
    Init,
    Path,
    Read,
    Rename,
    Symlink,
    Write,
)
from dray.protocol.request.parser import Request, RequestType, parse_request
from dray.protocol.wire import encode_string, encode_u32, encode_u64


def build_message(message_type: int, payload: bytes) -> bytes:
    return encode_u32(len(payload) + 1) + bytes([message_type]) + payload


def test_parse_empty_message():
    with pytest.raises(BadMessage):
        parse_request(b"")


def test_parse_invalid_message():
    with pytest.raises(BadMessage):
        parse_request(b"\x00")


def test_parse_unknown_message_type():
    with pytest.raises(BadMessage):
        parse_request(build_message(2, encode_u32(3)))


def test_parse_zero_length_message():
    with pytest.raises(BadMessage):
        parse_request(encode_u32(0) + b"\x01\x03")


def test_parse_init_message():
    assert parse_request(build_message(1, bytes([3]))) == Request(
        RequestType.INIT, Init(version=3)
    )


def test_parse_open_message():
    payload = (
        encode_u32(1)
        + encode_string("filename")
        + encode_u32(0x00000001)
        + FileAttributes().to_bytes()
    )
    assert parse_request(build_message(3, payload)) == Request(
        RequestType.OPEN,
        Open(
            id=1,
            filename="filename",
            file_attributes=FileAttributes(),
            open_options=OpenOptions(read=True),
        ),
    )


def test_parse_close_message():
    payload = encode_u32(1) + encode_string("handle")
    assert parse_request(build_message(4, payload)) == Request(
        RequestType.CLOSE, Handle(id=1, handle="handle")
    )


def test_parse_read_message():
    payload = encode_u32(1) + encode_string("handle") + encode_u64(2) + encode_u32(3)
    assert parse_request(build_message(5, payload)) == Request(
        RequestType.READ, Read(id=1, handle="handle", offset=2, len=3)
    )


def test_parse_write_message():
    payload = encode_u32(1) + encode_string("handle") + encode_u64(2) + encode_string("test")
    assert parse_request(build_message(6, payload)) == Request(
        RequestType.WRITE, Write(id=1, handle="handle", offset=2, data=b"test")
    )


@pytest.mark.parametrize(
    "message_type, request_type",
    [
        (7, RequestType.LSTAT),
        (11, RequestType.OPENDIR),
        (13, RequestType.REMOVE),
        (15, RequestType.RMDIR),
        (16, RequestType.REALPATH),
        (17, RequestType.STAT),
        (19, RequestType.READLINK),
    ],
)
def test_parse_path_messages(message_type, request_type):
    payload = encode_u32(1) + encode_string("path")
    assert parse_request(build_message(message_type, payload)) == Request(
        request_type, Path(id=1, path="path")
    )


@pytest.mark.parametrize(
    "message_type, request_type",
    [(8, RequestType.FSTAT), (12, RequestType.READDIR)],
)
def test_parse_handle_messages(message_type, request_type):
    payload = encode_u32(1) + encode_string("handle")
    assert parse_request(build_message(message_type, payload)) == Request(
        request_type, Handle(id=1, handle="handle")
    )


@pytest.mark.parametrize(
    "message_type, request_type",
    [(9, RequestType.SETSTAT), (14, RequestType.MKDIR)],
)
def test_parse_path_attributes_messages(message_type, request_type):
    payload = encode_u32(1) + encode_string("path") + FileAttributes().to_bytes()
    assert parse_request(build_message(message_type, payload)) == Request(
        request_type,
        PathAttributes(id=1, path="path", file_attributes=FileAttributes()),
    )


def test_parse_fsetstat_message():
    payload = encode_u32(1) + encode_string("handle") + FileAttributes().to_bytes()
    assert parse_request(build_message(10, payload)) == Request(
        RequestType.FSETSTAT,
        HandleAttributes(id=1, handle="handle", file_attributes=FileAttributes()),
    )


def test_parse_rename_message():
    payload = encode_u32(1) + encode_string("oldpath") + encode_string("newpath")
    assert parse_request(build_message(18, payload)) == Request(
        RequestType.RENAME, Rename(id=1, old_path="oldpath", new_path="newpath")
    )


def test_parse_symlink_message():
    payload = encode_u32(1) + encode_string("linkpath") + encode_string("targetpath")
    assert parse_request(build_message(20, payload)) == Request(
        RequestType.SYMLINK,
        Symlink(id=1, link_path="linkpath", target_path="targetpath"),
    )


@pytest.mark.parametrize("message_type", [1, *range(3, 21)])
def test_parse_invalid_messages(message_type):
    with pytest.raises(BadMessage):
        parse_request(build_message(message_type, b""))


def test_parse_ignores_trailing_bytes():
    message = build_message(1, bytes([3])) + b"\xff\xff"
    assert parse_request(message) == Request(RequestType.INIT, Init(version=3))


def test_init_request_id():
    assert Request(RequestType.INIT, Init(version=3)).request_id() == 0


@pytest.mark.parametrize(
    "request_type, body",
    [
        (RequestType.OPEN, Open(id=1000, filename="filename")),
        (RequestType.CLOSE, Handle(id=1000, handle="handle")),
        (RequestType.READ, Read(id=1000, handle="handle", offset=0, len=0)),
        (RequestType.WRITE, Write(id=1000, handle="handle", offset=0, data=b"")),
        (RequestType.LSTAT, Path(id=1000, path="path")),
        (RequestType.FSTAT, Handle(id=1000, handle="handle")),
        (RequestType.SETSTAT, PathAttributes(id=1000, path="path")),
        (RequestType.FSETSTAT, HandleAttributes(id=1000, handle="handle")),
        (RequestType.OPENDIR, Path(id=1000, path="path")),
        (RequestType.READDIR, Handle(id=1000, handle="handle")),
        (RequestType.REMOVE, Path(id=1000, path="path")),
        (RequestType.MKDIR, PathAttributes(id=1000, path="path")),
        (RequestType.RMDIR, Path(id=1000, path="path")),
        (RequestType.REALPATH, Path(id=1000, path="path")),
        (RequestType.STAT, Path(id=1000, path="path")),
        (RequestType.RENAME, Rename(id=1000, old_path="old", new_path="new")),
        (RequestType.READLINK, Path(id=1000, path="path")),
        (RequestType.SYMLINK, Symlink(id=1000, link_path="link", target_path="target")),
    ],
)
def test_request_id(request_type, body):
    assert Request(request_type, body).request_id() == 1000


@pytest.mark.parametrize(
    "request_type, payload, body",
    [
        (RequestType.INIT, bytes([3]), Init(version=3)),
        (
            RequestType.STAT,
            encode_u32(1) + encode_string("path"),
            Path(id=1, path="path"),
        ),
        (
            RequestType.SYMLINK,
            encode_u32(1) + encode_string("a") + encode_string("b"),
            Symlink(id=1, link_path="a", target_path="b"),
        ),
    ],
)
def test_request_type_value_is_the_wire_type(request_type, payload, body):
    assert parse_request(build_message(int(request_type), payload)) == Request(
        request_type, body
    )