import gzip
import io
import os
import pathlib
import tempfile

import pytest

from streamutil.metadata import (
    StreamMetadata,
    get_metadata,
    get_metadata_key,
    get_size,
    get_uri,
    get_usable_uri,
    is_appendable,
    is_readable,
    is_seekable,
    is_writable,
)
from tests.streamutil.testing_utils import (
    DATA,
    NonSeekableBytesIO,
    ReadOnlyRawStream,
)


class LyingBufferedReader(io.BufferedReader):
    def seekable(self) -> bool:
        return True


class NonSeekableRaw(io.RawIOBase):
    def __init__(self, data: bytes):
        self._inner = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        return self._inner.readinto(b)


def test_memory_stream_metadata(memory_stream: io.BytesIO):
    assert get_metadata(memory_stream) == StreamMetadata(
        mode="rb+",
        seekable=True,
        uri=None,
        stream_type="BytesIO",
        closed=False,
    )


def test_closed_memory_stream_metadata():
    stream = io.BytesIO(DATA)
    stream.close()
    meta = get_metadata(stream)
    assert meta.mode is None
    assert meta.seekable is False
    assert meta.closed is True
    assert not is_readable(stream)
    assert not is_writable(stream)
    assert not is_appendable(stream)


def test_text_memory_stream_mode():
    stream = io.StringIO("abc")
    assert get_metadata(stream).mode == "r+"
    assert is_readable(stream)
    assert is_writable(stream)


def test_file_stream_metadata(sample_file: pathlib.Path):
    with open(sample_file, "rb") as f:
        meta = get_metadata(f)
        assert meta.mode == "rb"
        assert meta.seekable is True
        assert meta.uri == str(sample_file)
        assert meta.stream_type == "BufferedReader"
        assert is_readable(f)
        assert not is_writable(f)
        assert not is_appendable(f)


@pytest.mark.parametrize(
    "mode, readable, writable, appendable",
    [
        ("rb", True, False, False),
        ("r", True, False, False),
        ("r+b", True, True, False),
        ("wb", False, True, False),
        ("w+", True, True, False),
        ("ab", False, True, True),
        ("a+", True, True, True),
        ("ab+", True, True, True),
    ],
)
def test_file_stream_predicates(
    sample_file: pathlib.Path, mode: str, readable: bool, writable: bool, appendable: bool
):
    with open(sample_file, mode) as f:
        assert is_readable(f) == readable
        assert is_writable(f) == writable
        assert is_appendable(f) == appendable


def test_non_string_mode_attribute_is_inferred():
    with gzip.GzipFile(fileobj=io.BytesIO(), mode="wb") as f:
        assert get_metadata(f).mode == "wb"
        assert is_writable(f)
        assert not is_readable(f)


def test_object_without_io_methods():
    stream = ReadOnlyRawStream(DATA, url="https://example.com/data.bin")
    meta = get_metadata(stream)
    assert meta.mode == "rb"
    assert meta.seekable is False
    assert meta.uri == "https://example.com/data.bin"
    assert meta.stream_type == "ReadOnlyRawStream"
    assert meta.closed is False


def test_get_metadata_key(memory_stream: io.BytesIO):
    assert get_metadata_key(memory_stream, "mode") == "rb+"
    assert get_metadata_key(memory_stream, "seekable") is True
    assert get_metadata_key(memory_stream, "uri") is None
    assert get_metadata_key(memory_stream, "wrapper_data") is None


def test_is_seekable():
    assert is_seekable(io.BytesIO(DATA))
    assert not is_seekable(NonSeekableBytesIO(DATA))
    assert not is_seekable(ReadOnlyRawStream(DATA))


def test_is_seekable_checks_raw_stream_of_buffered_reader():
    stream = LyingBufferedReader(NonSeekableRaw(DATA))
    assert stream.seekable()
    assert not is_seekable(stream)


def test_get_uri_of_memory_stream_is_none(memory_stream: io.BytesIO):
    assert get_uri(memory_stream) is None
    assert get_usable_uri(memory_stream) is None


def test_get_usable_uri(sample_file: pathlib.Path):
    with open(sample_file, "rb") as f:
        assert get_uri(f) == str(sample_file)
        assert get_usable_uri(f) == str(sample_file)

        sample_file.unlink()
        assert get_uri(f) == str(sample_file)
        assert get_usable_uri(f) is None


def test_get_uri_ignores_file_descriptors():
    r, w = os.pipe()
    with open(r, "rb") as reader, open(w, "wb") as writer:
        assert get_uri(reader) is None
        assert get_uri(writer) is None
        assert not is_seekable(reader)
        assert get_size(reader) == 0


def test_get_size_of_memory_stream():
    stream = io.BytesIO()
    assert get_size(stream) == 0
    stream.write(b"a" * 10)
    assert get_size(stream) == 10


def test_get_size_preserves_position(memory_stream: io.BytesIO):
    memory_stream.seek(3)
    assert get_size(memory_stream) == len(DATA)
    assert memory_stream.tell() == 3


def test_get_size_of_file_flushes_pending_writes(tmp_path: pathlib.Path):
    with open(tmp_path / "out.bin", "wb") as f:
        f.write(b"a" * 10)
        assert get_size(f) == 10


def test_get_size_of_spooled_file_stays_in_memory():
    with tempfile.SpooledTemporaryFile(max_size=1024) as f:
        f.write(b"a" * 10)
        assert get_size(f) == 10
        assert not f._rolled


def test_get_size_of_stream_without_size_is_zero():
    assert get_size(ReadOnlyRawStream(DATA)) == 0


def test_get_size_of_text_memory_stream_is_zero():
    # Seeking would count characters, not bytes.
    assert get_size(io.StringIO("é" * 5)) == 0


def test_spooled_file_is_seekable_without_seekable_method(monkeypatch):
    # SpooledTemporaryFile has no seekable() before Python 3.11.
    monkeypatch.delattr(tempfile.SpooledTemporaryFile, "seekable", raising=False)
    f = tempfile.SpooledTemporaryFile(max_size=1024)
    f.write(DATA)
    assert is_seekable(f)
    assert get_metadata(f).seekable
    f.close()
    assert not is_seekable(f)
