"""Protocol definitions for the stream handles streamutil operates on."""

from typing import IO, Protocol, Union, runtime_checkable


@runtime_checkable
class ReadableBinaryStream(Protocol):
    """Any object supporting ``read()`` that returns bytes."""

    def read(self, n: int = -1, /) -> bytes: ...


@runtime_checkable
class WritableBinaryStream(Protocol):
    """Any object supporting ``write()`` of bytes."""

    def write(self, data: bytes, /) -> int: ...


@runtime_checkable
class SeekableStream(Protocol):
    """Any object whose cursor can be queried and repositioned."""

    def seek(self, offset: int, whence: int = 0, /) -> int: ...

    def tell(self) -> int: ...

    def seekable(self) -> bool: ...


@runtime_checkable
class CloseableStream(Protocol):
    def close(self) -> None: ...


BinaryStreamLike = Union[
    ReadableBinaryStream, WritableBinaryStream, SeekableStream, CloseableStream
]

StreamHandle = Union[BinaryStreamLike, IO[bytes], IO[str]]

__all__ = [
    "ReadableBinaryStream",
    "WritableBinaryStream",
    "SeekableStream",
    "CloseableStream",
    "BinaryStreamLike",
    "StreamHandle",
]
