"""Introspection of stream handles: mode, seekability, backing location and size."""

import dataclasses
import io
import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Any, Optional

from streamutil.exceptions import InvalidModeError
from streamutil.modes import parse_mode
from streamutil.types import StreamHandle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamMetadata:
    """Snapshot of the metadata reported for a stream handle."""

    mode: Optional[str]
    seekable: bool
    uri: Optional[str]
    stream_type: str
    closed: bool


_METADATA_KEYS = frozenset(f.name for f in dataclasses.fields(StreamMetadata))


def _call_predicate(stream: Any, method: str, fallback_attr: str) -> Optional[bool]:
    """Call ``stream.<method>()``, returning None if the stream can't answer.

    Objects without the method are judged by whether they have ``fallback_attr``.
    """
    func = getattr(stream, method, None)
    if func is None:
        return hasattr(stream, fallback_attr)
    try:
        result = func()
    except (ValueError, OSError):
        # Closed streams raise ValueError.
        return None
    # The result can be None if the class just extended BinaryIO and didn't
    # actually implement the method.
    if result is None:
        return hasattr(stream, fallback_attr)
    return bool(result)


def _infer_mode(stream: Any) -> Optional[str]:
    readable = _call_predicate(stream, "readable", "read")
    writable = _call_predicate(stream, "writable", "write")
    if readable is None or writable is None:
        return None

    suffix = "" if isinstance(stream, io.TextIOBase) else "b"
    if readable and writable:
        return f"r{suffix}+"
    if readable:
        return f"r{suffix}"
    if writable:
        return f"w{suffix}"
    return None


def _detect_mode(stream: Any) -> Optional[str]:
    try:
        mode = getattr(stream, "mode", None)
    except (ValueError, OSError):
        mode = None

    if isinstance(mode, str):
        try:
            parse_mode(mode)
            return mode
        except InvalidModeError as e:
            logger.debug("Ignoring mode attribute of %r: %s", stream, e)

    # In-memory buffers (BytesIO, StringIO) have no mode attribute, and some
    # streams (e.g. gzip.GzipFile) use a non-string one.
    return _infer_mode(stream)


def is_seekable(stream: StreamHandle) -> bool:
    """Return whether the stream can be repositioned.

    A missing ``seekable()`` method, a closed stream or an error while asking
    all count as not seekable.
    """
    # SpooledTemporaryFile only gained seekable() in Python 3.11; its buffers
    # (BytesIO or a temporary file) are always seekable.
    if isinstance(stream, tempfile.SpooledTemporaryFile):
        return not stream.closed

    try:
        seekable = bool(stream.seekable())  # type: ignore[union-attr]
    except AttributeError as e:
        logger.debug("Stream %r does not have a seekable method: %s", stream, e)
        return False
    except (ValueError, OSError) as e:
        logger.debug("Could not determine if %r is seekable: %s", stream, e)
        return False

    # A BufferedReader wrapping a non-seekable raw stream may still claim to be
    # seekable; the raw stream has the final say.
    if seekable and isinstance(stream, io.BufferedReader):
        return is_seekable(stream.raw)
    return seekable


def _detect_uri(stream: Any) -> Optional[str]:
    try:
        name = getattr(stream, "name", None)
    except (ValueError, OSError):
        name = None

    # Integer names are file descriptors, not locations.
    if isinstance(name, (str, bytes, os.PathLike)):
        uri = os.fsdecode(name)
        if uri:
            return uri

    url = getattr(stream, "url", None)
    if isinstance(url, str) and url:
        return url

    return None


def _is_closed(stream: Any) -> bool:
    try:
        return bool(getattr(stream, "closed", False))
    except (ValueError, OSError):
        return True


def get_metadata(stream: StreamHandle) -> StreamMetadata:
    """Return the metadata of a stream handle.

    Never raises for ordinary :mod:`io` objects, closed ones included; fields
    that can't be determined are reported as ``None``.
    """
    return StreamMetadata(
        mode=_detect_mode(stream),
        seekable=is_seekable(stream),
        uri=_detect_uri(stream),
        stream_type=type(stream).__name__,
        closed=_is_closed(stream),
    )


def get_metadata_key(stream: StreamHandle, key: str) -> Any:
    """Return the metadata field ``key``, or None if there is no such field."""
    if key not in _METADATA_KEYS:
        return None
    return getattr(get_metadata(stream), key)


def get_uri(stream: StreamHandle) -> Optional[str]:
    """Return the location backing the stream, or None for in-memory streams."""
    return _detect_uri(stream)


def get_usable_uri(stream: StreamHandle) -> Optional[str]:
    """
    Return the stream's URI if it refers to something that currently exists.

    The existence check hits the filesystem, so the result may already be stale
    by the time it is used.

    Returns:
        The URI, or None if the stream has no URI or it doesn't exist.
    """
    uri = get_uri(stream)
    if uri and os.path.exists(uri):
        return uri
    return None


def _real_fileno(stream: Any) -> Optional[int]:
    # Asking a SpooledTemporaryFile for its fileno forces it to roll over to disk.
    if isinstance(stream, tempfile.SpooledTemporaryFile):
        return None
    try:
        return stream.fileno()
    except (AttributeError, ValueError, OSError):
        return None


def get_size(stream: StreamHandle) -> int:
    """
    Return the size of a stream in bytes.

    A size of 0 could also mean that the stream doesn't report its size (e.g.
    pipes, sockets or in-memory text streams), so it can't be taken as proof
    that the stream is empty.
    """
    if _call_predicate(stream, "writable", "write"):
        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()

    fd = _real_fileno(stream)
    if fd is not None:
        return os.fstat(fd).st_size

    # Seeking a text stream measures characters, not bytes.
    if not isinstance(stream, io.TextIOBase) and is_seekable(stream):
        pos = stream.tell()  # type: ignore[union-attr]
        try:
            stream.seek(0, io.SEEK_END)  # type: ignore[union-attr]
            return stream.tell()  # type: ignore[union-attr]
        finally:
            stream.seek(pos)  # type: ignore[union-attr]

    logger.debug("Stream %r does not report its size", stream)
    return 0


def _mode_predicate(stream: StreamHandle, attr: str) -> bool:
    mode = _detect_mode(stream)
    if mode is None:
        return False
    return getattr(parse_mode(mode), attr)


def is_appendable(stream: StreamHandle) -> bool:
    """Return whether the stream was opened in append mode."""
    return _mode_predicate(stream, "appendable")


def is_readable(stream: StreamHandle) -> bool:
    return _mode_predicate(stream, "readable")


def is_writable(stream: StreamHandle) -> bool:
    return _mode_predicate(stream, "writable")
