"""Seek and rewind helpers that report failure instead of raising."""

import io
import logging
import operator
from typing import Optional, SupportsIndex

from streamutil.exceptions import InvalidArgumentError
from streamutil.metadata import is_seekable
from streamutil.types import StreamHandle

logger = logging.getLogger(__name__)

_WHENCE_VALUES = (io.SEEK_SET, io.SEEK_CUR, io.SEEK_END)


def get_position(stream: StreamHandle) -> Optional[int]:
    """Return the current position, or None if the stream can't report it."""
    try:
        return stream.tell()  # type: ignore[union-attr]
    except (AttributeError, ValueError, OSError) as e:
        logger.debug("Could not get position of %r: %s", stream, e)
        return None


def try_rewind(stream: StreamHandle) -> bool:
    """
    Try to move the stream back to its start.

    Returns:
        True if the stream is now at position 0, False if it isn't seekable or
        the seek failed.
    """
    if get_position(stream) == 0:
        return True
    return try_seek(stream, 0)


def try_seek(
    stream: StreamHandle, offset: SupportsIndex, whence: int = io.SEEK_SET
) -> bool:
    """
    Try to seek the stream.

    If ``whence`` is ``SEEK_SET`` and the stream is already at ``offset``, no
    seek is performed.

    Args:
        stream: The stream.
        offset: The offset, interpreted relative to ``whence``.
        whence: One of ``io.SEEK_SET``, ``io.SEEK_CUR`` or ``io.SEEK_END``.

    Returns:
        True if the seek succeeded, False if the stream isn't seekable or the
        seek failed. Seeking past the end counts as success if the stream allows
        it.

    Raises:
        TypeError: If ``offset`` is not an integer.
        InvalidArgumentError: If ``whence`` is not a valid value.
    """
    offset = operator.index(offset)
    if whence not in _WHENCE_VALUES:
        raise InvalidArgumentError(f"invalid whence: {whence!r}")

    if whence == io.SEEK_SET and get_position(stream) == offset:
        return True

    if not is_seekable(stream):
        return False

    try:
        stream.seek(offset, whence)  # type: ignore[union-attr]
    except (ValueError, OSError) as e:
        logger.debug(
            "Seeking %r to %d (whence=%d) failed: %s", stream, offset, whence, e
        )
        return False
    return True
