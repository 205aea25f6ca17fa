"""Duplicating the contents of a stream into a new temporary stream."""

import io
import logging
import shutil
import tempfile
from typing import IO

from streamutil.config import get_default_config
from streamutil.exceptions import StreamModeError
from streamutil.positioning import get_position, try_rewind, try_seek
from streamutil.types import StreamHandle

logger = logging.getLogger(__name__)


def copy(stream: StreamHandle, close: bool = True) -> IO[bytes]:
    """
    Copy a stream into a new, writable temporary stream.

    The source is rewound (if possible) and its contents are transferred into a
    new stream, which is kept in memory until it grows beyond the configured
    ``copy_max_memory_size`` and then spills over to a temporary file. If the
    source can't be rewound, only the bytes from its current position onwards
    are copied.

    The returned stream is positioned where the source was before the call.
    The caller owns it and is responsible for closing it. If the transfer fails,
    the new stream is closed before the error propagates.

    Args:
        stream: The binary stream to copy.
        close: Whether to close the source stream afterwards. If False, the
            source is moved back to its original position (best-effort).

    Returns:
        The new stream.

    Raises:
        StreamModeError: If ``stream`` is a text stream.
        OSError: If reading from the source or writing the copy fails.
    """
    if isinstance(stream, io.TextIOBase):
        raise StreamModeError("copy() requires a binary stream, got a text stream")

    config = get_default_config()
    cloned = tempfile.SpooledTemporaryFile(
        max_size=config.copy_max_memory_size, mode="w+b"
    )
    pos = get_position(stream)
    if pos is None:
        pos = 0

    if not try_rewind(stream):
        logger.debug("Could not rewind %r, copying from position %d", stream, pos)
    try:
        shutil.copyfileobj(stream, cloned, config.copy_chunk_size)  # type: ignore[arg-type]
    except BaseException:
        cloned.close()
        raise

    if close:
        stream.close()  # type: ignore[union-attr]
    else:
        try_seek(stream, pos)

    cloned.seek(pos)
    return cloned  # type: ignore[return-value]
