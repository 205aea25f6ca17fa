"""Defines custom exceptions used throughout the streamutil library."""


class StreamUtilError(Exception):
    """Base exception for all errors raised by streamutil."""

    pass


class InvalidArgumentError(StreamUtilError, ValueError):
    """Raised when a caller passes a value outside the accepted domain."""

    pass


class InvalidModeError(InvalidArgumentError):
    """Raised when a mode string is empty or malformed."""

    pass


class StreamModeError(StreamUtilError, TypeError):
    """Raised when a stream is of the wrong kind (e.g. text instead of binary)."""

    pass


__all__ = [
    "StreamUtilError",
    "InvalidArgumentError",
    "InvalidModeError",
    "StreamModeError",
]
