"""
Parsing and predicates for stream open-mode strings.

A mode string starts with one primary character (``r``, ``w``, ``a``, ``x`` or
``c``), optionally followed by modifiers: ``+`` adds the complementary
capability, ``b``/``t`` select binary or text translation and do not affect
the capability predicates.
"""

from __future__ import annotations

import functools
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from streamutil.config import PlusModifierScan, get_default_config
from streamutil.exceptions import InvalidModeError

if TYPE_CHECKING:
    from enum import StrEnum
elif sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum


class PrimaryMode(StrEnum):
    READ = "r"
    WRITE = "w"
    APPEND = "a"
    EXCLUSIVE = "x"
    CREATE = "c"


_MODIFIERS = frozenset("+bt")


@dataclass(frozen=True)
class StreamMode:
    """A parsed mode string.

    Build instances with :func:`parse_mode`; the capability properties are
    computed from the parsed flags, so the raw string is only scanned once.
    """

    primary: PrimaryMode
    plus: bool
    binary: Optional[bool]
    raw: str

    @property
    def appendable(self) -> bool:
        return self.primary == PrimaryMode.APPEND

    @property
    def append_only(self) -> bool:
        return self.appendable and not self.plus

    @property
    def readable(self) -> bool:
        return self.primary == PrimaryMode.READ or self.plus

    @property
    def read_only(self) -> bool:
        return self.primary == PrimaryMode.READ and not self.plus

    @property
    def writable(self) -> bool:
        return not self.read_only

    @property
    def write_only(self) -> bool:
        return self.writable and not self.readable

    def __str__(self) -> str:
        return self.raw


ModeLike = Union[str, StreamMode]


@functools.lru_cache(maxsize=256)
def _parse_mode(mode: str, plus_scan: PlusModifierScan) -> StreamMode:
    if not mode:
        raise InvalidModeError("mode string must not be empty")

    try:
        primary = PrimaryMode(mode[0])
    except ValueError:
        raise InvalidModeError(
            f"invalid mode {mode!r}: must start with one of 'r', 'w', 'a', 'x', 'c'"
        ) from None

    modifiers = mode[1:]
    unknown = set(modifiers) - _MODIFIERS
    if unknown:
        raise InvalidModeError(
            f"invalid mode {mode!r}: unknown modifier(s) {''.join(sorted(unknown))!r}"
        )
    if len(set(modifiers)) != len(modifiers):
        raise InvalidModeError(f"invalid mode {mode!r}: repeated modifier")
    if "b" in modifiers and "t" in modifiers:
        raise InvalidModeError(
            f"invalid mode {mode!r}: cannot be both binary and text"
        )

    if plus_scan == PlusModifierScan.SECOND_CHAR:
        plus = modifiers[:1] == "+"
    else:
        plus = "+" in modifiers

    if "b" in modifiers:
        binary: Optional[bool] = True
    elif "t" in modifiers:
        binary = False
    else:
        binary = None

    return StreamMode(primary=primary, plus=plus, binary=binary, raw=mode)


def parse_mode(
    mode: ModeLike, *, plus_scan: PlusModifierScan | None = None
) -> StreamMode:
    """
    Parse a mode string into a :class:`StreamMode`.

    Args:
        mode: The mode string, e.g. ``"rb+"``. An already parsed
            :class:`StreamMode` is returned unchanged.
        plus_scan: Where a ``+`` modifier is recognised. Defaults to the
            ``plus_modifier_scan`` setting of the current configuration.

    Raises:
        InvalidModeError: If the mode is empty, not a string, starts with an
            unknown primary character, or carries unknown or repeated modifiers.
    """
    if isinstance(mode, StreamMode):
        return mode
    if not isinstance(mode, str):
        raise InvalidModeError(f"mode must be a string, got {type(mode).__name__}")
    if plus_scan is None:
        plus_scan = get_default_config().plus_modifier_scan
    return _parse_mode(mode, PlusModifierScan(plus_scan))


def mode_is_appendable(mode: ModeLike) -> bool:
    """Return whether ``mode`` opens the stream for appending."""
    return parse_mode(mode).appendable


def mode_is_append_only(mode: ModeLike) -> bool:
    """Return whether ``mode`` only allows appending (no ``+``)."""
    return parse_mode(mode).append_only


def mode_is_readable(mode: ModeLike) -> bool:
    return parse_mode(mode).readable


def mode_is_read_only(mode: ModeLike) -> bool:
    return parse_mode(mode).read_only


def mode_is_writable(mode: ModeLike) -> bool:
    return parse_mode(mode).writable


def mode_is_write_only(mode: ModeLike) -> bool:
    return parse_mode(mode).write_only
