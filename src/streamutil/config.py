from __future__ import annotations

import contextvars
import sys
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from streamutil.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from enum import StrEnum
elif sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum


class PlusModifierScan(StrEnum):
    """Where a ``+`` modifier is recognised in a mode string."""

    ANYWHERE = "anywhere"
    SECOND_CHAR = "second_char"


@dataclass
class StreamUtilConfig:
    """Configuration for the streamutil helpers."""

    # Chunk size used when transferring bytes in :func:`streamutil.copy`.
    copy_chunk_size: int = 64 * 1024

    # Copies stay in memory up to this size, then roll over to a temporary file.
    copy_max_memory_size: int = 2 * 1024 * 1024

    plus_modifier_scan: PlusModifierScan = PlusModifierScan.ANYWHERE

    def __post_init__(self) -> None:
        if self.copy_chunk_size <= 0:
            raise InvalidArgumentError(
                f"copy_chunk_size must be positive, got {self.copy_chunk_size}"
            )
        if self.copy_max_memory_size <= 0:
            raise InvalidArgumentError(
                "copy_max_memory_size must be positive, "
                f"got {self.copy_max_memory_size}"
            )
        self.plus_modifier_scan = PlusModifierScan(self.plus_modifier_scan)


_default_config_var: contextvars.ContextVar[StreamUtilConfig] = (
    contextvars.ContextVar("streamutil_default_config", default=StreamUtilConfig())
)


def get_default_config() -> StreamUtilConfig:
    """Return the current default configuration."""
    return _default_config_var.get()


def set_default_config(config: StreamUtilConfig) -> None:
    """Set the default configuration used by the streamutil helpers."""
    _default_config_var.set(config)


def set_default_config_fields(**kwargs: Any) -> None:
    """Replace individual fields of the default configuration."""
    config = get_default_config()
    config = replace(config, **kwargs)
    set_default_config(config)


@contextmanager
def default_config(config: StreamUtilConfig | None = None, **kwargs: Any):
    """Temporarily use ``config`` as the default configuration."""
    if config is None:
        config = get_default_config()

    if kwargs:
        config = replace(config, **kwargs)

    token = _default_config_var.set(config)
    try:
        yield config
    finally:
        _default_config_var.reset(token)
