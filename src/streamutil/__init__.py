"""Helpers for inspecting and repositioning stream handles."""

from streamutil.config import (
    PlusModifierScan,
    StreamUtilConfig,
    default_config,
    get_default_config,
    set_default_config,
    set_default_config_fields,
)
from streamutil.copying import copy
from streamutil.exceptions import (
    InvalidArgumentError,
    InvalidModeError,
    StreamModeError,
    StreamUtilError,
)
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
from streamutil.modes import (
    PrimaryMode,
    StreamMode,
    mode_is_append_only,
    mode_is_appendable,
    mode_is_read_only,
    mode_is_readable,
    mode_is_writable,
    mode_is_write_only,
    parse_mode,
)
from streamutil.positioning import get_position, try_rewind, try_seek

__all__ = [
    # Mode strings
    "PrimaryMode",
    "StreamMode",
    "parse_mode",
    "mode_is_appendable",
    "mode_is_append_only",
    "mode_is_readable",
    "mode_is_read_only",
    "mode_is_writable",
    "mode_is_write_only",
    # Handle introspection
    "StreamMetadata",
    "get_metadata",
    "get_metadata_key",
    "get_uri",
    "get_usable_uri",
    "get_size",
    "is_appendable",
    "is_readable",
    "is_seekable",
    "is_writable",
    # Positioning and copying
    "get_position",
    "try_rewind",
    "try_seek",
    "copy",
    # Config
    "PlusModifierScan",
    "StreamUtilConfig",
    "default_config",
    "get_default_config",
    "set_default_config",
    "set_default_config_fields",
    # Exceptions
    "StreamUtilError",
    "InvalidArgumentError",
    "InvalidModeError",
    "StreamModeError",
]

__version__ = "0.1.0"
