"""pgtemporal: explicit conversion between database date/time strings and instants."""

from pgtemporal import config, core, exceptions, typing, utils
from pgtemporal.__metadata__ import __version__
from pgtemporal.config import TemporalConfig
from pgtemporal.core import (
    CivilFields,
    Instant,
    TemporalCodec,
    TemporalFormat,
    TemporalShape,
    ZoneMode,
    decode,
    decode_self_describing,
    decode_with_mode,
    detect_shape,
    encode,
)
from pgtemporal.exceptions import (
    InvalidInstantError,
    PGTemporalError,
    TemporalDecodeError,
    TemporalEncodeError,
    TemporalFormatError,
    TemporalModeError,
)

__all__ = (
    "CivilFields",
    "Instant",
    "InvalidInstantError",
    "PGTemporalError",
    "TemporalCodec",
    "TemporalConfig",
    "TemporalDecodeError",
    "TemporalEncodeError",
    "TemporalFormat",
    "TemporalFormatError",
    "TemporalModeError",
    "TemporalShape",
    "ZoneMode",
    "__version__",
    "config",
    "core",
    "decode",
    "decode_self_describing",
    "decode_with_mode",
    "detect_shape",
    "encode",
    "exceptions",
    "typing",
    "utils",
)
