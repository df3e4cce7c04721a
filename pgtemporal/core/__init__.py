"""Core conversion machinery: the instant type, wire grammars and the codec."""

from pgtemporal.core._grammar import TemporalShape, detect_shape
from pgtemporal.core._parsing import parse_civil_or_zoned
from pgtemporal.core.codec import (
    TemporalCodec,
    TemporalFormat,
    ZoneMode,
    decode,
    decode_self_describing,
    decode_with_mode,
    encode,
)
from pgtemporal.core.instant import CivilFields, Instant

__all__ = (
    "CivilFields",
    "Instant",
    "TemporalCodec",
    "TemporalFormat",
    "TemporalShape",
    "ZoneMode",
    "decode",
    "decode_self_describing",
    "decode_with_mode",
    "detect_shape",
    "encode",
    "parse_civil_or_zoned",
)
