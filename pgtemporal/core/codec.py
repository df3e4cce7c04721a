"""Conversion between date/time wire strings and instants.

``decode`` turns a ``date``, ``timestamp`` or ``timestamptz`` string into an
:class:`~pgtemporal.core.instant.Instant`; ``encode`` goes the other way.
Zone-less strings are ambiguous on their own, so the caller names the zone
interpretation (``"UTC"`` or ``"local"``) for them. ``None`` always maps to
``None``.

Sub-millisecond digits are truncated. An instant written out in one zone mode
and read back in the other comes back shifted by the host's UTC offset; the
codec cannot detect that mix-up.

Malformed strings are not validated up front. By default they decode to
``Instant.invalid()``; validate upstream or use ``TemporalConfig(strict=True)``
to have them raise instead.
"""

import datetime
from enum import Enum
from typing import Final, Optional, Union, overload

from mypy_extensions import mypyc_attr

from pgtemporal.config import TemporalConfig
from pgtemporal.core._grammar import detect_shape
from pgtemporal.core._parsing import parse_civil_or_zoned, parse_local_date
from pgtemporal.core.instant import CivilFields, Instant
from pgtemporal.exceptions import TemporalDecodeError, TemporalFormatError, TemporalModeError
from pgtemporal.typing import FormatLiteral, TemporalString, ZoneModeLiteral
from pgtemporal.utils.logging import DecodeEvent, get_logger, log_decode_event
from pgtemporal.utils.text import pad

__all__ = (
    "TemporalCodec",
    "TemporalFormat",
    "ZoneMode",
    "decode",
    "decode_self_describing",
    "decode_with_mode",
    "encode",
)

logger = get_logger("core.codec")


class ZoneMode(str, Enum):
    """How a zone-less string maps onto an instant."""

    UTC = "UTC"
    LOCAL = "local"


class TemporalFormat(str, Enum):
    """Output string formats, named after the column type they feed."""

    TIMESTAMPTZ = "timestamptz"
    TIMESTAMP_UTC = "timestamp:UTC"
    TIMESTAMP_LOCAL = "timestamp:local"
    DATE_UTC = "date:UTC"
    DATE_LOCAL = "date:local"

    @property
    def kind(self) -> str:
        return self.value.split(":", 1)[0]

    @property
    def zone_mode(self) -> Optional[ZoneMode]:
        """Zone the fields are read in. ``timestamptz`` is always written in UTC and has none."""
        _, _, zone = self.value.partition(":")
        return ZoneMode(zone) if zone else None


ModeArg = Union[ZoneMode, ZoneModeLiteral, None]
FormatArg = Union[TemporalFormat, FormatLiteral]
EncodableValue = Union[Instant, datetime.datetime]


def _coerce_mode(mode: "ModeArg") -> Optional[ZoneMode]:
    if mode is None or isinstance(mode, ZoneMode):
        return mode
    try:
        return ZoneMode(mode)
    except ValueError:
        raise TemporalModeError(mode) from None


def _coerce_format(fmt: "FormatArg") -> TemporalFormat:
    if isinstance(fmt, TemporalFormat):
        return fmt
    try:
        return TemporalFormat(fmt)
    except ValueError:
        raise TemporalFormatError(fmt) from None


def _format_date(fields: CivilFields) -> str:
    return f"{pad(fields.year, 4)}-{pad(fields.month)}-{pad(fields.day)}"


def _format_timestamp(fields: CivilFields) -> str:
    return (
        f"{_format_date(fields)}T{pad(fields.hour)}:{pad(fields.minute)}:{pad(fields.second)}"
        f".{pad(fields.millisecond, 3)}"
    )


@mypyc_attr(allow_interpreted_subclasses=True)
class TemporalCodec:
    """Decode and encode date/time wire strings.

    Instances are stateless apart from their configuration and safe to share
    between threads.
    """

    __slots__ = ("_config",)

    def __init__(self, config: Optional[TemporalConfig] = None) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration. Defaults to a lenient ``TemporalConfig()``.
        """
        self._config = config.copy() if config is not None else TemporalConfig()

    @property
    def config(self) -> TemporalConfig:
        return self._config.copy()

    @overload
    def decode(self, value: None, mode: "ModeArg" = None) -> None: ...

    @overload
    def decode(self, value: "TemporalString", mode: "ModeArg" = None) -> Instant: ...

    def decode(self, value: "Optional[TemporalString]", mode: "ModeArg" = None) -> Optional[Instant]:
        """Convert a ``timestamptz``, ``timestamp`` or ``date`` string to an instant.

        Args:
            value: The string to convert, or ``None``.
            mode: ``None`` for self-describing ``timestamptz`` strings.
                ``"UTC"`` or ``"local"`` for ``timestamp`` and ``date``
                strings, naming the zone they were written in.

        Raises:
            TemporalModeError: If ``mode`` is not a known zone mode.
            TemporalDecodeError: In strict mode, if ``value`` cannot be
                parsed or is zone-less while ``mode`` is ``None``.

        Returns:
            The instant, or ``None`` if ``value`` is ``None``.
        """
        if value is None:
            return None

        zone_mode = _coerce_mode(mode)
        if zone_mode is None:
            if self._config.strict:
                self._require_self_describing(value)
            instant = parse_civil_or_zoned(value)
        elif zone_mode is ZoneMode.UTC:
            instant = parse_civil_or_zoned(f"{value}Z")
        else:
            # A bare date would otherwise parse as UTC midnight.
            local_date = parse_local_date(value)
            instant = local_date if local_date is not None else parse_civil_or_zoned(value)

        if not instant.is_valid:
            self._on_invalid(value, zone_mode)
        return instant

    @overload
    def decode_self_describing(self, value: None) -> None: ...

    @overload
    def decode_self_describing(self, value: "TemporalString") -> Instant: ...

    def decode_self_describing(self, value: "Optional[TemporalString]") -> Optional[Instant]:
        """Decode a string that carries its own zone suffix."""
        return self.decode(value, None)

    @overload
    def decode_with_mode(self, value: None, mode: "ModeArg") -> None: ...

    @overload
    def decode_with_mode(self, value: "TemporalString", mode: "ModeArg") -> Instant: ...

    def decode_with_mode(self, value: "Optional[TemporalString]", mode: "ModeArg") -> Optional[Instant]:
        """Decode a zone-less string in an explicit zone mode.

        Raises:
            TemporalModeError: If ``mode`` is ``None`` or unknown.
        """
        if value is None:
            return None
        if mode is None:
            raise TemporalModeError(mode)
        return self.decode(value, mode)

    @overload
    def encode(self, value: None, fmt: "FormatArg") -> None: ...

    @overload
    def encode(self, value: "EncodableValue", fmt: "FormatArg") -> str: ...

    def encode(self, value: "Optional[EncodableValue]", fmt: "FormatArg") -> Optional[str]:
        """Convert an instant to a ``timestamptz``, ``timestamp`` or ``date`` string.

        Args:
            value: The instant to convert, or ``None``. A ``datetime`` is
                converted with :meth:`Instant.from_datetime` first.
            fmt: ``"timestamptz"``, or a kind and zone mode such as
                ``"timestamp:local"`` or ``"date:UTC"``.

        Raises:
            TemporalFormatError: If ``fmt`` is not a known format.
            InvalidInstantError: If ``value`` is the invalid sentinel.
            TypeError: If ``value`` is neither an instant nor a datetime.

        Returns:
            The formatted string, or ``None`` if ``value`` is ``None``.
        """
        if value is None:
            return None

        target = _coerce_format(fmt)
        if isinstance(value, datetime.datetime):
            value = Instant.from_datetime(value)
        elif not isinstance(value, Instant):
            msg = f"Cannot encode {type(value).__name__}; expected Instant or datetime"
            raise TypeError(msg)

        if target is TemporalFormat.TIMESTAMPTZ:
            return f"{_format_timestamp(value.utc_fields())}Z"

        fields = value.utc_fields() if target.zone_mode is ZoneMode.UTC else value.local_fields()
        if target.kind == "date":
            return _format_date(fields)
        return _format_timestamp(fields)

    def _require_self_describing(self, value: str) -> None:
        shape = detect_shape(value)
        if shape is not None and not shape.is_self_describing:
            msg = f"{shape.value} string {value!r} has no zone suffix; pass mode='UTC' or mode='local'"
            raise TemporalDecodeError(msg, value=value)

    def _on_invalid(self, value: str, zone_mode: Optional[ZoneMode]) -> None:
        mode_name = zone_mode.value if zone_mode is not None else None
        if self._config.log_invalid:
            shape = detect_shape(value)
            log_decode_event(
                logger,
                "Unparseable date/time string decoded to an invalid instant",
                DecodeEvent(value=value, mode=mode_name, shape=shape.value if shape is not None else None),
            )
        if self._config.strict:
            msg = f"Cannot decode {value!r} as a date/time (mode={mode_name!r})"
            raise TemporalDecodeError(msg, value=value)


_DEFAULT_CODEC: Final[TemporalCodec] = TemporalCodec()


@overload
def decode(value: None, mode: "ModeArg" = None) -> None: ...


@overload
def decode(value: "TemporalString", mode: "ModeArg" = None) -> Instant: ...


def decode(value: "Optional[TemporalString]", mode: "ModeArg" = None) -> Optional[Instant]:
    """Decode ``value`` with the default lenient codec. See :meth:`TemporalCodec.decode`."""
    return _DEFAULT_CODEC.decode(value, mode)


@overload
def decode_self_describing(value: None) -> None: ...


@overload
def decode_self_describing(value: "TemporalString") -> Instant: ...


def decode_self_describing(value: "Optional[TemporalString]") -> Optional[Instant]:
    """Decode a zone-suffixed string with the default codec. See :meth:`TemporalCodec.decode_self_describing`."""
    return _DEFAULT_CODEC.decode_self_describing(value)


@overload
def decode_with_mode(value: None, mode: "ModeArg") -> None: ...


@overload
def decode_with_mode(value: "TemporalString", mode: "ModeArg") -> Instant: ...


def decode_with_mode(value: "Optional[TemporalString]", mode: "ModeArg") -> Optional[Instant]:
    """Decode a zone-less string with the default codec. See :meth:`TemporalCodec.decode_with_mode`."""
    return _DEFAULT_CODEC.decode_with_mode(value, mode)


@overload
def encode(value: None, fmt: "FormatArg") -> None: ...


@overload
def encode(value: "EncodableValue", fmt: "FormatArg") -> str: ...


def encode(value: "Optional[EncodableValue]", fmt: "FormatArg") -> Optional[str]:
    """Encode ``value`` with the default codec. See :meth:`TemporalCodec.encode`."""
    return _DEFAULT_CODEC.encode(value, fmt)
