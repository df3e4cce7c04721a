"""Millisecond-resolution instant with no attached timezone.

An ``Instant`` is a count of milliseconds since the Unix epoch. It is read
as UTC or as the host's local civil calendar only when its calendar fields
are requested, which is what lets the codec express one value in either
interpretation.
"""

import datetime
import math
from datetime import timedelta, timezone
from typing import Any, NamedTuple, Optional, Union

from pgtemporal.exceptions import InvalidInstantError, TemporalEncodeError
from pgtemporal.utils.text import pad

__all__ = ("EPOCH", "CivilFields", "Instant")

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


class CivilFields(NamedTuple):
    """Calendar fields of an instant in one zone interpretation. ``month`` is 1-12."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


class Instant:
    """A point in time with millisecond precision.

    ``Instant.invalid()`` is the sentinel produced by lenient parsing of a
    malformed string. It compares equal only to other invalid instants and
    refuses to expose calendar fields.
    """

    __slots__ = ("_epoch_ms",)

    _epoch_ms: Optional[int]

    def __init__(self, epoch_ms: "Optional[Union[int, float]]") -> None:
        """Initialize an instant.

        Args:
            epoch_ms: Milliseconds since 1970-01-01T00:00:00Z. Fractions are
                truncated toward zero. ``None`` builds the invalid sentinel.
        """
        if isinstance(epoch_ms, float) and not math.isfinite(epoch_ms):
            epoch_ms = None
        object.__setattr__(self, "_epoch_ms", None if epoch_ms is None else int(epoch_ms))

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @classmethod
    def invalid(cls) -> "Instant":
        return cls(None)

    @classmethod
    def from_epoch_ms(cls, epoch_ms: "Union[int, float]") -> "Instant":
        return cls(epoch_ms)

    @classmethod
    def from_datetime(cls, value: datetime.datetime) -> "Instant":
        """Build an instant from a ``datetime``.

        Aware datetimes are converted exactly. Naive datetimes are read as
        host-local civil time, the same rule ``datetime.timestamp()`` uses.
        Microseconds are truncated to milliseconds.

        Args:
            value: The datetime to convert.

        Returns:
            The corresponding instant.
        """
        if value.tzinfo is None or value.utcoffset() is None:
            return cls.from_local_fields(
                value.year, value.month, value.day, value.hour, value.minute, value.second, value.microsecond // 1000
            )
        return cls((value - EPOCH) // _ONE_MS)

    @classmethod
    def from_utc_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        offset_minutes: int = 0,
    ) -> "Instant":
        """Build an instant from calendar fields observed at a fixed UTC offset.

        Raises:
            ValueError: If any field is out of range.
        """
        tz = timezone(timedelta(minutes=offset_minutes)) if offset_minutes else timezone.utc
        civil = datetime.datetime(year, month, day, hour, minute, second, tzinfo=tz)
        return cls((civil - EPOCH) // _ONE_MS + millisecond)

    @classmethod
    def from_local_fields(
        cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0, millisecond: int = 0
    ) -> "Instant":
        """Build an instant from calendar fields in the host's local zone.

        Raises:
            ValueError: If any field is out of range.
        """
        civil = datetime.datetime(year, month, day, hour, minute, second)
        return cls(round(civil.timestamp()) * 1000 + millisecond)

    @classmethod
    def now(cls) -> "Instant":
        return cls.from_datetime(datetime.datetime.now(timezone.utc))

    @property
    def epoch_ms(self) -> Optional[int]:
        """Milliseconds since the epoch, or ``None`` for the invalid sentinel."""
        return self._epoch_ms

    @property
    def is_valid(self) -> bool:
        return self._epoch_ms is not None

    def _require_epoch_ms(self) -> int:
        if self._epoch_ms is None:
            raise InvalidInstantError
        return self._epoch_ms

    def to_datetime(self, tz: datetime.tzinfo = timezone.utc) -> datetime.datetime:
        """Return an aware ``datetime`` for this instant in ``tz``.

        Raises:
            InvalidInstantError: If the instant is the invalid sentinel.
            TemporalEncodeError: If the instant is outside the ``datetime`` range.
        """
        epoch_ms = self._require_epoch_ms()
        try:
            return (EPOCH + timedelta(milliseconds=epoch_ms)).astimezone(tz)
        except (OverflowError, ValueError) as error:
            msg = f"Instant {epoch_ms} ms is outside the supported date range"
            raise TemporalEncodeError(msg) from error

    def to_local_datetime(self) -> datetime.datetime:
        """Return a naive ``datetime`` holding the host-local civil time.

        Raises:
            InvalidInstantError: If the instant is the invalid sentinel.
            TemporalEncodeError: If the instant is outside the ``datetime`` range.
        """
        epoch_ms = self._require_epoch_ms()
        seconds, millisecond = divmod(epoch_ms, 1000)
        try:
            civil = datetime.datetime.fromtimestamp(seconds)
        except (OverflowError, OSError, ValueError) as error:
            msg = f"Instant {epoch_ms} ms is outside the supported date range"
            raise TemporalEncodeError(msg) from error
        return civil.replace(microsecond=millisecond * 1000)

    def utc_fields(self) -> CivilFields:
        return _fields_of(self.to_datetime())

    def local_fields(self) -> CivilFields:
        return _fields_of(self.to_local_datetime())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._epoch_ms == other._epoch_ms

    def __lt__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._require_epoch_ms() < other._require_epoch_ms()

    def __le__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._require_epoch_ms() <= other._require_epoch_ms()

    def __gt__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._require_epoch_ms() > other._require_epoch_ms()

    def __ge__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._require_epoch_ms() >= other._require_epoch_ms()

    def __hash__(self) -> int:
        return hash((Instant, self._epoch_ms))

    def __reduce__(self) -> "tuple[type[Instant], tuple[Optional[int]]]":
        return (Instant, (self._epoch_ms,))

    def __repr__(self) -> str:
        if self._epoch_ms is None:
            return "Instant(invalid)"
        try:
            f = self.utc_fields()
        except TemporalEncodeError:
            return f"Instant({self._epoch_ms})"
        return (
            f"Instant('{pad(f.year, 4)}-{pad(f.month)}-{pad(f.day)}"
            f"T{pad(f.hour)}:{pad(f.minute)}:{pad(f.second)}.{pad(f.millisecond, 3)}Z')"
        )


def _fields_of(value: datetime.datetime) -> CivilFields:
    return CivilFields(
        value.year, value.month, value.day, value.hour, value.minute, value.second, value.microsecond // 1000
    )
