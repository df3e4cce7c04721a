"""String to instant parsing primitives.

``parse_civil_or_zoned`` is the one place that decides how a date/time
string becomes an instant. Strings carrying a zone suffix are exact. A bare
date is read as UTC midnight while a zone-less date and time is read as
host-local civil time, matching the usual ISO parsing convention. Anything
the wire grammar does not cover goes through ``datetime.fromisoformat`` and
becomes ``Instant.invalid()`` if that also rejects it.
"""

import datetime
from typing import TYPE_CHECKING, Optional

from pgtemporal.core._grammar import DATE_ONLY_PATTERN, GENERIC_PATTERN
from pgtemporal.core.instant import Instant
from pgtemporal.exceptions import TemporalDecodeError

if TYPE_CHECKING:
    import re

__all__ = ("parse_civil_or_zoned", "parse_local_date", "truncate_fraction")

_FIELD_ERRORS = (ValueError, OverflowError, OSError)


def truncate_fraction(fraction: Optional[str]) -> int:
    """Convert a decimal fraction of a second to whole milliseconds.

    Digits past the third are dropped, never rounded: ``"249097"`` gives 249.
    """
    if not fraction:
        return 0
    return int(fraction[:3].ljust(3, "0"))


def _offset_minutes(sign: str, hours: str, minutes: Optional[str]) -> int:
    if minutes is None and len(hours) > 2:
        # compact +HHMM
        hours, minutes = hours[:-2], hours[-2:]
    total = int(hours) * 60 + int(minutes or 0)
    return -total if sign == "-" else total


def _instant_from_match(match: "re.Match[str]") -> Instant:
    year = int(match["year"])
    month = int(match["month"])
    day = int(match["day"])

    if match["hour"] is None:
        if match["tz"] is None:
            return Instant.from_utc_fields(year, month, day)
        hour = minute = second = millisecond = 0
    else:
        hour = int(match["hour"])
        minute = int(match["minute"])
        second = int(match["second"] or 0)
        millisecond = truncate_fraction(match["fraction"])
        if match["tz"] is None:
            return Instant.from_local_fields(year, month, day, hour, minute, second, millisecond)

    offset = 0 if match["tz"] == "Z" else _offset_minutes(match["sign"], match["tz_hour"], match["tz_minute"])
    return Instant.from_utc_fields(year, month, day, hour, minute, second, millisecond, offset_minutes=offset)


def _parse_isoformat(value: str) -> Instant:
    try:
        parsed = datetime.datetime.fromisoformat(value)
    except ValueError:
        return Instant.invalid()
    try:
        return Instant.from_datetime(parsed)
    except _FIELD_ERRORS:
        return Instant.invalid()


def parse_civil_or_zoned(value: str) -> Instant:
    """Parse a date/time string into an instant.

    Args:
        value: A DateOnly, Timestamp or TimestampTz string, or anything else.

    Returns:
        The parsed instant, truncated to milliseconds. Malformed or out of
        range input gives ``Instant.invalid()`` rather than raising.
    """
    match = GENERIC_PATTERN.fullmatch(value)
    if match is None:
        return _parse_isoformat(value)
    try:
        return _instant_from_match(match)
    except _FIELD_ERRORS:
        return Instant.invalid()


def parse_local_date(value: str) -> Optional[Instant]:
    """Read a bare ``YYYY-MM-DD`` string as local midnight.

    Args:
        value: Candidate string.

    Raises:
        TemporalDecodeError: If the pattern matched but a year, month or day
            group came back empty.

    Returns:
        The local-midnight instant, ``Instant.invalid()`` for out of range
        components, or ``None`` when ``value`` is not a bare date.
    """
    match = DATE_ONLY_PATTERN.fullmatch(value)
    if match is None:
        return None
    year, month, day = match.groups()
    if not year or not month or not day:
        msg = "Date-only value matched without a year, month and day"
        raise TemporalDecodeError(msg, value=value)
    try:
        return Instant.from_local_fields(int(year), int(month), int(day))
    except _FIELD_ERRORS:
        return Instant.invalid()
