"""Shape grammars for the database's date/time string encodings.

The fragments follow the wire format exactly: every numeric field is one or
more ASCII digits, seconds and their fraction are optional, and a zone suffix
is ``Z`` or a signed hour count with optional minutes.
"""

import re
from enum import Enum
from typing import Final, Optional

__all__ = (
    "DATE_ONLY_PATTERN",
    "DATE_PATTERN",
    "GENERIC_PATTERN",
    "TIMESTAMPTZ_PATTERN",
    "TIMESTAMP_PATTERN",
    "TIMETZ_PATTERN",
    "TemporalShape",
    "detect_shape",
)

_DATE: Final[str] = r"\d+-\d+-\d+"
_TIME: Final[str] = r"\d+:\d+(?::\d+(?:\.\d+)?)?"
_TZ_SUFFIX: Final[str] = r"(?:Z|[+-]\d+(?::\d+)?)"

DATE_PATTERN: Final["re.Pattern[str]"] = re.compile(_DATE, re.ASCII)
TIMESTAMP_PATTERN: Final["re.Pattern[str]"] = re.compile(f"{_DATE}T{_TIME}", re.ASCII)
TIMESTAMPTZ_PATTERN: Final["re.Pattern[str]"] = re.compile(f"{_DATE}T{_TIME}{_TZ_SUFFIX}", re.ASCII)
TIMETZ_PATTERN: Final["re.Pattern[str]"] = re.compile(f"{_TIME}{_TZ_SUFFIX}", re.ASCII)

# Bare date for the local-midnight decomposition.
DATE_ONLY_PATTERN: Final["re.Pattern[str]"] = re.compile(r"([0-9]+)-([0-9]+)-([0-9]+)")

# Everything the generic parser understands: a date, an optional time of day
# and an optional zone suffix. A zone suffix on a bare date is what UTC-mode
# decoding produces for DateOnly input.
GENERIC_PATTERN: Final["re.Pattern[str]"] = re.compile(
    r"(?P<year>\d+)-(?P<month>\d+)-(?P<day>\d+)"
    r"(?:T(?P<hour>\d+):(?P<minute>\d+)(?::(?P<second>\d+)(?:\.(?P<fraction>\d+))?)?)?"
    r"(?P<tz>Z|(?P<sign>[+-])(?P<tz_hour>\d+)(?::(?P<tz_minute>\d+))?)?",
    re.ASCII,
)


class TemporalShape(str, Enum):
    """Wire shapes of date/time column values."""

    DATE = "date"
    TIMESTAMP = "timestamp"
    TIMESTAMPTZ = "timestamptz"
    TIMETZ = "timetz"

    @property
    def is_self_describing(self) -> bool:
        """Whether strings of this shape carry their own zone offset."""
        return self in {TemporalShape.TIMESTAMPTZ, TemporalShape.TIMETZ}


_SHAPE_PATTERNS: Final["tuple[tuple[TemporalShape, re.Pattern[str]], ...]"] = (
    (TemporalShape.TIMESTAMPTZ, TIMESTAMPTZ_PATTERN),
    (TemporalShape.TIMESTAMP, TIMESTAMP_PATTERN),
    (TemporalShape.DATE, DATE_PATTERN),
    (TemporalShape.TIMETZ, TIMETZ_PATTERN),
)


def detect_shape(value: str) -> Optional[TemporalShape]:
    """Classify a string against the date/time wire grammars.

    Args:
        value: Candidate string.

    Returns:
        The matching shape, or ``None`` when the string fits none of them.
    """
    for shape, pattern in _SHAPE_PATTERNS:
        if pattern.fullmatch(value):
            return shape
    return None
