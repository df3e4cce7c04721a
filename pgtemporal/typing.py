"""Type aliases for the database's textual date/time encodings.

The aliases are plain ``str`` at runtime. They document which wire shape a
value is expected to carry, for example in row types generated from a schema.
"""

from typing import Literal, Union

from typing_extensions import TypeAlias

__all__ = (
    "DateString",
    "FormatLiteral",
    "TemporalString",
    "TimeString",
    "TimeTzString",
    "TimestampString",
    "TimestampTzString",
    "TzSuffix",
    "ZoneModeLiteral",
)

DateString: TypeAlias = str
"""An ISO8601-formatted date string, such as ``"2021-05-25"``."""

TimeString: TypeAlias = str
"""An ISO8601-formatted time string, such as ``"14:41"`` or ``"14:41:10.249"``."""

TzSuffix: TypeAlias = str
"""A timezone suffix string, such as ``"Z"``, ``"-02"`` or ``"+01:00"``."""

TimeTzString: TypeAlias = str
"""A time and timezone string, such as ``"14:41:10+02"``.

Postgres advises against ``timetz`` outside legacy schemas.
"""

TimestampString: TypeAlias = str
"""A date and time string with no timezone, such as ``"2021-05-25T14:41:10.249097"``."""

TimestampTzString: TypeAlias = str
"""A date, time and numeric timezone string, such as ``"2021-05-25T14:41:10.249097+01:00"``."""

TemporalString: TypeAlias = Union[DateString, TimestampString, TimestampTzString]

ZoneModeLiteral: TypeAlias = Literal["UTC", "local"]
FormatLiteral: TypeAlias = Literal["timestamptz", "timestamp:UTC", "timestamp:local", "date:UTC", "date:local"]
