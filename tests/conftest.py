from __future__ import annotations

import os
import time
from collections.abc import Iterator

import pytest

# POSIX TZ strings, so no zoneinfo database is needed.
UTC_MINUS_5 = "XST+05"


def _apply_tz(name: str | None) -> None:
    if name is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = name
    time.tzset()


@pytest.fixture
def host_tz(request: pytest.FixtureRequest) -> Iterator[str]:
    """Pin the host timezone for the duration of a test (UTC-5 unless parametrized)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is POSIX only")
    name = getattr(request, "param", UTC_MINUS_5)
    original = os.environ.get("TZ")
    _apply_tz(name)
    try:
        yield name
    finally:
        _apply_tz(original)
