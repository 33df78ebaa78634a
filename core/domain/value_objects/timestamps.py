"""Timestamp normalisation for values coming from the history store."""

import re
from datetime import datetime, timezone

from pydantic import TypeAdapter

_DATETIME_ADAPTER = TypeAdapter(datetime)

# .NET serializers emit up to 7 fractional digits, datetime holds 6
_FRACTION_RE = re.compile(r"\.(\d{6})(\d+)")

# Exact point in time: UTC datetime plus nanoseconds below its microsecond
Instant = tuple[datetime, int]


def to_utc_instant(value: datetime | str | None) -> Instant | None:
    """Normalise a datetime or ISO-8601 string to an exact UTC instant.

    Fractions beyond microseconds (the 7th tick digit of .NET timestamps)
    are kept as nanoseconds next to the datetime, so two strings 100ns
    apart do not compare equal. Naive values are treated as UTC.

    Raises:
        ValueError: If a string is not valid ISO-8601
        TypeError: If value is neither a string nor a datetime
    """
    if value is None:
        return None
    if not isinstance(value, (str, datetime)):
        raise TypeError(f"Expected datetime or ISO string, got: {type(value).__name__}")

    nanoseconds = 0
    if isinstance(value, str):
        text = value.strip()
        match = _FRACTION_RE.search(text)
        if match is not None:
            nanoseconds = int(match.group(2)[:3].ljust(3, "0"))
            text = f"{text[:match.start()]}.{match.group(1)}{text[match.end():]}"
        value = _DATETIME_ADAPTER.validate_python(text)

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc), nanoseconds
    return value.astimezone(timezone.utc), nanoseconds


def to_utc(value: datetime | str | None) -> datetime | None:
    """Normalise a datetime or ISO-8601 string to an aware UTC datetime.

    Precision stops at microseconds; use to_utc_instant() where
    sub-microsecond ticks matter. Returns None for None.
    """
    instant = to_utc_instant(value)
    if instant is None:
        return None
    return instant[0]
