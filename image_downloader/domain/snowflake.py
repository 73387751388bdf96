"""Snowflake helpers — converting between dates and Discord message IDs.

A snowflake stores milliseconds since the Discord epoch in its upper 42 bits,
so comparing IDs compares send times.
"""

from datetime import datetime, timezone
from typing import Optional

DISCORD_EPOCH_MS = 1420070400000
MAX_SNOWFLAKE = 2 ** 64 - 1
_TIMESTAMP_SHIFT = 22
_FIRST_YEAR = 2015

_DATE_FORMAT_HINT = "Please use the following format: `DD/MM/YY`!"


def is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def is_snowflake_text(text: str) -> bool:
    """True for a plain decimal string that fits in an unsigned 64-bit ID."""
    return is_ascii_digits(text) and int(text) <= MAX_SNOWFLAKE


def snowflake_from_datetime(dt: datetime) -> int:
    """Smallest snowflake that could have been generated at ``dt``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    millis = int(dt.timestamp() * 1000)
    if millis < DISCORD_EPOCH_MS:
        raise ValueError(f"{dt.isoformat()} is before the Discord epoch")
    return (millis - DISCORD_EPOCH_MS) << _TIMESTAMP_SHIFT


def datetime_from_snowflake(snowflake: int) -> datetime:
    millis = (snowflake >> _TIMESTAMP_SHIFT) + DISCORD_EPOCH_MS
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def _parse_part(raw: str, label: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid {label} Input! {_DATE_FORMAT_HINT}")


def parse_start_date(text: str, now: Optional[datetime] = None) -> int:
    """Parse a ``DD/MM/YY`` or ``DD/MM/YYYY`` date into a snowflake boundary.

    Blank input or ``default`` means no lower bound and returns 0. The date is
    taken as UTC midnight. Raises ValueError with a user-readable message.
    """
    text = text.strip()
    if not text or text.lower() == "default":
        return 0

    parts = text.split("/")
    if len(parts) != 3 or len(text) not in (8, 10):
        raise ValueError("Invalid input! Please write a date as `DD/MM/YY`.")

    day = _parse_part(parts[0], "Day")
    if not 0 < day < 32:
        raise ValueError("No month has that many days!")

    month = _parse_part(parts[1], "Month")
    if not 0 < month < 13:
        raise ValueError("There aren't that many months!")

    year_text = f"20{parts[2]}" if len(text) == 8 else parts[2]
    year = _parse_part(year_text, "Year")
    if year < _FIRST_YEAR:
        raise ValueError(
            "Discord didn't even exist at the time! "
            "Leave it blank if you don't want to select a time range."
        )

    try:
        date = datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        raise ValueError(f"{text} is not a real date!")

    now = now or datetime.now(timezone.utc)
    if date > now:
        raise ValueError("You can't select a future date!")

    return snowflake_from_datetime(date)
