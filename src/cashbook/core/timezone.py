"""Date and time helpers."""

from datetime import date, datetime
from typing import Union

import pytz
from dateutil import parser as date_parser

UTC = pytz.utc


def now_utc() -> datetime:
    """Return current time as an aware UTC datetime."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC; naive values are assumed to be UTC already."""
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def parse_date(value: Union[str, date, datetime]) -> date:
    """
    Coerce a calendar date from a date, datetime or string.

    Strings are parsed with dateutil, so both "2024-06-15" and
    "Jun 15 2024" are accepted. The time part of a datetime is dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(value).date()
