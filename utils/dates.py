# utils/dates.py
import math
from datetime import date, datetime, timedelta

from models.errors import InvalidSaleDate

ONE_DAY = timedelta(days=1)


def as_datetime(value: date | datetime) -> datetime:
    # date(2024, 4, 1) -> datetime(2024, 4, 1, 0, 0)
    # aware values are stored as naive local time
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise InvalidSaleDate(value)


def days_between(start: datetime, end: datetime) -> float:
    # fractional number of days from start to end (negative if end < start)
    return (end - start) / ONE_DAY


def days_until_christmas(now: datetime) -> int:
    """
    Whole days from now until December 25 of now's year, rounded up.

    Christmas is taken at midnight, so on Dec 25 itself the result is 0 or
    negative, and it stays negative for the rest of December.
    """
    christmas = datetime(now.year, 12, 25, tzinfo=now.tzinfo)
    return math.ceil(days_between(now, christmas))
