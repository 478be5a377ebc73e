"""Calendar-date parsing shared by the engine, the store and the HTTP layer.

Every ledger date, rate effective date and target date is funnelled through
``as_date`` so values built by different code paths compare on the same
local calendar day.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from savings.utils.timezone import LOCAL_TZ

_DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})$")


class InvalidInput(ValueError):
    pass


def parse_date(date_str: str) -> date:
    if not date_str:
        raise InvalidInput("date_required")

    m = _DATE_RE.match(str(date_str).strip())
    if m is None:
        raise InvalidInput(f"invalid_date:{date_str!r}")

    year, month, day = (int(p) for p in m.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidInput(f"invalid_date:{date_str!r}") from e


def format_date_local(d: date | datetime) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def to_local_midnight(instant: date | datetime) -> datetime:
    if isinstance(instant, datetime):
        if instant.tzinfo is not None:
            instant = instant.astimezone(LOCAL_TZ)
        return instant.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
    return datetime(instant.year, instant.month, instant.day)


def as_date(value) -> date:
    # datetime is a subclass of date, so it has to be checked first
    if isinstance(value, datetime):
        return to_local_midnight(value).date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    if value is None:
        raise InvalidInput("date_required")
    raise InvalidInput(f"invalid_date:{value!r}")
