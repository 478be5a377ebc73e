from datetime import date, datetime, timedelta, timezone

import pytest

from savings.utils.dates import InvalidInput, as_date, format_date_local, parse_date, to_local_midnight
from savings.utils.timezone import LOCAL_TZ


def test_parse_date_returns_calendar_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize("s", ["2024-01-01", "2024-02-29", "1999-12-31", "2025-07-04"])
def test_format_round_trips_parse(s):
    assert format_date_local(parse_date(s)) == s


@pytest.mark.parametrize(
    "bad",
    ["", None, "2024-01", "2024/01/01", "abcd-ef-gh", "2024-aa-01", "2024-13-01", "2023-02-29", "2024-01-01T10:00",
     "٢٠٢٤-٠١-٠١", "２０２４-01-01"],
)
def test_parse_date_rejects_malformed_input(bad):
    with pytest.raises(InvalidInput):
        parse_date(bad)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        parse_date("not-a-date")


def test_format_date_local_zero_pads_and_ignores_time():
    assert format_date_local(date(2024, 3, 5)) == "2024-03-05"
    assert format_date_local(datetime(2024, 3, 5, 23, 59, 59)) == "2024-03-05"


def test_to_local_midnight_zeroes_time_and_is_idempotent():
    once = to_local_midnight(datetime(2024, 6, 30, 17, 45, 12, 999))
    assert once == datetime(2024, 6, 30)
    assert to_local_midnight(once) == once


def test_to_local_midnight_converts_aware_instants_to_local_day():
    instant = datetime(2024, 1, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    out = to_local_midnight(instant)

    assert out.tzinfo is None
    assert out.date() == instant.astimezone(LOCAL_TZ).date()
    assert (out.hour, out.minute, out.second, out.microsecond) == (0, 0, 0, 0)


def test_as_date_accepts_strings_dates_and_datetimes():
    assert as_date("2024-01-02") == date(2024, 1, 2)
    assert as_date(date(2024, 1, 2)) == date(2024, 1, 2)
    assert as_date(datetime(2024, 1, 2, 15, 30)) == date(2024, 1, 2)


def test_as_date_rejects_other_types():
    with pytest.raises(InvalidInput):
        as_date(20240102)
    with pytest.raises(InvalidInput):
        as_date(None)
