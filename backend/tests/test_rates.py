from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from savings.services.interest import RateEntry
from savings.services.rates import current_rate, sort_rates


def _rate(effective: date, pct: str) -> RateEntry:
    return RateEntry(rate=Decimal(pct), effective_date=effective)


def test_empty_schedule_is_zero():
    assert current_rate([], date(2024, 1, 1)) == Decimal("0")
    assert current_rate(None, date(2024, 1, 1)) == Decimal("0")


def test_day_before_first_entry_is_zero():
    rates = [_rate(date(2024, 1, 10), "5.0")]
    assert current_rate(rates, date(2024, 1, 9)) == Decimal("0")


def test_effective_date_is_inclusive_and_latest_wins():
    rates = [_rate(date(2024, 1, 1), "5.0"), _rate(date(2024, 1, 15), "8.0")]

    assert current_rate(rates, date(2024, 1, 14)) == Decimal("5.0")
    assert current_rate(rates, date(2024, 1, 15)) == Decimal("8.0")
    assert current_rate(rates, date(2030, 1, 1)) == Decimal("8.0")


def test_unsorted_schedule_is_sorted_before_lookup():
    rates = [_rate(date(2024, 3, 1), "3.0"), _rate(date(2024, 1, 1), "5.0"), _rate(date(2024, 2, 1), "4.0")]

    assert current_rate(rates, date(2024, 1, 20)) == Decimal("5.0")
    assert current_rate(rates, date(2024, 2, 20)) == Decimal("4.0")
    assert current_rate(rates, date(2024, 3, 20)) == Decimal("3.0")


def test_string_dates_and_float_rates_are_normalized():
    rates = [SimpleNamespace(rate=4.25, effective_date="2023-06-01")]
    assert current_rate(rates, "2023-06-01") == Decimal("4.25")


def test_entries_without_effective_date_are_skipped():
    rates = [SimpleNamespace(rate=9.0, effective_date=None), _rate(date(2024, 1, 1), "5.0")]

    assert [r.rate for r in sort_rates(rates)] == [Decimal("5.0")]
    assert current_rate(rates, date(2024, 1, 2)) == Decimal("5.0")
