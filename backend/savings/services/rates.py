from __future__ import annotations

from datetime import date
from decimal import Decimal

from savings.utils.dates import as_date


def _to_dec(v) -> Decimal:
    return Decimal(str(v))


def sort_rates(rates) -> list:
    usable = [r for r in (rates or []) if r is not None and getattr(r, "effective_date", None)]
    return sorted(usable, key=lambda r: as_date(r.effective_date))


def rate_on(sorted_rates: list, day: date) -> Decimal:
    """Annual percent in force on ``day``; ``sorted_rates`` must be ascending."""
    current = Decimal("0")
    for r in sorted_rates:
        if as_date(r.effective_date) <= day:
            current = _to_dec(r.rate)
        else:
            break
    return current


def current_rate(rates, day) -> Decimal:
    return rate_on(sort_rates(rates), as_date(day))
