from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterator

from savings.services.rates import rate_on, sort_rates
from savings.utils.dates import InvalidInput, as_date

Q2 = Decimal("0.01")
DAYS_PER_YEAR = Decimal("365")
TX_TYPES = ("deposit", "withdrawal", "interest")


def d2(x: Decimal) -> Decimal:
    return x.quantize(Q2, rounding=ROUND_HALF_UP)


def _to_dec(v) -> Decimal:
    return Decimal(str(v))


@dataclass(frozen=True)
class LedgerEntry:
    type: str
    amount: Decimal
    date: date
    description: str | None = None


@dataclass(frozen=True)
class RateEntry:
    rate: Decimal
    effective_date: date


@dataclass(frozen=True)
class CalculationResult:
    balance: Decimal
    principal: Decimal
    accrued_interest: Decimal


@dataclass(frozen=True)
class DaySnapshot:
    """State at the close of one simulated day, after any compounding."""

    day: date
    rate_percent: Decimal
    daily_interest: Decimal
    balance: Decimal
    principal: Decimal
    accrued_interest: Decimal
    compounded: Decimal
    entries: tuple[LedgerEntry, ...] = ()


def _normalize_transactions(transactions) -> list[LedgerEntry]:
    out: list[LedgerEntry] = []
    for t in transactions or []:
        if t.type not in TX_TYPES:
            raise InvalidInput(f"invalid_transaction_type:{t.type!r}")
        out.append(
            LedgerEntry(
                type=t.type,
                amount=_to_dec(t.amount),
                date=as_date(t.date),
                description=getattr(t, "description", None),
            )
        )
    # list.sort is stable, same-day entries keep ledger order
    out.sort(key=lambda e: e.date)
    return out


def _normalize_rates(rates) -> list[RateEntry]:
    return [RateEntry(rate=_to_dec(r.rate), effective_date=as_date(r.effective_date)) for r in sort_rates(rates)]


def _month_start(d: date) -> date:
    return date(d.year, d.month, 1)


def _next_month_start(d: date) -> date:
    if d.month == 12:
        return date(d.year + 1, 1, 1)
    return date(d.year, d.month + 1, 1)


def _has_interest(entries: list[LedgerEntry]) -> bool:
    return any(e.type == "interest" for e in entries)


def iter_days(transactions, rates, target_date) -> Iterator[DaySnapshot]:
    """Simulate the account day by day from its first entry through ``target_date``.

    Interest earned on a day is only visible from the next day, so the target
    day itself never accrues. Accrued interest is compounded into principal
    when the next day opens a new month, unless a recorded interest entry
    closes the period today or tomorrow.
    """
    entries = _normalize_transactions(transactions)
    if not entries:
        return

    sorted_rates = _normalize_rates(rates)
    end = as_date(target_date)

    by_day: dict[date, list[LedgerEntry]] = {}
    for e in entries:
        by_day.setdefault(e.date, []).append(e)

    balance = Decimal("0")
    principal = Decimal("0")
    accrued = Decimal("0")

    day = entries[0].date
    while day <= end:
        todays = by_day.get(day, [])
        interest_posted = False
        for e in todays:
            if e.type == "deposit":
                balance += e.amount
                principal += e.amount
            elif e.type == "withdrawal":
                balance -= e.amount
                principal -= e.amount
            else:
                balance += e.amount
                principal += e.amount
                interest_posted = True

        # a recorded posting supersedes whatever the period accrued
        if interest_posted:
            accrued = Decimal("0")

        rate = rate_on(sorted_rates, day)
        daily = Decimal("0")
        if day < end and balance > 0 and rate > 0:
            daily = balance * rate / DAYS_PER_YEAR / Decimal("100")
            accrued += daily

        tomorrow = day + timedelta(days=1)
        compounded = Decimal("0")
        if (
            tomorrow.month != day.month
            and not interest_posted
            and not _has_interest(by_day.get(tomorrow, []))
        ):
            compounded = accrued
            balance += accrued
            principal += accrued
            accrued = Decimal("0")

        yield DaySnapshot(
            day=day,
            rate_percent=rate,
            daily_interest=daily,
            balance=balance,
            principal=principal,
            accrued_interest=accrued,
            compounded=compounded,
            entries=tuple(todays),
        )
        day = tomorrow


def calculate_balance(transactions, rates, target_date) -> CalculationResult:
    last: DaySnapshot | None = None
    for last in iter_days(transactions, rates, target_date):
        pass

    if last is None:
        zero = d2(Decimal("0"))
        return CalculationResult(balance=zero, principal=zero, accrued_interest=zero)

    return CalculationResult(
        balance=d2(last.balance + last.accrued_interest),
        principal=d2(last.principal),
        accrued_interest=d2(last.accrued_interest),
    )


def month_end_dates(start, end) -> list[date]:
    start_d = as_date(start)
    end_d = as_date(end)

    out: list[date] = []
    ms = _month_start(start_d)
    while ms <= end_d:
        nxt = _next_month_start(ms)
        month_end = nxt - timedelta(days=1)
        if month_end <= end_d:
            out.append(month_end)
        ms = nxt
    return out


def month_end_balances(transactions, rates, start, end) -> list[tuple[date, CalculationResult]]:
    return [(d, calculate_balance(transactions, rates, d)) for d in month_end_dates(start, end)]
