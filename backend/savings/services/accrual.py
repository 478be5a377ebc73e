from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy.orm import Session

from savings.models.transaction import Transaction
from savings.services.interest import calculate_balance, d2, iter_days
from savings.services.ledger import load_rates, load_transactions
from savings.utils.dates import as_date
from savings.utils.timezone import today_local

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


class NoTransactions(LookupError):
    pass


@dataclass(frozen=True)
class InterestPosting:
    date: date
    amount: Decimal
    description: str
    type: str = "interest"


@dataclass(frozen=True)
class AccrualOutcome:
    added: list[InterestPosting]
    current_accrued_interest: Decimal


def posting_description(month_day: date) -> str:
    return f"Interest compounded for {MONTH_NAMES[month_day.month - 1]} {month_day.year}"


def pending_interest_postings(transactions, rates, as_of) -> list[InterestPosting]:
    """Interest entries the ledger is missing for month boundaries up to ``as_of``.

    Each posting is dated the first day of the new month and carries the
    amount the engine compounded on the last day of the closed month. Months
    already closed by a recorded interest entry never compound, so they yield
    nothing.

    Postings are found one at a time and fed back into the ledger, so every
    later month is computed on the rounded amount that will actually be
    stored.

    ``as_of`` is capped at today: months that have not closed yet are never
    posted.
    """
    end = min(as_date(as_of), today_local())
    working = list(transactions)
    out: list[InterestPosting] = []
    while True:
        nxt = _first_pending_posting(working, rates, end)
        if nxt is None:
            return out
        out.append(nxt)
        working.append(nxt)


def _first_pending_posting(transactions, rates, end: date) -> InterestPosting | None:
    for snap in iter_days(transactions, rates, end):
        posting_day = snap.day + timedelta(days=1)
        if posting_day > end:
            break
        amount = d2(snap.compounded)
        if amount == 0:
            continue
        return InterestPosting(date=posting_day, amount=amount, description=posting_description(snap.day))
    return None


def accrue_interest(s: Session, as_of: date) -> AccrualOutcome:
    as_of = as_date(as_of)
    today = today_local()
    if as_of > today:
        logger.info("accrue_interest: %s is in the future, capping at %s", as_of.isoformat(), today.isoformat())
        as_of = today
    txs = load_transactions(s)
    if not txs:
        raise NoTransactions("no_transactions")
    rates = load_rates(s)

    postings = pending_interest_postings(txs, rates, as_of)
    for p in postings:
        s.add(Transaction(type=p.type, amount=p.amount, date=p.date, description=p.description))
        logger.info("posted interest %s on %s (%s)", p.amount, p.date.isoformat(), p.description)
    s.commit()

    if postings:
        logger.info("accrue_interest added %d posting(s) up to %s", len(postings), as_of.isoformat())
        txs = load_transactions(s)

    result = calculate_balance(txs, rates, as_of)
    return AccrualOutcome(added=postings, current_accrued_interest=result.accrued_interest)
