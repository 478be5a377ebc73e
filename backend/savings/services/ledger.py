from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from savings.models.interest_rate import InterestRate
from savings.models.transaction import Transaction


def load_transactions(s: Session) -> list[Transaction]:
    return list(
        s.execute(select(Transaction).order_by(Transaction.date.asc(), Transaction.id.asc()))
        .scalars()
        .all()
    )


def load_rates(s: Session) -> list[InterestRate]:
    return list(
        s.execute(select(InterestRate).order_by(InterestRate.effective_date.asc(), InterestRate.id.asc()))
        .scalars()
        .all()
    )
