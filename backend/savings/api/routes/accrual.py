from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from savings.api.deps import db
from savings.schemas.accrual import AccrueOut
from savings.services.accrual import NoTransactions, accrue_interest
from savings.utils.dates import parse_date
from savings.utils.timezone import today_local

router = APIRouter(prefix="/accrue-interest", tags=["accrual"])


@router.post("", response_model=AccrueOut)
def accrue(date: str | None = Query(None), s: Session = Depends(db)):
    as_of = parse_date(date) if date else today_local()
    try:
        outcome = accrue_interest(s, as_of)
    except NoTransactions:
        raise HTTPException(status_code=404, detail="no_transactions")

    added = len(outcome.added)
    return AccrueOut(
        success=True,
        interest_transactions_added=added,
        current_accrued_interest=float(outcome.current_accrued_interest),
        message=(
            f"Added {added} interest transaction(s) to history. "
            f"Current month accrued interest: {outcome.current_accrued_interest:.2f}"
        ),
    )
