from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from savings.api.deps import db
from savings.schemas.balance import BalanceOut
from savings.services.interest import CalculationResult, calculate_balance, month_end_balances
from savings.services.ledger import load_rates, load_transactions
from savings.utils.dates import parse_date
from savings.utils.timezone import today_local

router = APIRouter(prefix="/balance", tags=["balance"])


def _out(d, res: CalculationResult) -> BalanceOut:
    return BalanceOut(
        date=d,
        balance=float(res.balance),
        principal=float(res.principal),
        accrued_interest=float(res.accrued_interest),
    )


@router.get("", response_model=BalanceOut)
def balance(date: str | None = Query(None), s: Session = Depends(db)):
    target = parse_date(date) if date else today_local()
    # the whole ledger is passed: an interest entry dated after the target can still defer compounding
    return _out(target, calculate_balance(load_transactions(s), load_rates(s), target))


@router.get("/month-ends", response_model=list[BalanceOut])
def month_ends(start: str = Query(...), end: str | None = Query(None), s: Session = Depends(db)):
    start_d = parse_date(start)
    end_d = parse_date(end) if end else today_local()
    return [_out(d, res) for d, res in month_end_balances(load_transactions(s), load_rates(s), start_d, end_d)]
