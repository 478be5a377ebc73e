import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from savings.api.deps import db
from savings.models.interest_rate import InterestRate
from savings.schemas.rate import RateCreate, RateOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interest-rates", tags=["interest-rates"])

@router.get("", response_model=list[RateOut])
def list_rates(s: Session = Depends(db)):
    # Newest effective date first so the rate in force today is at the top.
    return s.execute(
        select(InterestRate).order_by(InterestRate.effective_date.desc(), InterestRate.id.desc())
    ).scalars().all()

@router.post("", response_model=RateOut, status_code=201)
def add_rate(body: RateCreate, s: Session = Depends(db)):
    r = InterestRate(rate=body.rate, effective_date=body.effective_date)
    s.add(r)
    s.commit()
    s.refresh(r)
    logger.info("rate %d added: %s%% from %s", r.id, r.rate, r.effective_date)
    return r

@router.delete("/{rate_id}")
def delete_rate(rate_id: int, s: Session = Depends(db)):
    r = s.execute(select(InterestRate).where(InterestRate.id == rate_id)).scalar_one_or_none()
    if not r:
        raise HTTPException(status_code=404, detail="rate_not_found")
    s.delete(r)
    s.commit()
    logger.info("rate %d deleted", rate_id)
    return {"ok": True}
