import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from savings.api.deps import db
from savings.models.transaction import Transaction
from savings.schemas.transaction import TxCreate, TxOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=list[TxOut])
def list_transactions(s: Session = Depends(db)):
    return s.execute(
        select(Transaction).order_by(Transaction.date.desc(), Transaction.id.desc())
    ).scalars().all()


@router.post("", response_model=TxOut, status_code=201)
def add_tx(body: TxCreate, s: Session = Depends(db)):
    t = Transaction(
        type=body.type,
        amount=body.amount,
        date=body.date,
        description=body.description,
    )
    s.add(t)
    s.commit()
    s.refresh(t)
    logger.info("transaction %d added: %s %s on %s", t.id, t.type, t.amount, t.date)
    return t


@router.delete("/{tx_id}")
def delete_tx(tx_id: int, s: Session = Depends(db)):
    t = s.execute(select(Transaction).where(Transaction.id == tx_id)).scalar_one_or_none()
    if t is None:
        raise HTTPException(status_code=404, detail="transaction_not_found")
    s.delete(t)
    s.commit()
    logger.info("transaction %d deleted", tx_id)
    return {"ok": True}
