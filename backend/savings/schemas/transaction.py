import math
from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, field_validator

from savings.utils.dates import as_date

TxType = Literal["deposit", "withdrawal", "interest"]

class TxCreate(BaseModel):
    type: TxType
    amount: float
    date: date
    description: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def date_normalize(cls, v):
        return as_date(v)

    @field_validator("amount")
    @classmethod
    def amount_must_be_finite_and_positive(cls, v: float):
        if not math.isfinite(v):
            raise ValueError("amount must be finite")
        if v <= 0:
            raise ValueError("amount must be positive")
        if Decimal(str(v)).as_tuple().exponent < -2:
            raise ValueError("amount must have at most two decimals")
        return v

    @field_validator("description")
    @classmethod
    def description_trim(cls, v: str | None):
        if v is None:
            return None
        v = v.strip()
        return v or None

class TxOut(BaseModel):
    id: int
    type: TxType
    amount: float
    date: date
    description: str | None
    created_at: datetime

    class Config:
        from_attributes = True
