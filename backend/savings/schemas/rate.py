import math
from datetime import date, datetime

from pydantic import BaseModel, field_validator

from savings.utils.dates import as_date

class RateCreate(BaseModel):
    rate: float
    effective_date: date

    @field_validator("effective_date", mode="before")
    @classmethod
    def effective_date_normalize(cls, v):
        return as_date(v)

    @field_validator("rate")
    @classmethod
    def rate_non_negative(cls, v: float):
        if not math.isfinite(v):
            raise ValueError("rate must be finite")
        if v < 0:
            raise ValueError("rate must not be negative")
        return v

class RateOut(BaseModel):
    id: int
    rate: float
    effective_date: date
    created_at: datetime

    class Config:
        from_attributes = True
