from datetime import date

from pydantic import BaseModel, Field

class BalanceOut(BaseModel):
    date: date
    balance: float
    principal: float
    accrued_interest: float = Field(alias="accruedInterest")

    class Config:
        populate_by_name = True
