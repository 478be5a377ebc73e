from pydantic import BaseModel

class AccrueOut(BaseModel):
    success: bool
    interest_transactions_added: int
    current_accrued_interest: float
    message: str
