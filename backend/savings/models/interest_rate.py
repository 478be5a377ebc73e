from sqlalchemy import Integer, Date, DateTime, func, Numeric
from sqlalchemy.orm import Mapped, mapped_column
from savings.db.base import Base

class InterestRate(Base):
    __tablename__ = "interest_rates"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    rate: Mapped[float] = mapped_column(Numeric(8, 4))
    effective_date: Mapped[Date] = mapped_column(Date, index=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime, server_default=func.now())
