from sqlalchemy import Integer, Date, DateTime, func, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column
from savings.db.base import Base

class Transaction(Base):
    __tablename__ = "transactions"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[str] = mapped_column(String(16))
    amount: Mapped[float] = mapped_column(Numeric(14, 2))
    date: Mapped[Date] = mapped_column(Date, index=True)
    description: Mapped[str | None] = mapped_column(String(256), nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime, server_default=func.now())
