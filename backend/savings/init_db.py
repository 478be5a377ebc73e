from savings.db.base import Base
from savings.db.session import engine
from savings.models.interest_rate import InterestRate  # noqa: F401
from savings.models.transaction import Transaction  # noqa: F401

def main():
    Base.metadata.create_all(engine)

if __name__ == "__main__":
    main()
