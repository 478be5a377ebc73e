from savings.db.session import SessionLocal

def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()
