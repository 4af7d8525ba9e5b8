from typing import Iterator

from sqlalchemy.orm import Session

from .session import SessionLocal

def get_db() -> Iterator[Session]:
    """
    Request-scoped database session.
    FastAPI caches it per request, so routes and the auth dependency share it.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
