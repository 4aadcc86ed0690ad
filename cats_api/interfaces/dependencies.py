"""
Shared dependency injection.

Provides one SQLAlchemy session per request.
"""

from collections.abc import Iterator

from sqlalchemy.orm import Session

from cats_api.infrastructure.db.session import SessionLocal


def get_session() -> Iterator[Session]:
    """Yield a session and close it after the request."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
