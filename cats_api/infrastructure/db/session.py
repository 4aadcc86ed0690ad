"""
Database engine and session factory.

One engine per process, built from ``settings.database_url``.
In-memory SQLite shares a single connection so every session sees
the same database.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cats_api.core.config import settings
from cats_api.infrastructure.db.models import Base

logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for the given URL."""
    parsed = make_url(url)
    kwargs: dict = {"echo": echo, "pool_pre_ping": True}

    if parsed.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool

    return create_engine(url, **kwargs)


engine = build_engine(settings.database_url, echo=settings.database_echo)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(bind: Optional[Engine] = None) -> None:
    """Create all tables that do not exist yet."""
    target = bind or engine
    Base.metadata.create_all(target)
    logger.info("Database schema ready (%s)", target.url.get_backend_name())
