#!/usr/bin/env python3
"""
Create the schema and load seed data into the configured database.

Usage:
    python scripts/seed.py
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from cats_api.core.config import settings
from cats_api.infrastructure.db.seed import seed
from cats_api.infrastructure.db.session import SessionLocal, init_db
from cats_api.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main():
    """Seed roles and cats."""
    configure_logging(level=settings.log_level)
    logger.info("Seeding database: %s", settings.database_url)

    init_db()
    with SessionLocal() as session:
        counts = seed(session)

    logger.info("Done: %s", counts)
    return 0


if __name__ == "__main__":
    sys.exit(main())
