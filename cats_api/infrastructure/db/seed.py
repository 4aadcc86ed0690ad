"""
Seed data: the two roles and a starter set of cats.

Roles are only added when missing. The cats table is reset to the
sample rows on every run.
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from cats_api.domain.auth.entities import ADMIN_ROLE, DEFAULT_ROLE
from cats_api.infrastructure.db.models import CatModel, RoleModel

logger = logging.getLogger(__name__)

SEED_ROLES = [
    {"code": DEFAULT_ROLE, "name": "User"},
    {"code": ADMIN_ROLE, "name": "Super Admin"},
]

SEED_CATS = [
    {"name": "Whiskers", "age": 3, "breed": "Persian", "description": "A fluffy white cat"},
    {"name": "Shadow", "age": 5, "breed": "British Shorthair", "description": "A grey cat that loves to play"},
    {"name": "Luna", "age": 2, "breed": "Siamese", "description": "An elegant and vocal cat"},
    {"name": "Mittens", "age": 4, "breed": "Maine Coon", "description": "A large and friendly cat"},
]


def seed_roles(session: Session) -> int:
    existing = set(session.scalars(select(RoleModel.code)))
    added = 0
    for role in SEED_ROLES:
        if role["code"] in existing:
            continue
        session.add(RoleModel(**role))
        added += 1
    return added


def seed_cats(session: Session) -> int:
    """Replace every cat with the sample rows."""
    session.execute(delete(CatModel))
    session.add_all(CatModel(**cat) for cat in SEED_CATS)
    return len(SEED_CATS)


def seed(session: Session) -> dict[str, int]:
    """Load seed rows and commit.

    Returns:
        Number of rows written per table.
    """
    counts = {"roles": seed_roles(session), "cats": seed_cats(session)}
    session.commit()
    logger.info("Seeded %d roles and %d cats", counts["roles"], counts["cats"])
    return counts
