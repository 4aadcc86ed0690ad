"""
Adapter: Cat repository.

Implements the CatRepository port on a SQLAlchemy session.
Write operations commit immediately.
"""

import logging
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from cats_api.domain.cats.entities import Cat, NewCat
from cats_api.domain.cats.ports import CatRepository
from cats_api.infrastructure.db.models import CatModel, as_utc

logger = logging.getLogger(__name__)


def _to_entity(row: CatModel) -> Cat:
    return Cat(
        id=row.id,
        name=row.name,
        age=row.age,
        breed=row.breed,
        description=row.description,
        internal_notes=row.internal_notes,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyCatRepository(CatRepository):
    """Cats stored in the ``cats`` table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_page(self, offset: int, limit: int) -> list[Cat]:
        rows = self._session.scalars(
            select(CatModel).order_by(CatModel.id).offset(offset).limit(limit)
        )
        return [_to_entity(row) for row in rows]

    def count(self) -> int:
        return self._session.scalar(select(func.count()).select_from(CatModel)) or 0

    def get_by_id(self, cat_id: int) -> Optional[Cat]:
        row = self._session.get(CatModel, cat_id)
        return _to_entity(row) if row is not None else None

    def get_by_name(self, name: str) -> Optional[Cat]:
        row = self._session.scalar(select(CatModel).where(CatModel.name == name))
        return _to_entity(row) if row is not None else None

    def add(self, cat: NewCat) -> Cat:
        row = CatModel(
            name=cat.name,
            age=cat.age,
            breed=cat.breed,
            description=cat.description,
            internal_notes=cat.internal_notes,
        )
        self._session.add(row)
        self._session.commit()
        return _to_entity(row)

    def update(self, cat_id: int, changes: dict[str, Any]) -> Optional[Cat]:
        row = self._session.get(CatModel, cat_id)
        if row is None:
            return None
        for field_name, value in changes.items():
            setattr(row, field_name, value)
        self._session.commit()
        return _to_entity(row)

    def delete(self, cat_id: int) -> bool:
        row = self._session.get(CatModel, cat_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.commit()
        return True
