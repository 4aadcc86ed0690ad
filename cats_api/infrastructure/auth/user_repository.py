"""
Adapter: User repository.

Implements the UserRepository port on a SQLAlchemy session.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from cats_api.domain.auth.entities import User
from cats_api.domain.auth.ports import UserRepository
from cats_api.infrastructure.db.models import RoleModel, UserModel, as_utc


def _to_entity(row: UserModel) -> User:
    return User(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password,
        roles=tuple(role.code for role in row.roles),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    """Users stored in ``users`` with roles through ``user_roles``."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: int) -> Optional[User]:
        row = self._session.get(UserModel, user_id)
        return _to_entity(row) if row is not None else None

    def get_by_email(self, email: str) -> Optional[User]:
        row = self._session.scalar(select(UserModel).where(UserModel.email == email))
        return _to_entity(row) if row is not None else None

    def role_exists(self, code: str) -> bool:
        return (
            self._session.scalar(select(RoleModel.id).where(RoleModel.code == code))
            is not None
        )

    def create(
        self, username: str, email: str, password_hash: str, roles: list[str]
    ) -> User:
        role_rows = list(
            self._session.scalars(select(RoleModel).where(RoleModel.code.in_(roles)))
        )
        row = UserModel(
            username=username, email=email, password=password_hash, roles=role_rows
        )
        self._session.add(row)
        self._session.commit()
        return _to_entity(row)
