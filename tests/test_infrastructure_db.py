"""
Tests for the SQLAlchemy repositories and the seed data.
"""

from datetime import timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from cats_api.domain.auth.entities import ADMIN_ROLE, DEFAULT_ROLE
from cats_api.domain.cats.entities import NewCat
from cats_api.infrastructure.auth.user_repository import SqlAlchemyUserRepository
from cats_api.infrastructure.cats.cat_repository import SqlAlchemyCatRepository
from cats_api.infrastructure.db.models import CatModel, RoleModel
from cats_api.infrastructure.db.seed import SEED_CATS, seed
from cats_api.infrastructure.db.session import build_engine


class TestSqlAlchemyCatRepository:
    """Tests for the cat repository."""

    def test_add_and_get(self, session: Session) -> None:
        repo = SqlAlchemyCatRepository(session)
        created = repo.add(NewCat(name="Tom", age=3, breed="Tabby", internal_notes="n"))
        fetched = repo.get_by_id(created.id)
        assert fetched.name == "Tom"
        assert fetched.internal_notes == "n"
        assert fetched.created_at is not None
        assert repo.get_by_name("Tom").id == created.id
        assert repo.get_by_name("Jerry") is None

    def test_timestamps_read_back_as_utc(self, session: Session) -> None:
        repo = SqlAlchemyCatRepository(session)
        created = repo.add(NewCat(name="Tom", age=3, breed="Tabby"))
        session.expire_all()
        fetched = repo.get_by_id(created.id)
        assert fetched.created_at.tzinfo is not None
        assert fetched.created_at.utcoffset() == timedelta(0)
        assert fetched.created_at == created.created_at

    def test_list_page_and_count(self, session: Session, seeded_cats) -> None:
        repo = SqlAlchemyCatRepository(session)
        assert repo.count() == len(SEED_CATS)
        names = [cat.name for cat in repo.list_page(offset=1, limit=2)]
        assert names == ["Shadow", "Luna"]

    def test_update(self, session: Session) -> None:
        repo = SqlAlchemyCatRepository(session)
        created = repo.add(NewCat(name="Tom", age=3, breed="Tabby"))
        updated = repo.update(created.id, {"age": 4})
        assert updated.age == 4
        assert repo.update(999, {"age": 4}) is None

    def test_delete(self, session: Session) -> None:
        repo = SqlAlchemyCatRepository(session)
        created = repo.add(NewCat(name="Tom", age=3, breed="Tabby"))
        assert repo.delete(created.id) is True
        assert repo.delete(created.id) is False
        assert repo.count() == 0


class TestSqlAlchemyUserRepository:
    """Tests for the user repository."""

    def test_create_with_roles(self, session: Session, roles) -> None:
        repo = SqlAlchemyUserRepository(session)
        user = repo.create("kitty", "kitty@example.com", "hash", [DEFAULT_ROLE])
        assert user.roles == (DEFAULT_ROLE,)
        assert repo.get_by_email("kitty@example.com").id == user.id
        assert repo.get_by_id(user.id).password_hash == "hash"
        assert repo.get_by_email("ghost@example.com") is None

    def test_role_exists(self, session: Session, roles) -> None:
        repo = SqlAlchemyUserRepository(session)
        assert repo.role_exists(DEFAULT_ROLE)
        assert repo.role_exists(ADMIN_ROLE)
        assert not repo.role_exists("guest")


class TestSeed:
    """Tests for the seed data loader."""

    def test_seeds_roles_and_cats(self, session: Session) -> None:
        counts = seed(session)
        assert counts == {"roles": 2, "cats": 4}
        assert set(session.scalars(select(RoleModel.code))) == {DEFAULT_ROLE, ADMIN_ROLE}
        whiskers = session.scalar(select(CatModel).where(CatModel.name == "Whiskers"))
        assert (whiskers.age, whiskers.breed) == (3, "Persian")

    def test_rerun_keeps_roles_and_resets_cats(self, session: Session) -> None:
        seed(session)
        SqlAlchemyCatRepository(session).add(NewCat(name="Extra", age=1, breed="Mixed"))

        assert seed(session) == {"roles": 0, "cats": 4}
        names = set(session.scalars(select(CatModel.name)))
        assert names == {cat["name"] for cat in SEED_CATS}


class TestBuildEngine:
    def test_in_memory_sqlite_shares_connection(self) -> None:
        engine = build_engine("sqlite://")
        assert type(engine.pool).__name__ == "StaticPool"

    def test_file_sqlite_uses_default_pool(self, tmp_path) -> None:
        engine = build_engine(f"sqlite:///{tmp_path / 'cats.db'}")
        assert type(engine.pool).__name__ != "StaticPool"
