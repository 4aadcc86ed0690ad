"""
Dependency injection for the cats bounded context.

Wires the SQLAlchemy repository into the use cases.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from cats_api.application.cats.create_cat import CreateCatUseCase
from cats_api.application.cats.delete_cat import DeleteCatUseCase
from cats_api.application.cats.get_cat import GetCatUseCase
from cats_api.application.cats.list_cats import ListCatsUseCase
from cats_api.application.cats.update_cat import UpdateCatUseCase
from cats_api.domain.cats.ports import CatRepository
from cats_api.infrastructure.cats.cat_repository import SqlAlchemyCatRepository
from cats_api.interfaces.dependencies import get_session


def get_cat_repository(session: Session = Depends(get_session)) -> CatRepository:
    return SqlAlchemyCatRepository(session)


def get_list_cats_use_case(
    repo: CatRepository = Depends(get_cat_repository),
) -> ListCatsUseCase:
    return ListCatsUseCase(cat_repo=repo)


def get_get_cat_use_case(
    repo: CatRepository = Depends(get_cat_repository),
) -> GetCatUseCase:
    return GetCatUseCase(cat_repo=repo)


def get_create_cat_use_case(
    repo: CatRepository = Depends(get_cat_repository),
) -> CreateCatUseCase:
    return CreateCatUseCase(cat_repo=repo)


def get_update_cat_use_case(
    repo: CatRepository = Depends(get_cat_repository),
) -> UpdateCatUseCase:
    return UpdateCatUseCase(cat_repo=repo)


def get_delete_cat_use_case(
    repo: CatRepository = Depends(get_cat_repository),
) -> DeleteCatUseCase:
    return DeleteCatUseCase(cat_repo=repo)
