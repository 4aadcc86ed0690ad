"""
FastAPI router for the cats bounded context.

All routes delegate to use cases. No business logic here.
Results are wrapped in the response envelope by EnvelopeRoute;
business errors are reported by the exception translator.
"""

from fastapi import APIRouter, Depends, Path, Query

from cats_api.application.cats.create_cat import CreateCatUseCase
from cats_api.application.cats.delete_cat import DeleteCatUseCase
from cats_api.application.cats.dtos import (
    CatResult,
    CreateCatCommand,
    ListCatsQuery,
    UpdateCatCommand,
)
from cats_api.application.cats.get_cat import GetCatUseCase
from cats_api.application.cats.list_cats import ListCatsUseCase
from cats_api.application.cats.update_cat import UpdateCatUseCase
from cats_api.domain.auth.entities import ADMIN_ROLE, DEFAULT_ROLE
from cats_api.interfaces.auth.dependencies import require_roles
from cats_api.interfaces.cats.dependencies import (
    get_create_cat_use_case,
    get_delete_cat_use_case,
    get_get_cat_use_case,
    get_list_cats_use_case,
    get_update_cat_use_case,
)
from cats_api.interfaces.cats.schemas import (
    CatResponse,
    CreateCatRequest,
    RemovedResponse,
    UpdateCatRequest,
)
from cats_api.shared.response import ApiResponse, Page
from cats_api.shared.routing import EnvelopeRoute

router = APIRouter(prefix="/cats", tags=["cats"], route_class=EnvelopeRoute)

can_read = Depends(require_roles(DEFAULT_ROLE, ADMIN_ROLE))
can_write = Depends(require_roles(ADMIN_ROLE))

MAX_PAGE_SIZE = 100


def _to_response(result: CatResult) -> CatResponse:
    return CatResponse(
        id=result.id,
        name=result.name,
        age=result.age,
        breed=result.breed,
        description=result.description,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.get(
    "",
    dependencies=[can_read],
    summary="List cats",
    description="Return one page of cats ordered by ID.",
)
def list_cats(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    use_case: ListCatsUseCase = Depends(get_list_cats_use_case),
) -> ApiResponse[Page[CatResponse]]:
    """List cats with page-number pagination."""
    result = use_case.execute(ListCatsQuery(page=page, page_size=page_size))
    return ApiResponse.paginated(
        [_to_response(item) for item in result.items],
        page=result.page,
        page_size=result.page_size,
        total=result.total,
    )


@router.get(
    "/{cat_id}",
    dependencies=[can_read],
    summary="Get a cat",
)
def get_cat(
    cat_id: int = Path(..., description="Cat ID"),
    use_case: GetCatUseCase = Depends(get_get_cat_use_case),
) -> CatResponse:
    """Return one cat. Unknown IDs are a not-found business error."""
    return _to_response(use_case.execute(cat_id))


@router.post(
    "",
    dependencies=[can_write],
    summary="Create a cat",
)
def create_cat(
    request: CreateCatRequest,
    use_case: CreateCatUseCase = Depends(get_create_cat_use_case),
) -> CatResponse:
    """Create a cat. Names must be unique."""
    command = CreateCatCommand(
        name=request.name,
        age=request.age,
        breed=request.breed,
        description=request.description,
    )
    return _to_response(use_case.execute(command))


@router.patch(
    "/{cat_id}",
    dependencies=[can_write],
    summary="Update a cat",
)
def update_cat(
    request: UpdateCatRequest,
    cat_id: int = Path(..., description="Cat ID"),
    use_case: UpdateCatUseCase = Depends(get_update_cat_use_case),
) -> CatResponse:
    """Apply the fields present in the body."""
    command = UpdateCatCommand(
        cat_id=cat_id, changes=request.model_dump(exclude_unset=True)
    )
    return _to_response(use_case.execute(command))


@router.delete(
    "/{cat_id}",
    dependencies=[can_write],
    summary="Delete a cat",
)
def delete_cat(
    cat_id: int = Path(..., description="Cat ID"),
    use_case: DeleteCatUseCase = Depends(get_delete_cat_use_case),
) -> RemovedResponse:
    use_case.execute(cat_id)
    return RemovedResponse(message=f"Cat with ID {cat_id} has been removed")
