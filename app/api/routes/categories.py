"""
Category tree endpoints

Reads are public; creating, renaming, moving or deleting categories needs ROLE_ADMIN.
"""

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import require_roles
from app.domains.ecommerce.api.dependencies import get_category_service
from app.domains.ecommerce.api.schemas import CategoryCreateRequest, CategoryResponse, CategoryUpdateRequest
from app.domains.ecommerce.application.dto import CategoryRequest
from app.domains.ecommerce.application.services import CategoryService
from app.domains.ecommerce.domain.value_objects import RoleName

router = APIRouter(prefix="/categories", tags=["categories"])

require_admin = require_roles(RoleName.ADMIN.value)


@router.get("", response_model=list[CategoryResponse])
async def get_all_categories(service: CategoryService = Depends(get_category_service)):  # noqa: B008
    return await service.get_all_categories()


@router.get("/top-level", response_model=list[CategoryResponse])
async def get_top_level_categories(service: CategoryService = Depends(get_category_service)):  # noqa: B008
    return await service.get_top_level_categories()


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def add_category(
    request: CategoryCreateRequest,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    """Create a category; a missing parent is created as a top-level category."""
    return await service.add_category(CategoryRequest(name=request.name, parent_name=request.parent_name))


@router.get("/by-name/{name}", response_model=CategoryResponse)
async def get_category_by_name(name: str, service: CategoryService = Depends(get_category_service)):  # noqa: B008
    return await service.get_category_by_name(name)


@router.get("/by-name/{name}/subcategories", response_model=list[CategoryResponse])
async def get_sub_categories_by_parent_name(
    name: str,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    return await service.get_sub_categories_by_parent_name(name)


@router.get("/by-name/{name}/subcategories/all", response_model=list[CategoryResponse])
async def get_all_sub_categories_by_parent_name(
    name: str,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    return await service.get_all_sub_categories_by_parent_name(name)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category_by_id(
    category_id: int,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    return await service.get_category_by_id(category_id)


@router.put("/{category_id}", response_model=CategoryResponse, dependencies=[Depends(require_admin)])
async def update_category(
    category_id: int,
    request: CategoryUpdateRequest,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    """
    Rename and/or move a category. An empty parent_name moves it to the top level;
    moving it below itself or one of its descendants is rejected.
    """
    return await service.update_category(
        category_id, CategoryRequest(name=request.name, parent_name=request.parent_name)
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    await service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{category_id}/subcategories", response_model=list[CategoryResponse])
async def get_sub_categories_by_parent_id(
    category_id: int,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    return await service.get_sub_categories_by_parent_id(category_id)


@router.get("/{category_id}/subcategories/all", response_model=list[CategoryResponse])
async def get_all_sub_categories_by_parent_id(
    category_id: int,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    return await service.get_all_sub_categories_by_parent_id(category_id)


@router.get("/{category_id}/path", response_model=list[str])
async def get_category_path_by_id(
    category_id: int,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    """Category names from the root down to this category."""
    return await service.get_category_path_by_id(category_id)


@router.get("/{category_id}/parents", response_model=list[CategoryResponse])
async def get_parent_categories(
    category_id: int,
    service: CategoryService = Depends(get_category_service),  # noqa: B008
):
    """Ancestors of a category, nearest parent first."""
    return await service.get_parent_categories(category_id)
