"""Categories API."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, status

from taskflow.api.v1.dependencies import CurrentUser, get_category_service
from taskflow.application.use_cases.categories import CategoryService
from taskflow.schemas.category import CategoryCreateRequest, CategoryUpdateRequest
from taskflow.schemas.common import Envelope, Row, ok

router = APIRouter()

Service = Annotated[CategoryService, Depends(get_category_service)]


@router.get("", response_model=Envelope[list[Row]], response_model_exclude_unset=True)
async def list_categories(user: CurrentUser, service: Service) -> Any:
    return ok(await service.list_categories(user.id))


@router.get("/{category_id}", response_model=Envelope[Row], response_model_exclude_unset=True)
async def get_category(category_id: str, user: CurrentUser, service: Service) -> Any:
    return ok(await service.get_category(user.id, category_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[Row],
    response_model_exclude_unset=True,
)
async def create_category(user: CurrentUser, service: Service, body: CategoryCreateRequest) -> Any:
    category = await service.create_category(user.id, body.model_dump())
    return ok(category, "Category created successfully")


@router.put("/{category_id}", response_model=Envelope[Row], response_model_exclude_unset=True)
async def update_category(
    category_id: str, user: CurrentUser, service: Service, body: CategoryUpdateRequest
) -> Any:
    category = await service.update_category(user.id, category_id, body.changes())
    return ok(category, "Category updated successfully")


@router.delete("/{category_id}", response_model=Envelope[Any], response_model_exclude_unset=True)
async def delete_category(category_id: str, user: CurrentUser, service: Service) -> Any:
    """Delete a category; 400 while any task still references it."""
    await service.delete_category(user.id, category_id)
    return ok(message="Category deleted successfully")
