"""Category routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from inkwell.application.usecase.auth import GetCurrentUserUseCase
from inkwell.application.usecase.category import (
    CategoryItem,
    CreateCategoryRequest,
    CreateCategoryUseCase,
    DeleteCategoryRequest,
    DeleteCategoryUseCase,
    GetCategoryRequest,
    GetCategoryUseCase,
    ListCategoriesResponse,
    ListCategoriesUseCase,
    UpdateCategoryRequest,
    UpdateCategoryUseCase,
)
from inkwell.interface.api.auth import require_user

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


class CategoryAPIRequest(BaseModel):
    """API request for creating or renaming a category."""

    name: str


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """List all categories with their post counts."""
    return await use_case.execute()


@router.get("/{category_id}", response_model=CategoryItem)
async def get_category(
    category_id: UUID,
    use_case: FromDishka[GetCategoryUseCase],
) -> CategoryItem:
    """Get a category by ID."""
    return await use_case.execute(GetCategoryRequest(category_id=str(category_id)))


@router.post("", response_model=CategoryItem, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryAPIRequest,
    use_case: FromDishka[CreateCategoryUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> CategoryItem:
    """Create a category.

    Returns 409 if a category with the same name exists, ignoring case.
    """
    await require_user(get_current_user_use_case, auth_token, authorization)
    return await use_case.execute(CreateCategoryRequest(name=request.name))


@router.put("/{category_id}", response_model=CategoryItem)
async def update_category(
    category_id: UUID,
    request: CategoryAPIRequest,
    use_case: FromDishka[UpdateCategoryUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> CategoryItem:
    """Rename a category."""
    await require_user(get_current_user_use_case, auth_token, authorization)
    return await use_case.execute(
        UpdateCategoryRequest(category_id=str(category_id), name=request.name)
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: UUID,
    use_case: FromDishka[DeleteCategoryUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> None:
    """Delete a category.

    Returns 409 while any post is assigned to it.
    """
    await require_user(get_current_user_use_case, auth_token, authorization)
    await use_case.execute(DeleteCategoryRequest(category_id=str(category_id)))
