"""Update category use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import CategoryService
from inkwell.domain.value import CategoryId

from .list_categories import CategoryItem


class UpdateCategoryRequest(BaseModel):
    """Update category request."""

    category_id: str  # UUID string
    name: str


class UpdateCategoryUseCase(BaseUseCase):
    """Use case for renaming a category."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: UpdateCategoryRequest) -> CategoryItem:
        """Execute update category flow.

        Raises:
            NotFoundError: If category not found
            ValidationError: If the name is invalid
            ConflictError: If another category uses the name
        """
        with logfire.span(
            "update_category.execute", category_id=request.category_id
        ):
            category = await self.category_service.update_category(
                CategoryId(UUID(request.category_id)), request.name
            )
            return CategoryItem.from_category(category)
