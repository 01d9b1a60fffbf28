"""Create category use case."""

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import CategoryService

from .list_categories import CategoryItem


class CreateCategoryRequest(BaseModel):
    """Create category request."""

    name: str


class CreateCategoryUseCase(BaseUseCase):
    """Use case for creating a category."""

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize create category use case.

        Args:
            category_service: Category domain service
        """
        self.category_service = category_service

    async def execute(self, request: CreateCategoryRequest) -> CategoryItem:
        """Execute create category flow.

        Args:
            request: Category name

        Returns:
            Created category

        Raises:
            ValidationError: If the name is invalid
            ConflictError: If the name is taken (ignoring case)
        """
        with logfire.span("create_category.execute", name=request.name):
            category = await self.category_service.create_category(request.name)
            return CategoryItem.from_category(category)
