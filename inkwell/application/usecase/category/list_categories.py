"""List categories use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.model import Category
from inkwell.domain.service import CategoryService


class CategoryItem(BaseModel):
    """Category item in response."""

    id: str
    name: str
    post_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_category(cls, category: Category) -> "CategoryItem":
        return cls(
            id=str(category.id),
            name=category.name.root,
            post_count=category.post_count,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[CategoryItem]


class ListCategoriesUseCase(BaseUseCase):
    """Use case for listing categories with their post counts."""

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize list categories use case.

        Args:
            category_service: Category domain service
        """
        self.category_service = category_service

    async def execute(self, request: None = None) -> ListCategoriesResponse:
        """Execute list categories flow.

        Returns:
            All categories ordered by name
        """
        with logfire.span("list_categories.execute"):
            categories = await self.category_service.list_categories()
            return ListCategoriesResponse(
                categories=[CategoryItem.from_category(c) for c in categories]
            )
