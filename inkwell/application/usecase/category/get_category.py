"""Get category use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import CategoryService
from inkwell.domain.value import CategoryId

from .list_categories import CategoryItem


class GetCategoryRequest(BaseModel):
    """Get category request."""

    category_id: str  # UUID string


class GetCategoryUseCase(BaseUseCase):
    """Use case for retrieving a single category."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: GetCategoryRequest) -> CategoryItem:
        """Execute get category flow.

        Raises:
            NotFoundError: If category not found
        """
        category = await self.category_service.get_category_by_id(
            CategoryId(UUID(request.category_id))
        )
        return CategoryItem.from_category(category)
