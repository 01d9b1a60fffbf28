"""Delete category use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import CategoryService
from inkwell.domain.value import CategoryId


class DeleteCategoryRequest(BaseModel):
    """Delete category request."""

    category_id: str  # UUID string


class DeleteCategoryUseCase(BaseUseCase):
    """Use case for deleting an unused category."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: DeleteCategoryRequest) -> None:
        """Execute delete category flow.

        Raises:
            NotFoundError: If category not found
            ConflictError: If posts are still assigned to it
        """
        await self.category_service.delete_category(
            CategoryId(UUID(request.category_id))
        )
