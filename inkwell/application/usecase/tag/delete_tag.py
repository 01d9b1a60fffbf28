"""Delete tag use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import TagService
from inkwell.domain.value import TagId


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    tag_id: str  # UUID string


class DeleteTagUseCase(BaseUseCase):
    """Use case for deleting a tag. Posts carrying it lose the tag."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: DeleteTagRequest) -> None:
        """Execute delete tag flow.

        Raises:
            NotFoundError: If tag not found
        """
        await self.tag_service.delete_tag(TagId(UUID(request.tag_id)))
