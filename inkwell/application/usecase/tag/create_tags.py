"""Create tags use case."""

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import TagService

from .list_tags import ListTagsResponse, TagItem


class CreateTagsRequest(BaseModel):
    """Create tags request."""

    names: list[str] = Field(min_length=1)


class CreateTagsUseCase(BaseUseCase):
    """Use case for resolving tag names, creating the missing ones."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagsRequest) -> ListTagsResponse:
        """Execute create tags flow.

        Args:
            request: Tag names to resolve

        Returns:
            One tag per distinct normalised name

        Raises:
            ValidationError: If a name is invalid
        """
        with logfire.span("create_tags.execute", count=len(request.names)):
            tags = await self.tag_service.create_tags(request.names)
            return ListTagsResponse(tags=[TagItem.from_tag(tag) for tag in tags])
