"""List tags use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.model import Tag
from inkwell.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    id: str
    name: str
    post_count: int
    created_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        return cls(
            id=str(tag.id),
            name=tag.name.root,
            post_count=tag.post_count,
            created_at=tag.created_at,
        )


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase(BaseUseCase):
    """Use case for listing tags with their post counts."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: None = None) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            All tags ordered by name
        """
        with logfire.span("list_tags.execute"):
            tags = await self.tag_service.get_all_tags()
            return ListTagsResponse(tags=[TagItem.from_tag(tag) for tag in tags])
