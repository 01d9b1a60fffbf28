"""List posts use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import PostService
from inkwell.domain.value import CategoryId, TagId

from .common import PostItem, PostItemBuilder


class ListPostsRequest(BaseModel):
    """List posts request."""

    category_id: Optional[str] = None  # UUID string
    tag_id: Optional[str] = None  # UUID string


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing published posts."""

    def __init__(self, post_service: PostService, builder: PostItemBuilder) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            builder: Response item builder
        """
        self.post_service = post_service
        self.builder = builder

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Optional category and tag filters

        Returns:
            Published posts matching every given filter, newest first
        """
        with logfire.span(
            "list_posts.execute",
            category_id=request.category_id,
            tag_id=request.tag_id,
        ):
            posts = await self.post_service.get_all_posts(
                category_id=CategoryId(UUID(request.category_id))
                if request.category_id
                else None,
                tag_id=TagId(UUID(request.tag_id)) if request.tag_id else None,
            )
            items = await self.builder.build_all(posts)
            logfire.info("Posts listed", count=len(items))
            return ListPostsResponse(posts=items)
