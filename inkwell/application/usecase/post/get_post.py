"""Get post use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.error import NotFoundError
from inkwell.domain.service import PostService
from inkwell.domain.value import PostId

from .common import PostItem, PostItemBuilder


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class GetPostUseCase(BaseUseCase):
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService, builder: PostItemBuilder) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            builder: Response item builder
        """
        self.post_service = post_service
        self.builder = builder

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        A draft is only visible to its author; anyone else gets the same
        error as for a missing post.

        Raises:
            NotFoundError: If post not found or is someone else's draft
        """
        post = await self.post_service.get_post(PostId(UUID(request.post_id)))

        if not post.is_published and str(post.author_id) != request.user_id:
            raise NotFoundError("Post", request.post_id)

        return await self.builder.build(post)
