"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.error import NotAuthorizedError
from inkwell.domain.service import PostService
from inkwell.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span("delete_post.execute", post_id=request.post_id):
            post = await self.post_service.get_post(post_id)

            if post.author_id != UserId(UUID(request.user_id)):
                raise NotAuthorizedError("post", request.post_id, request.user_id)

            await self.post_service.delete_post(post_id)
