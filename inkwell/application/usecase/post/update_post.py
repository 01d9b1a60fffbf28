"""Update post use case."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.error import NotAuthorizedError, ValidationError
from inkwell.domain.model import PostUpdate
from inkwell.domain.service import PostService
from inkwell.domain.value import PostId, UserId

from .common import PostItem, PostItemBuilder


class UpdatePostRequest(BaseModel):
    """Update post request.

    ``changes`` holds only the fields the client sent, so a field present
    with a null value (e.g. ``category_id``) clears it.
    """

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    changes: dict[str, Any]


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post."""

    def __init__(self, post_service: PostService, builder: PostItemBuilder) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            builder: Response item builder
        """
        self.post_service = post_service
        self.builder = builder

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        Args:
            request: Post ID, caller and changed fields

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
            ValidationError: If the changes are invalid or touch the author
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_post.execute",
            post_id=request.post_id,
            fields=sorted(request.changes),
        ):
            post = await self.post_service.get_post(post_id)

            if post.author_id != user_id:
                logfire.warn(
                    "Post update by non-author",
                    post_id=request.post_id,
                    user_id=request.user_id,
                )
                raise NotAuthorizedError("post", request.post_id, request.user_id)

            try:
                update = PostUpdate.model_validate(request.changes)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            updated_post = await self.post_service.update_post(post_id, update)
            return await self.builder.build(updated_post)
