"""Create post use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.model import NewPost
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import CategoryId, PostStatus, TagId, UserId

from .common import PostItem, PostItemBuilder


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # Current user ID
    title: str
    content: str
    category_id: Optional[str] = None  # UUID string
    tag_ids: list[str] = Field(default_factory=list)  # UUID strings
    status: PostStatus = PostStatus.DRAFT


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        builder: PostItemBuilder,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            builder: Response item builder
        """
        self.post_service = post_service
        self.user_service = user_service
        self.builder = builder

    async def execute(self, request: CreatePostRequest) -> PostItem:
        """Execute create post flow.

        Args:
            request: Post data and author

        Returns:
            Created post

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If category/tags do not exist or data is invalid
        """
        with logfire.span(
            "create_post.execute",
            author_id=request.author_id,
            tags=len(request.tag_ids),
        ):
            user = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

            new_post = NewPost(
                title=request.title,
                content=request.content,
                category_id=CategoryId(UUID(request.category_id))
                if request.category_id
                else None,
                tag_ids=frozenset(TagId(UUID(tag_id)) for tag_id in request.tag_ids),
                status=request.status,
            )

            post = await self.post_service.create_post(user, new_post)
            return await self.builder.build(post)
