"""List drafts use case."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import UserId

from .common import PostItemBuilder
from .list_posts import ListPostsResponse


class ListDraftsRequest(BaseModel):
    """List drafts request."""

    user_id: str  # Current user ID


class ListDraftsUseCase(BaseUseCase):
    """Use case for listing the caller's own drafts."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        builder: PostItemBuilder,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.builder = builder

    async def execute(self, request: ListDraftsRequest) -> ListPostsResponse:
        """Execute list drafts flow.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        posts = await self.post_service.get_draft_posts(user)
        return ListPostsResponse(posts=await self.builder.build_all(posts))
