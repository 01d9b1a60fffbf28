"""Post routes."""

from typing import Any, Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, Header, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.auth import GetCurrentUserUseCase
from inkwell.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListDraftsRequest,
    ListDraftsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from inkwell.domain.value import PostStatus
from inkwell.interface.api.auth import optional_user, require_user

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str
    content: str
    category_id: Optional[UUID] = None
    tag_ids: list[UUID] = Field(default_factory=list)
    status: PostStatus = PostStatus.DRAFT


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    category_id: Optional[UUID] = None,
    tag_id: Optional[UUID] = None,
) -> ListPostsResponse:
    """List published posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        category_id: Only posts in this category (optional)
        tag_id: Only posts carrying this tag (optional)

    Returns:
        Published posts matching every given filter

    Example:
        GET /posts?category_id=...&tag_id=...
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(
            category_id=str(category_id) if category_id else None,
            tag_id=str(tag_id) if tag_id else None,
        )
    )


@router.get("/drafts", response_model=ListPostsResponse)
async def list_drafts(
    list_drafts_use_case: FromDishka[ListDraftsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> ListPostsResponse:
    """List the caller's drafts. Requires authentication."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    return await list_drafts_use_case.execute(ListDraftsRequest(user_id=user.user_id))


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> PostItem:
    """Get a post by ID.

    Drafts are only returned to their author; others get 404.
    """
    user = await optional_user(get_current_user_use_case, auth_token, authorization)
    return await get_post_use_case.execute(
        GetPostRequest(post_id=str(post_id), user_id=user.user_id if user else None)
    )


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> PostItem:
    """Create a new post authored by the caller.

    Returns 400 if the category or any tag does not exist.
    """
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    with logfire.span("api.create_post", user_id=user.user_id):
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user.user_id,
                title=request.title,
                content=request.content,
                category_id=str(request.category_id) if request.category_id else None,
                tag_ids=[str(tag_id) for tag_id in request.tag_ids],
                status=request.status,
            )
        )


@router.put("/{post_id}", response_model=PostItem)
async def update_post(
    post_id: UUID,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    changes: dict[str, Any] = Body(...),
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> PostItem:
    """Update a post. Only the author may edit.

    Only the fields present in the body change; ``"category_id": null``
    removes the category. Unknown fields (including ``author_id``) are
    rejected with 400.
    """
    user = await require_user(get_current_user_use_case, auth_token, authorization)

    with logfire.span("api.update_post", post_id=str(post_id), user_id=user.user_id):
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id), user_id=user.user_id, changes=changes
            )
        )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> None:
    """Delete a post. Only the author may delete."""
    user = await require_user(get_current_user_use_case, auth_token, authorization)
    await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), user_id=user.user_id)
    )
