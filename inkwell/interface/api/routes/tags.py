"""Tag routes."""

from typing import Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status

from inkwell.application.usecase.auth import GetCurrentUserUseCase
from inkwell.application.usecase.tag import (
    CreateTagsRequest,
    CreateTagsUseCase,
    DeleteTagRequest,
    DeleteTagUseCase,
    ListTagsResponse,
    ListTagsUseCase,
)
from inkwell.interface.api.auth import require_user

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all tags",
    description="Get all tags ordered by name, with the number of posts carrying each.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all tags."""
    with logfire.span("api.list_tags"):
        return await use_case.execute()


@router.post(
    "",
    response_model=ListTagsResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Resolve tag names",
    description="Create the tags that do not exist yet and return all of them.",
)
async def create_tags(
    request: CreateTagsRequest,
    use_case: FromDishka[CreateTagsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> ListTagsResponse:
    """Resolve tag names, creating missing tags.

    Example:
        POST /tags {"names": ["Magic", "slow-burn"]}
    """
    await require_user(get_current_user_use_case, auth_token, authorization)
    return await use_case.execute(request)


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(
    tag_id: UUID,
    use_case: FromDishka[DeleteTagUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> None:
    """Delete a tag. Posts carrying it simply lose the tag."""
    await require_user(get_current_user_use_case, auth_token, authorization)
    await use_case.execute(DeleteTagRequest(tag_id=str(tag_id)))
