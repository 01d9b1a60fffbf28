"""Post catalog query resolution.

Listing requests carry an optional category and an optional tag. The
storage layer only answers conjunctive queries over the criteria that are
present, so each combination maps to one fixed repository query:

    category  tag   query
    --------  ----  ---------------------------------------
    -         -     find_by_status
    x         -     find_by_status_and_category
    -         x     find_by_status_and_tag
    x         x     find_by_status_category_and_tag

An unknown id simply matches nothing; reads never raise for it.
"""

from enum import Enum
from typing import Optional

import logfire

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import CategoryId, PostStatus, TagId
from inkwell.domain.value.common import ValueObject

from .base import Service


class PostFilterKind(str, Enum):
    """Shape of a post listing filter."""

    NONE = "none"
    CATEGORY = "category"
    TAG = "tag"
    CATEGORY_AND_TAG = "category_and_tag"


class PostFilter(ValueObject):
    """Optional category/tag filter for post listings."""

    category_id: Optional[CategoryId] = None
    tag_id: Optional[TagId] = None

    @property
    def kind(self) -> PostFilterKind:
        if self.category_id is not None and self.tag_id is not None:
            return PostFilterKind.CATEGORY_AND_TAG
        if self.category_id is not None:
            return PostFilterKind.CATEGORY
        if self.tag_id is not None:
            return PostFilterKind.TAG
        return PostFilterKind.NONE


class PostQueryResolver(Service):
    """Dispatches a post filter to the matching repository query."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize query resolver.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def resolve(self, post_filter: PostFilter, status: PostStatus) -> list[Post]:
        """Find posts with the given status matching the filter.

        Args:
            post_filter: Category/tag filter (absent parts are unconstrained)
            status: Required post status

        Returns:
            Matching posts, newest first
        """
        kind = post_filter.kind
        with logfire.span(
            "post_query.resolve",
            kind=kind.value,
            status=status.value,
            category_id=str(post_filter.category_id) if post_filter.category_id else None,
            tag_id=str(post_filter.tag_id) if post_filter.tag_id else None,
        ):
            if kind == PostFilterKind.CATEGORY_AND_TAG:
                posts = await self.post_repository.find_by_status_category_and_tag(
                    status, post_filter.category_id, post_filter.tag_id
                )
            elif kind == PostFilterKind.CATEGORY:
                posts = await self.post_repository.find_by_status_and_category(
                    status, post_filter.category_id
                )
            elif kind == PostFilterKind.TAG:
                posts = await self.post_repository.find_by_status_and_tag(
                    status, post_filter.tag_id
                )
            else:
                posts = await self.post_repository.find_by_status(status)

            logfire.info("Posts resolved", kind=kind.value, count=len(posts))
            return posts
