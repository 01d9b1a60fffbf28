"""Post domain service."""

import html
import math
import re
from collections.abc import Iterable
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from inkwell.config import CatalogSettings
from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.model import NewPost, Post, PostUpdate, User
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import CategoryId, PostId, PostStatus, TagId

from .base import Service
from .category_service import CategoryService
from .post_query import PostFilter, PostQueryResolver
from .tag_service import TagService
from .user_service import UserService

_HTML_TAG = re.compile(r"</?[A-Za-z][^>]*>")


def calculate_reading_time(content: str, words_per_minute: int) -> int:
    """Estimate reading time in whole minutes.

    Markup is stripped first so that rich-text content is measured by its
    words only. Any non-empty text takes at least one minute.

    Args:
        content: Post content (plain text or HTML)
        words_per_minute: Assumed reading speed

    Returns:
        Minutes needed to read the content, 0 when there are no words
    """
    text = html.unescape(_HTML_TAG.sub(" ", content or ""))
    word_count = len(text.split())
    return math.ceil(word_count / words_per_minute)


class PostService(Service):
    """Domain service for the post catalog.

    Owns post lifecycle rules: reference validation against the category
    and tag registries, reading time derivation and status-scoped reads.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        query_resolver: PostQueryResolver,
        category_service: CategoryService,
        tag_service: TagService,
        user_service: UserService,
        catalog_settings: CatalogSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            query_resolver: Resolver for filtered listings
            category_service: Category domain service
            tag_service: Tag domain service
            user_service: User domain service
            catalog_settings: Catalog configuration
        """
        self.post_repository = post_repository
        self.query_resolver = query_resolver
        self.category_service = category_service
        self.tag_service = tag_service
        self.user_service = user_service
        self.catalog_settings = catalog_settings

    async def get_all_posts(
        self,
        category_id: Optional[CategoryId] = None,
        tag_id: Optional[TagId] = None,
    ) -> list[Post]:
        """List published posts, optionally filtered by category and/or tag.

        Args:
            category_id: Only posts in this category
            tag_id: Only posts carrying this tag

        Returns:
            Published posts, newest first
        """
        return await self.query_resolver.resolve(
            PostFilter(category_id=category_id, tag_id=tag_id),
            PostStatus.PUBLISHED,
        )

    async def get_draft_posts(self, user: User) -> list[Post]:
        """List the drafts owned by a user.

        Args:
            user: The caller; only their own drafts are returned

        Returns:
            Draft posts, newest first
        """
        with logfire.span("post_service.get_draft_posts", user_id=str(user.id)):
            posts = await self.post_repository.find_by_author_and_status(
                user.id, PostStatus.DRAFT
            )
            logfire.info("Drafts retrieved", user_id=str(user.id), count=len(posts))
            return posts

    async def create_post(self, user: User, new_post: NewPost) -> Post:
        """Create a post authored by ``user``.

        Args:
            user: Author
            new_post: Post data

        Returns:
            Created post

        Raises:
            ValidationError: If the author, category or any tag does not
                exist, or the post data is invalid
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(user.id),
            title=new_post.title,
            status=new_post.status.value,
        ):
            await self._validate_author(user)
            await self._validate_category(new_post.category_id)
            await self._validate_tags(new_post.tag_ids)

            now = datetime.now()
            post = self._build_post(
                id=PostId(uuid4()),
                title=new_post.title,
                content=new_post.content,
                author_id=user.id,
                category_id=new_post.category_id,
                tag_ids=new_post.tag_ids,
                status=new_post.status,
                reading_time=self._reading_time(new_post.content),
                created_at=now,
                updated_at=now,
            )

            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                reading_time=saved.reading_time,
            )
            return saved

    async def update_post(self, post_id: PostId, update: PostUpdate) -> Post:
        """Apply the fields set on ``update`` to a post.

        Authorship is not checked here; callers decide who may edit.

        Args:
            post_id: Post ID
            update: Changed fields

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found
            ValidationError: If a referenced category or tag does not exist,
                or the resulting post is invalid
        """
        changes: dict[str, Any] = {
            name: getattr(update, name) for name in update.model_fields_set
        }

        with logfire.span(
            "post_service.update_post", post_id=str(post_id), fields=sorted(changes)
        ):
            post = await self.get_post(post_id)

            if "tag_ids" in changes and changes["tag_ids"] is None:
                changes["tag_ids"] = frozenset()
            if "category_id" in changes:
                await self._validate_category(changes["category_id"])
            if "tag_ids" in changes:
                await self._validate_tags(changes["tag_ids"])

            content_changed = (
                "content" in changes
                and changes["content"] is not None
                and changes["content"] != post.content
            )
            if content_changed:
                changes["reading_time"] = self._reading_time(changes["content"])

            updated = self._build_post(
                **{**post.model_dump(), **changes, "updated_at": datetime.now()}
            )

            saved = await self.post_repository.save(updated)
            logfire.info(
                "Post updated",
                post_id=str(post_id),
                content_changed=content_changed,
                reading_time=saved.reading_time,
            )
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            await self.get_post(post_id)
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    def _reading_time(self, content: str) -> int:
        return calculate_reading_time(content, self.catalog_settings.words_per_minute)

    async def _validate_author(self, user: User) -> None:
        try:
            await self.user_service.get_by_id(user.id)
        except NotFoundError:
            raise ValidationError(f"Author not found: {user.id}")

    async def _validate_category(self, category_id: Optional[CategoryId]) -> None:
        if category_id is None:
            return
        try:
            await self.category_service.get_category_by_id(category_id)
        except NotFoundError:
            raise ValidationError(f"Category not found: {category_id}")

    async def _validate_tags(self, tag_ids: Iterable[TagId]) -> None:
        tag_ids = set(tag_ids)
        max_tags = self.catalog_settings.max_tags_per_post
        if len(tag_ids) > max_tags:
            raise ValidationError(f"A post can have at most {max_tags} tags")
        try:
            await self.tag_service.get_tags_by_ids(tag_ids)
        except NotFoundError as e:
            raise ValidationError(f"Tags not found: {e.identifier}")

    @staticmethod
    def _build_post(**fields: Any) -> Post:
        try:
            return Post(**fields)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)
