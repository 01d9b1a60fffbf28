"""Post representation shared by the post use cases."""

from datetime import datetime
from typing import Iterable, Optional

from pydantic import BaseModel

from inkwell.application.usecase.category.list_categories import CategoryItem
from inkwell.application.usecase.tag.list_tags import TagItem
from inkwell.domain.model import Category, Post, Tag, User
from inkwell.domain.repository import CategoryRepository, TagRepository
from inkwell.domain.service import UserService
from inkwell.domain.value import CategoryId, PostStatus, TagId, UserId


class AuthorItem(BaseModel):
    """Post author in response."""

    id: str
    name: str


class PostItem(BaseModel):
    """Post with its author, category and tags resolved."""

    id: str
    title: str
    content: str
    author: AuthorItem
    category: Optional[CategoryItem]
    tags: list[TagItem]
    reading_time: int
    status: PostStatus
    created_at: datetime
    updated_at: datetime


class PostItemBuilder:
    """Resolves the ids held by posts into response items.

    Each distinct category, tag and author is loaded once per build, so
    listings do not query per post. A category or tag removed after the
    posts were read is left out of the item instead of failing the build.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        tag_repository: TagRepository,
        user_service: UserService,
    ) -> None:
        self.category_repository = category_repository
        self.tag_repository = tag_repository
        self.user_service = user_service

    async def build(self, post: Post) -> PostItem:
        items = await self.build_all([post])
        return items[0]

    async def build_all(self, posts: Iterable[Post]) -> list[PostItem]:
        posts = list(posts)

        categories: dict[CategoryId, Category] = {}
        for category_id in {p.category_id for p in posts if p.category_id}:
            category = await self.category_repository.find_by_id(category_id)
            if category:
                categories[category_id] = category

        tag_ids = list({tag_id for p in posts for tag_id in p.tag_ids})
        tags: dict[TagId, Tag] = {
            tag.id: tag for tag in await self.tag_repository.find_by_ids(tag_ids)
        }

        authors: dict[UserId, User] = {}
        for author_id in {p.author_id for p in posts}:
            authors[author_id] = await self.user_service.get_by_id(author_id)

        return [
            PostItem(
                id=str(post.id),
                title=post.title,
                content=post.content,
                author=AuthorItem(
                    id=str(post.author_id), name=authors[post.author_id].name
                ),
                category=CategoryItem.from_category(categories[post.category_id])
                if post.category_id in categories
                else None,
                tags=sorted(
                    (
                        TagItem.from_tag(tags[tag_id])
                        for tag_id in post.tag_ids
                        if tag_id in tags
                    ),
                    key=lambda item: item.name,
                ),
                reading_time=post.reading_time,
                status=post.status,
                created_at=post.created_at,
                updated_at=post.updated_at,
            )
            for post in posts
        ]
