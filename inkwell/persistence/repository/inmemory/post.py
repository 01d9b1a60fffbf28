"""In-memory post repository for testing."""

from typing import Callable, Optional

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import CategoryId, PostId, PostStatus, TagId, UserId

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._posts = database.posts

    def _find(self, predicate: Callable[[Post], bool]) -> list[Post]:
        posts = [p for p in self._posts.values() if predicate(p)]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_status(self, status: PostStatus) -> list[Post]:
        """Find posts with the given status."""
        return self._find(lambda p: p.status == status)

    async def find_by_status_and_category(
        self, status: PostStatus, category_id: CategoryId
    ) -> list[Post]:
        """Find posts with the given status in a category."""
        return self._find(lambda p: p.status == status and p.category_id == category_id)

    async def find_by_status_and_tag(
        self, status: PostStatus, tag_id: TagId
    ) -> list[Post]:
        """Find posts with the given status carrying a tag."""
        return self._find(lambda p: p.status == status and tag_id in p.tag_ids)

    async def find_by_status_category_and_tag(
        self, status: PostStatus, category_id: CategoryId, tag_id: TagId
    ) -> list[Post]:
        """Find posts with the given status in a category and carrying a tag."""
        return self._find(
            lambda p: p.status == status
            and p.category_id == category_id
            and tag_id in p.tag_ids
        )

    async def find_by_author_and_status(
        self, author_id: UserId, status: PostStatus
    ) -> list[Post]:
        """Find posts by a specific author with the given status."""
        return self._find(lambda p: p.author_id == author_id and p.status == status)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)
