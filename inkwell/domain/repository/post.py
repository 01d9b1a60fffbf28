"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.post import Post
from inkwell.domain.value import CategoryId, PostId, PostStatus, TagId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    The finders are fixed conjunctive predicates over status, category and
    tag membership. Every finder returns posts newest first.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: PostStatus) -> List[Post]:
        """Find posts with the given status."""
        pass

    @abstractmethod
    async def find_by_status_and_category(
        self, status: PostStatus, category_id: CategoryId
    ) -> List[Post]:
        """Find posts with the given status in a category."""
        pass

    @abstractmethod
    async def find_by_status_and_tag(
        self, status: PostStatus, tag_id: TagId
    ) -> List[Post]:
        """Find posts with the given status carrying a tag."""
        pass

    @abstractmethod
    async def find_by_status_category_and_tag(
        self, status: PostStatus, category_id: CategoryId, tag_id: TagId
    ) -> List[Post]:
        """Find posts with the given status in a category and carrying a tag."""
        pass

    @abstractmethod
    async def find_by_author_and_status(
        self, author_id: UserId, status: PostStatus
    ) -> List[Post]:
        """Find posts by a specific author with the given status.

        Args:
            author_id: The author's user ID
            status: Post status

        Returns:
            List of matching posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update), replacing its tag links.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post and its tag links.

        Args:
            post_id: The post ID to delete
        """
        pass
