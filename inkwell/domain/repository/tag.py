"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from inkwell.domain.model.tag import Tag
from inkwell.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag aggregate.

    Tags returned by finders carry a post_count computed at read time.
    """

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name, with post counts."""
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def save_all(self, tags: list[Tag]) -> list[Tag]:
        """Insert tags whose names do not exist yet.

        A tag whose name already exists (for instance one created by a
        concurrent request) is skipped and the stored tag is returned in
        its place.

        Args:
            tags: Tags to insert

        Returns:
            The stored tag for every given name
        """
        pass

    @abstractmethod
    async def delete(self, tag_id: TagId) -> None:
        """Delete a tag and its post links.

        Args:
            tag_id: Tag identifier
        """
        pass
