"""In-memory implementation of Tag repository for testing."""

from typing import Optional

from inkwell.domain.model.tag import Tag
from inkwell.domain.repository.tag import TagRepository
from inkwell.domain.value import TagId, TagName

from .database import InMemoryDatabase


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._database = database

    def _with_count(self, tag: Tag) -> Tag:
        post_count = sum(
            1 for post in self._database.posts.values() if tag.id in post.tag_ids
        )
        return tag.model_copy(update={"post_count": post_count})

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name, with post counts."""
        tags = sorted(self._database.tags.values(), key=lambda t: t.name.root)
        return [self._with_count(tag) for tag in tags]

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        tag = self._database.tags.get(tag_id)
        return self._with_count(tag) if tag else None

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        return [
            self._with_count(self._database.tags[tag_id])
            for tag_id in dict.fromkeys(tag_ids)
            if tag_id in self._database.tags
        ]

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        wanted = {name.root for name in names}
        return [
            self._with_count(tag)
            for tag in self._database.tags.values()
            if tag.name.root in wanted
        ]

    async def save_all(self, tags: list[Tag]) -> list[Tag]:
        """Insert tags whose names do not exist yet."""
        for tag in tags:
            existing = await self.find_by_names([tag.name])
            if not existing:
                self._database.tags[tag.id] = tag
        return await self.find_by_names([tag.name for tag in tags])

    async def delete(self, tag_id: TagId) -> None:
        """Delete a tag and unlink it from posts."""
        self._database.tags.pop(tag_id, None)
        for post in list(self._database.posts.values()):
            if tag_id in post.tag_ids:
                self._database.posts[post.id] = post.model_copy(
                    update={"tag_ids": post.tag_ids - {tag_id}}
                )
