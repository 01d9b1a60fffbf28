"""Tag domain service."""

from collections.abc import Iterable
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.model.tag import Tag
from inkwell.domain.repository.tag import TagRepository
from inkwell.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_all_tags(self) -> list[Tag]:
        """Get all tags ordered by name, with post counts.

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def create_tags(self, names: Iterable[str]) -> list[Tag]:
        """Resolve free-text tag names to tags, creating the missing ones.

        Names are normalised first, so 'Magic' and 'magic' resolve to the
        same tag. Existing tags are reused; only unknown names are inserted.

        Args:
            names: Candidate tag names

        Returns:
            One tag per distinct normalised name (existing and new), by name

        Raises:
            ValidationError: If a name is not a valid tag name
        """
        try:
            tag_names = {tag_name.root: tag_name for tag_name in map(TagName, names)}
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

        with logfire.span("tag_service.create_tags", tags=sorted(tag_names)):
            if not tag_names:
                return []

            existing = await self.tag_repository.find_by_names(list(tag_names.values()))
            existing_names = {tag.name.root for tag in existing}

            new_tags = [
                Tag(id=TagId(uuid4()), name=tag_name)
                for key, tag_name in tag_names.items()
                if key not in existing_names
            ]
            created = await self.tag_repository.save_all(new_tags) if new_tags else []

            logfire.info(
                "Tags resolved",
                existing=len(existing),
                created=len(new_tags),
            )
            return sorted(existing + created, key=lambda tag: tag.name.root)

    async def delete_tag(self, tag_id: TagId) -> None:
        """Delete a tag.

        Posts carrying the tag simply lose it.

        Args:
            tag_id: Tag ID

        Raises:
            NotFoundError: If tag not found
        """
        with logfire.span("tag_service.delete_tag", tag_id=str(tag_id)):
            await self.get_tag_by_id(tag_id)
            await self.tag_repository.delete(tag_id)
            logfire.info("Tag deleted", tag_id=str(tag_id))

    async def get_tag_by_id(self, tag_id: TagId) -> Tag:
        """Get a tag by ID.

        Raises:
            NotFoundError: If tag not found
        """
        with logfire.span("tag_service.get_tag_by_id", tag_id=str(tag_id)):
            tag = await self.tag_repository.find_by_id(tag_id)
            if not tag:
                logfire.warn("Tag not found", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))
            return tag

    async def get_tags_by_ids(self, tag_ids: Iterable[TagId]) -> list[Tag]:
        """Get several tags by ID, all or nothing.

        Args:
            tag_ids: Tag IDs (duplicates are ignored)

        Returns:
            One tag per distinct ID

        Raises:
            NotFoundError: If any of the IDs does not exist
        """
        requested = list(dict.fromkeys(tag_ids))
        with logfire.span("tag_service.get_tags_by_ids", count=len(requested)):
            if not requested:
                return []

            tags = await self.tag_repository.find_by_ids(requested)

            missing = set(requested) - {tag.id for tag in tags}
            if missing:
                logfire.warn("Tags not found", missing=sorted(map(str, missing)))
                raise NotFoundError("Tag", ", ".join(sorted(map(str, missing))))

            return tags
