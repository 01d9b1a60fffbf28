"""PostgreSQL implementation of Tag repository."""

from typing import Optional

import logfire
from sqlalchemy import Select, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model.tag import Tag
from inkwell.domain.repository.tag import TagRepository
from inkwell.domain.value import TagId, TagName
from inkwell.persistence.mappers import row_to_tag, tag_to_dict
from inkwell.persistence.tables import post_tags_table, tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    def _select_with_counts(self) -> Select:
        """Select tags joined with the number of posts carrying each."""
        post_counts = (
            select(
                post_tags_table.c.tag_id,
                func.count(post_tags_table.c.post_id).label("post_count"),
            )
            .group_by(post_tags_table.c.tag_id)
            .subquery()
        )
        return select(
            tags_table,
            func.coalesce(post_counts.c.post_count, 0).label("post_count"),
        ).select_from(
            tags_table.outerjoin(post_counts, post_counts.c.tag_id == tags_table.c.id)
        )

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name, with post counts."""
        with logfire.span("tag_repository.find_all"):
            stmt = self._select_with_counts().order_by(tags_table.c.name)
            result = await self.session.execute(stmt)
            return [row_to_tag(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = self._select_with_counts().where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_tag(dict(row)) if row else None

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        if not tag_ids:
            return []

        stmt = self._select_with_counts().where(tags_table.c.id.in_(tag_ids))
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = self._select_with_counts().where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]

    async def save_all(self, tags: list[Tag]) -> list[Tag]:
        """Insert tags unless their name exists, then read them all back."""
        if not tags:
            return []

        with logfire.span(
            "tag_repository.save_all", tags=[tag.name.root for tag in tags]
        ):
            stmt = (
                insert(tags_table)
                .values([tag_to_dict(tag) for tag in tags])
                .on_conflict_do_nothing(index_elements=["name"])
            )
            result = await self.session.execute(stmt)
            await self.session.flush()

            logfire.info(
                "Tags inserted", requested=len(tags), inserted=result.rowcount
            )
            return await self.find_by_names([tag.name for tag in tags])

    async def delete(self, tag_id: TagId) -> None:
        """Delete a tag. post_tags rows cascade."""
        stmt = delete(tags_table).where(tags_table.c.id == tag_id)
        await self.session.execute(stmt)
        await self.session.flush()
