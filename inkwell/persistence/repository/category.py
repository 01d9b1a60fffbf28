"""PostgreSQL implementation of Category repository."""

from typing import Optional

import logfire
from sqlalchemy import Select, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model.category import Category
from inkwell.domain.repository.category import CategoryRepository
from inkwell.domain.value import CategoryId, CategoryName
from inkwell.persistence.mappers import category_to_dict, row_to_category
from inkwell.persistence.tables import categories_table, posts_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    def _select_with_counts(self) -> Select:
        """Select categories joined with the number of posts in each."""
        post_counts = (
            select(
                posts_table.c.category_id,
                func.count(posts_table.c.id).label("post_count"),
            )
            .where(posts_table.c.category_id.is_not(None))
            .group_by(posts_table.c.category_id)
            .subquery()
        )
        return select(
            categories_table,
            func.coalesce(post_counts.c.post_count, 0).label("post_count"),
        ).select_from(
            categories_table.outerjoin(
                post_counts, post_counts.c.category_id == categories_table.c.id
            )
        )

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name, with post counts."""
        with logfire.span("category_repository.find_all"):
            stmt = self._select_with_counts().order_by(categories_table.c.name)
            result = await self.session.execute(stmt)
            return [row_to_category(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID, with post count."""
        stmt = self._select_with_counts().where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_category(dict(row)) if row else None

    async def find_by_name(self, name: CategoryName) -> Optional[Category]:
        """Find category by name, ignoring case."""
        stmt = self._select_with_counts().where(
            func.lower(categories_table.c.name) == name.root.lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_category(dict(row)) if row else None

    async def save(self, category: Category) -> Category:
        """Save or update a category.

        The unique index on lower(name) raises IntegrityError on duplicates.
        The write runs in a savepoint so the request transaction stays usable.
        """
        with logfire.span(
            "category_repository.save",
            category_id=str(category.id),
            name=category.name.root,
        ):
            category_dict = category_to_dict(category)

            existing = await self.find_by_id(category.id)

            if existing:
                stmt = (
                    update(categories_table)
                    .where(categories_table.c.id == category.id)
                    .values(**category_dict)
                )
            else:
                stmt = insert(categories_table).values(**category_dict)

            async with self.session.begin_nested():
                await self.session.execute(stmt)

            await self.session.flush()
            return category

    async def delete(self, category_id: CategoryId) -> None:
        """Delete a category.

        posts.category_id is ON DELETE RESTRICT, so this raises IntegrityError
        while any post references the category.
        """
        stmt = delete(categories_table).where(categories_table.c.id == category_id)
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
