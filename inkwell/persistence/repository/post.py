"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import Any, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import CategoryId, PostId, PostStatus, TagId, UserId
from inkwell.persistence.mappers import post_to_dict, row_to_post
from inkwell.persistence.tables import post_tags_table, posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tag_ids_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch tag links for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tag IDs
        """
        if not post_ids:
            return {}

        stmt = select(post_tags_table.c.post_id, post_tags_table.c.tag_id).where(
            post_tags_table.c.post_id.in_(post_ids)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.tag_id)

        return post_tag_map

    async def _find(self, *criteria: Any) -> List[Post]:
        """Find posts matching all criteria, newest first, with tag links."""
        stmt = select(posts_table).where(*criteria).order_by(
            desc(posts_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        post_rows = result.fetchall()

        if not post_rows:
            return []

        post_tag_map = await self._fetch_tag_ids_for_posts([row.id for row in post_rows])

        return [
            row_to_post(row._asdict(), tag_ids=post_tag_map.get(row.id, []))
            for row in post_rows
        ]

    @staticmethod
    def _has_tag(tag_id: TagId) -> Any:
        return posts_table.c.id.in_(
            select(post_tags_table.c.post_id).where(post_tags_table.c.tag_id == tag_id)
        )

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            posts = await self._find(posts_table.c.id == post_id)
            return posts[0] if posts else None

    async def find_by_status(self, status: PostStatus) -> List[Post]:
        """Find posts with the given status."""
        with logfire.span("post_repository.find_by_status", status=status.value):
            return await self._find(posts_table.c.status == status.value)

    async def find_by_status_and_category(
        self, status: PostStatus, category_id: CategoryId
    ) -> List[Post]:
        """Find posts with the given status in a category."""
        with logfire.span(
            "post_repository.find_by_status_and_category",
            status=status.value,
            category_id=str(category_id),
        ):
            return await self._find(
                posts_table.c.status == status.value,
                posts_table.c.category_id == category_id,
            )

    async def find_by_status_and_tag(
        self, status: PostStatus, tag_id: TagId
    ) -> List[Post]:
        """Find posts with the given status carrying a tag."""
        with logfire.span(
            "post_repository.find_by_status_and_tag",
            status=status.value,
            tag_id=str(tag_id),
        ):
            return await self._find(
                posts_table.c.status == status.value,
                self._has_tag(tag_id),
            )

    async def find_by_status_category_and_tag(
        self, status: PostStatus, category_id: CategoryId, tag_id: TagId
    ) -> List[Post]:
        """Find posts with the given status in a category and carrying a tag."""
        with logfire.span(
            "post_repository.find_by_status_category_and_tag",
            status=status.value,
            category_id=str(category_id),
            tag_id=str(tag_id),
        ):
            return await self._find(
                posts_table.c.status == status.value,
                posts_table.c.category_id == category_id,
                self._has_tag(tag_id),
            )

    async def find_by_author_and_status(
        self, author_id: UserId, status: PostStatus
    ) -> List[Post]:
        """Find posts by a specific author with the given status."""
        with logfire.span(
            "post_repository.find_by_author_and_status",
            author_id=str(author_id),
            status=status.value,
        ):
            return await self._find(
                posts_table.c.author_id == author_id,
                posts_table.c.status == status.value,
            )

    async def save(self, post: Post) -> Post:
        """Save a post (create or update), replacing its tag links."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            status=post.status.value,
            tags=len(post.tag_ids),
        ):
            existing = await self.find_by_id(post.id)

            post_dict = post_to_dict(post)  # Note: tag_ids are excluded by mapper

            if existing:
                logfire.info("Updating existing post", post_id=str(post.id))
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
                await self.session.execute(stmt)

                delete_stmt = delete(post_tags_table).where(
                    post_tags_table.c.post_id == post.id
                )
                await self.session.execute(delete_stmt)
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = posts_table.insert().values(**post_dict)
                await self.session.execute(stmt)

            if post.tag_ids:
                await self.session.execute(
                    insert(post_tags_table).values(
                        [{"post_id": post.id, "tag_id": tag_id} for tag_id in post.tag_ids]
                    )
                )

            await self.session.flush()
            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete). post_tags rows cascade."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = posts_table.delete().where(posts_table.c.id == post_id)
            await self.session.execute(stmt)
            await self.session.flush()
