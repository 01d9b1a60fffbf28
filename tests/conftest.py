"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from inkwell.domain.model import Post, User
from inkwell.domain.value import CategoryId, PostId, PostStatus, TagId, UserId

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(name: str = "Ada Writer", email: str | None = None) -> User:
    """Build a user with a unique email."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        name=name,
        email=email or f"{str(user_id)[:8]}@example.com",
    )


def make_post(
    author_id: UserId,
    title: str = "A Field Guide to Dragons",
    content: str = "Dragons are rarely seen but often discussed.",
    category_id: CategoryId | None = None,
    tag_ids: set[TagId] | frozenset[TagId] = frozenset(),
    status: PostStatus = PostStatus.PUBLISHED,
    created_at: datetime | None = None,
) -> Post:
    """Build a post directly, bypassing service validation."""
    created_at = created_at or datetime.now()
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=content,
        author_id=author_id,
        category_id=category_id,
        tag_ids=frozenset(tag_ids),
        status=status,
        reading_time=1,
        created_at=created_at,
        updated_at=created_at,
    )
