"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from inkwell.domain.model import Category, Post, Tag, User
from inkwell.domain.value import (
    CategoryId,
    CategoryName,
    PostId,
    PostStatus,
    TagId,
    TagName,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model.

    Args:
        row: Database row as dict, optionally carrying a ``post_count`` column

    Returns:
        Category domain model
    """
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=CategoryName(row["name"]),
        post_count=row.get("post_count") or 0,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict.

    post_count is derived on read and never written.
    """
    return category.model_dump(exclude={"post_count"})


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict, optionally carrying a ``post_count`` column

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        post_count=row.get("post_count") or 0,
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return tag.model_dump(exclude={"post_count"})


def row_to_post(row: Dict[str, Any], tag_ids: Iterable[UUID] = ()) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tag_ids: IDs of the tags linked to the post (from post_tags)

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        category_id=CategoryId(_uuid(row["category_id"]))
        if row.get("category_id")
        else None,
        tag_ids=frozenset(TagId(_uuid(tag_id)) for tag_id in tag_ids),
        status=PostStatus(row["status"]),
        reading_time=row["reading_time"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Tag links live in post_tags and are excluded here.
    """
    post_dict = post.model_dump(exclude={"tag_ids"})
    post_dict["status"] = post.status.value
    return post_dict
