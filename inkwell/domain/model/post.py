"""Post aggregate root.

Posts are the content unit of the catalog: an author, an optional category,
a set of tags and a publication status.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CategoryId, PostId, PostStatus, TagId, UserId
from inkwell.domain.value.common import ValueObject

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 50000


class Post(DomainModel):
    """Post aggregate root.

    Categories and tags are held by id so that renames and counts are
    visible everywhere without touching posts. reading_time is derived
    from content and recomputed whenever content changes.
    """

    id: PostId
    title: str = Field(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    author_id: UserId
    category_id: Optional[CategoryId] = None
    tag_ids: frozenset[TagId] = frozenset()
    status: PostStatus = PostStatus.DRAFT
    reading_time: int = Field(default=0, ge=0)  # Minutes
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED


class NewPost(ValueObject):
    """Data for creating a post. The author is supplied separately."""

    title: str
    content: str
    category_id: Optional[CategoryId] = None
    tag_ids: frozenset[TagId] = frozenset()
    status: PostStatus = PostStatus.DRAFT


class PostUpdate(ValueObject):
    """Fields that may change on an existing post.

    Only fields explicitly set are applied (see ``model_fields_set``), so
    ``category_id=None`` clears the category while omitting it keeps it.
    Unknown fields, including author_id, are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: Optional[str] = None
    content: Optional[str] = None
    category_id: Optional[CategoryId] = None
    tag_ids: Optional[frozenset[TagId]] = None
    status: Optional[PostStatus] = None
