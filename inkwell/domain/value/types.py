"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from inkwell.domain.value.common import RootValueObject

_NAME_PATTERN = re.compile(r"^(?:[^\W_]|[\s-])+$")


class PostStatus(str, Enum):
    """Publication status of a post.

    Drafts are visible to their author only; published posts are listed
    publicly.
    """

    DRAFT = "draft"
    PUBLISHED = "published"


class CategoryName(RootValueObject[str]):
    """Category name.

    Trimmed, 2-50 characters of letters, digits, spaces and hyphens.
    Display casing is preserved; uniqueness is case-insensitive (see ``key``).
    """

    @field_validator("root")
    @classmethod
    def validate_category_name(cls, v: str) -> str:
        """Validate category name format."""
        v = v.strip()
        if len(v) < 2 or len(v) > 50:
            raise ValueError("Category name must be 2-50 characters")
        if not _NAME_PATTERN.match(v):
            raise ValueError(
                "Category name can only contain letters, numbers, spaces and hyphens"
            )
        return v

    @property
    def key(self) -> str:
        """Case-insensitive comparison key, same as the lower(name) index."""
        return self.root.lower()


class TagName(RootValueObject[str]):
    """Tag name.

    Normalised to lowercase so that 'Magic' and 'magic' are the same tag.
    2-30 characters of letters, digits, spaces and hyphens.
    Examples: 'magic', 'slow-burn', 'found family'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Normalise and validate tag name."""
        v = v.strip().lower()
        if len(v) < 2 or len(v) > 30:
            raise ValueError("Tag name must be 2-30 characters")
        if not _NAME_PATTERN.match(v):
            raise ValueError(
                "Tag name can only contain letters, numbers, spaces and hyphens"
            )
        return v
