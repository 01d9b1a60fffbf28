"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import CategoryId, PostId, TagId, UserId
from inkwell.domain.value.types import CategoryName, PostStatus, TagName

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CategoryId",
    "TagId",
    # Types
    "CategoryName",
    "PostStatus",
    "TagName",
]
