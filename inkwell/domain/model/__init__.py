"""Domain model entities for Inkwell."""

from inkwell.domain.model.category import Category
from inkwell.domain.model.post import NewPost, Post, PostUpdate
from inkwell.domain.model.tag import Tag
from inkwell.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "NewPost",
    "PostUpdate",
    "Category",
    "Tag",
]
