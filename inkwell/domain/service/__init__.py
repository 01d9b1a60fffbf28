"""Domain services."""

from .base import Service
from .category_service import CategoryService
from .jwt_service import JWTService
from .post_query import PostFilter, PostFilterKind, PostQueryResolver
from .post_service import PostService, calculate_reading_time
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "CategoryService",
    "JWTService",
    "PostFilter",
    "PostFilterKind",
    "PostQueryResolver",
    "PostService",
    "Service",
    "TagService",
    "UserService",
    "calculate_reading_time",
]
