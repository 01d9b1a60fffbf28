"""Repository interfaces for Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from inkwell.domain.repository.category import CategoryRepository
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.repository.tag import TagRepository
from inkwell.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CategoryRepository",
    "TagRepository",
]
