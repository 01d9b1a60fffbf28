"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from inkwell.domain.model.category import Category
from inkwell.domain.value import CategoryId, CategoryName


class CategoryRepository(ABC):
    """Repository interface for Category aggregate.

    Categories returned by finders carry a post_count computed from the
    posts referencing them at read time.
    """

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name, with post counts."""
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID.

        Args:
            category_id: Category identifier

        Returns:
            Category with post count if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: CategoryName) -> Optional[Category]:
        """Find category by name, ignoring case.

        Args:
            name: Category name

        Returns:
            Category if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save or update a category.

        Args:
            category: Category to save

        Returns:
            Saved category

        Raises:
            IntegrityError: If another category already has this name
        """
        pass

    @abstractmethod
    async def delete(self, category_id: CategoryId) -> None:
        """Delete a category.

        Args:
            category_id: Category identifier
        """
        pass
