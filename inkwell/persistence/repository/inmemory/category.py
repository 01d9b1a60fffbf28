"""In-memory implementation of Category repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.category import Category
from inkwell.domain.repository.category import CategoryRepository
from inkwell.domain.value import CategoryId, CategoryName

from .database import InMemoryDatabase


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing.

    Mirrors the database constraints: unique lower(name) and
    posts.category_id ON DELETE RESTRICT.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self._database = database

    def _with_count(self, category: Category) -> Category:
        post_count = sum(
            1
            for post in self._database.posts.values()
            if post.category_id == category.id
        )
        return category.model_copy(update={"post_count": post_count})

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name, with post counts."""
        categories = sorted(
            self._database.categories.values(), key=lambda c: c.name.root
        )
        return [self._with_count(category) for category in categories]

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID, with post count."""
        category = self._database.categories.get(category_id)
        return self._with_count(category) if category else None

    async def find_by_name(self, name: CategoryName) -> Optional[Category]:
        """Find category by name, ignoring case."""
        for category in self._database.categories.values():
            if category.name.key == name.key:
                return self._with_count(category)
        return None

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        for other in self._database.categories.values():
            if other.id != category.id and other.name.key == category.name.key:
                raise IntegrityError(
                    "duplicate key value violates unique constraint "
                    '"uq_categories_name_lower"',
                    None,
                    Exception(),
                )
        self._database.categories[category.id] = category.model_copy(
            update={"post_count": 0}
        )
        return category

    async def delete(self, category_id: CategoryId) -> None:
        """Delete a category."""
        if any(
            post.category_id == category_id for post in self._database.posts.values()
        ):
            raise IntegrityError(
                'update or delete on table "categories" violates foreign key '
                'constraint on table "posts"',
                None,
                Exception(),
            )
        self._database.categories.pop(category_id, None)
