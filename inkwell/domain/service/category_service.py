"""Category domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import ConflictError, NotFoundError, ValidationError
from inkwell.domain.model.category import Category
from inkwell.domain.repository.category import CategoryRepository
from inkwell.domain.value import CategoryId, CategoryName

from .base import Service


class CategoryService(Service):
    """Domain service for category operations."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
        """
        self.category_repository = category_repository

    async def list_categories(self) -> list[Category]:
        """List all categories with their live post counts.

        Returns:
            Categories ordered by name
        """
        with logfire.span("category_service.list_categories"):
            categories = await self.category_repository.find_all()
            logfire.info("Categories listed", count=len(categories))
            return categories

    async def create_category(self, name: str) -> Category:
        """Create a category.

        Args:
            name: Category name

        Returns:
            Created category

        Raises:
            ValidationError: If the name is invalid
            ConflictError: If a category with the same name exists (any case)
        """
        category_name = self._parse_name(name)

        with logfire.span("category_service.create_category", name=category_name.root):
            existing = await self.category_repository.find_by_name(category_name)
            if existing:
                logfire.warn("Category already exists", name=category_name.root)
                raise ConflictError(
                    f"Category already exists with name: {category_name.root}"
                )

            now = datetime.now()
            category = Category(
                id=CategoryId(uuid4()),
                name=category_name,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.category_repository.save(category)
            except IntegrityError:
                # Lost a race against a concurrent insert of the same name
                logfire.warn("Duplicate category insert", name=category_name.root)
                raise ConflictError(
                    f"Category already exists with name: {category_name.root}"
                )

            logfire.info("Category created", category_id=str(saved.id))
            return saved

    async def update_category(self, category_id: CategoryId, name: str) -> Category:
        """Rename a category.

        Args:
            category_id: Category ID
            name: New name

        Returns:
            Updated category

        Raises:
            NotFoundError: If category not found
            ValidationError: If the name is invalid
            ConflictError: If another category already uses the name
        """
        category_name = self._parse_name(name)

        with logfire.span(
            "category_service.update_category",
            category_id=str(category_id),
            name=category_name.root,
        ):
            category = await self.get_category_by_id(category_id)

            other = await self.category_repository.find_by_name(category_name)
            if other and other.id != category_id:
                logfire.warn("Category name taken", name=category_name.root)
                raise ConflictError(
                    f"Category already exists with name: {category_name.root}"
                )

            updated = category.model_copy(
                update={"name": category_name, "updated_at": datetime.now()}
            )
            try:
                saved = await self.category_repository.save(updated)
            except IntegrityError:
                raise ConflictError(
                    f"Category already exists with name: {category_name.root}"
                )

            logfire.info("Category renamed", category_id=str(category_id))
            return saved

    async def delete_category(self, category_id: CategoryId) -> None:
        """Delete a category that no post references.

        Args:
            category_id: Category ID

        Raises:
            NotFoundError: If category not found
            ConflictError: If posts are still assigned to the category
        """
        with logfire.span(
            "category_service.delete_category", category_id=str(category_id)
        ):
            category = await self.get_category_by_id(category_id)

            if category.post_count > 0:
                logfire.warn(
                    "Category has posts",
                    category_id=str(category_id),
                    post_count=category.post_count,
                )
                raise ConflictError("Category has associated posts")

            try:
                await self.category_repository.delete(category_id)
            except IntegrityError:
                # A post was assigned after the count was read
                raise ConflictError("Category has associated posts")

            logfire.info("Category deleted", category_id=str(category_id))

    async def get_category_by_id(self, category_id: CategoryId) -> Category:
        """Get a category by ID.

        Raises:
            NotFoundError: If category not found
        """
        with logfire.span(
            "category_service.get_category_by_id", category_id=str(category_id)
        ):
            category = await self.category_repository.find_by_id(category_id)
            if not category:
                logfire.warn("Category not found", category_id=str(category_id))
                raise NotFoundError("Category", str(category_id))
            return category

    @staticmethod
    def _parse_name(name: str) -> CategoryName:
        try:
            return CategoryName(name)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)
