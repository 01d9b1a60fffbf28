"""Category use cases."""

from .create_category import CreateCategoryRequest, CreateCategoryUseCase
from .delete_category import DeleteCategoryRequest, DeleteCategoryUseCase
from .get_category import GetCategoryRequest, GetCategoryUseCase
from .list_categories import (
    CategoryItem,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)
from .update_category import UpdateCategoryRequest, UpdateCategoryUseCase

__all__ = [
    "CategoryItem",
    "CreateCategoryRequest",
    "CreateCategoryUseCase",
    "DeleteCategoryRequest",
    "DeleteCategoryUseCase",
    "GetCategoryRequest",
    "GetCategoryUseCase",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
    "UpdateCategoryRequest",
    "UpdateCategoryUseCase",
]
