"""Category entity."""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CategoryId, CategoryName


class Category(DomainModel):
    """Category entity.

    Each post belongs to at most one category.

    Business rules:
    - Names are unique regardless of case
    - A category cannot be deleted while posts reference it
    - post_count is computed by the repository on read, never stored
    """

    id: CategoryId
    name: CategoryName
    post_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
