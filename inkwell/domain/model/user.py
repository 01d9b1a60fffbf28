"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    Users author posts. Credentials are owned by the identity provider and
    are not part of this model.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
