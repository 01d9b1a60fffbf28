"""Tag entity for labelling posts."""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity for labelling posts.

    Tags are shared by many posts and created on demand from free-text
    names, so repeated names always resolve to the same tag.
    post_count is computed by the repository on read.
    """

    id: TagId
    name: TagName  # Unique, lowercase
    post_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
