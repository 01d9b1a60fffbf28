"""Tag use cases."""

from .create_tags import CreateTagsRequest, CreateTagsUseCase
from .delete_tag import DeleteTagRequest, DeleteTagUseCase
from .list_tags import ListTagsResponse, ListTagsUseCase, TagItem

__all__ = [
    "CreateTagsRequest",
    "CreateTagsUseCase",
    "DeleteTagRequest",
    "DeleteTagUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TagItem",
]
