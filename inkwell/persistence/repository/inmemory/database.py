"""Shared in-memory store backing the in-memory repositories."""

from inkwell.domain.model import Category, Post, Tag, User
from inkwell.domain.value import CategoryId, PostId, TagId, UserId


class InMemoryDatabase:
    """Tables for the in-memory repositories.

    Repositories created for different requests share one instance, so data
    written in one request is visible in the next, as with PostgreSQL.
    Tag links are held on the posts themselves (``Post.tag_ids``).
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.categories: dict[CategoryId, Category] = {}
        self.tags: dict[TagId, Tag] = {}
