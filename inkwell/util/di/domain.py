"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings, CatalogSettings
from inkwell.domain.repository import (
    CategoryRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from inkwell.domain.service import (
    CategoryService,
    JWTService,
    PostQueryResolver,
    PostService,
    TagService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(category_repository=category_repository)

    @provide
    def get_post_query_resolver(
        self, post_repository: PostRepository
    ) -> PostQueryResolver:
        """Provide post query resolver."""
        return PostQueryResolver(post_repository=post_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        query_resolver: PostQueryResolver,
        category_service: CategoryService,
        tag_service: TagService,
        user_service: UserService,
        catalog_settings: CatalogSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            query_resolver=query_resolver,
            category_service=category_service,
            tag_service=tag_service,
            user_service=user_service,
            catalog_settings=catalog_settings,
        )
