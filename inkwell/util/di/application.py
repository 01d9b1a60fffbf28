"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.auth import GetCurrentUserUseCase
from inkwell.application.usecase.category import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from inkwell.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListDraftsUseCase,
    ListPostsUseCase,
    PostItemBuilder,
    UpdatePostUseCase,
)
from inkwell.application.usecase.tag import (
    CreateTagsUseCase,
    DeleteTagUseCase,
    ListTagsUseCase,
)
from inkwell.domain.repository import CategoryRepository, TagRepository
from inkwell.domain.service import (
    CategoryService,
    JWTService,
    PostService,
    TagService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_post_item_builder(
        self,
        category_repository: CategoryRepository,
        tag_repository: TagRepository,
        user_service: UserService,
    ) -> PostItemBuilder:
        """Provide post response builder."""
        return PostItemBuilder(
            category_repository=category_repository,
            tag_repository=tag_repository,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, builder: PostItemBuilder
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, builder=builder)

    @provide(scope=Scope.REQUEST)
    def get_list_drafts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        builder: PostItemBuilder,
    ) -> ListDraftsUseCase:
        """Provide list drafts use case."""
        return ListDraftsUseCase(
            post_service=post_service, user_service=user_service, builder=builder
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, builder: PostItemBuilder
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, builder=builder)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        builder: PostItemBuilder,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service, user_service=user_service, builder=builder
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, builder: PostItemBuilder
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, builder=builder)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Category use cases
    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_get_category_use_case(
        self, category_service: CategoryService
    ) -> GetCategoryUseCase:
        """Provide get category use case."""
        return GetCategoryUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_create_category_use_case(
        self, category_service: CategoryService
    ) -> CreateCategoryUseCase:
        """Provide create category use case."""
        return CreateCategoryUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_update_category_use_case(
        self, category_service: CategoryService
    ) -> UpdateCategoryUseCase:
        """Provide update category use case."""
        return UpdateCategoryUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_category_use_case(
        self, category_service: CategoryService
    ) -> DeleteCategoryUseCase:
        """Provide delete category use case."""
        return DeleteCategoryUseCase(category_service=category_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_create_tags_use_case(self, tag_service: TagService) -> CreateTagsUseCase:
        """Provide create tags use case."""
        return CreateTagsUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_tag_use_case(self, tag_service: TagService) -> DeleteTagUseCase:
        """Provide delete tag use case."""
        return DeleteTagUseCase(tag_service=tag_service)
