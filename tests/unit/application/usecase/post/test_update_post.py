"""Unit tests for UpdatePostUseCase."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.post.update_post import (
    UpdatePostRequest,
    UpdatePostUseCase,
)
from inkwell.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from inkwell.domain.repository import PostRepository, UserRepository
from inkwell.domain.service import CategoryService, TagService
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_update_title_and_tags(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        tag_service = await unit_env.get(TagService)

        author = await user_repo.save(make_user("Ada"))
        post = await post_repo.save(make_post(author.id))
        dragons, magic = await tag_service.create_tags(["magic", "dragons"])

        # Act
        result = await use_case.execute(
            UpdatePostRequest(
                post_id=str(post.id),
                user_id=str(author.id),
                changes={
                    "title": "Dragons, Revisited",
                    "tag_ids": [str(magic.id), str(dragons.id)],
                },
            )
        )

        # Assert
        assert result.title == "Dragons, Revisited"
        assert [tag.name for tag in result.tags] == ["dragons", "magic"]
        assert result.author.name == "Ada"

    @pytest.mark.asyncio
    async def test_null_category_in_changes_clears_category(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        category_service = await unit_env.get(CategoryService)

        author = await user_repo.save(make_user())
        category = await category_service.create_category("Fantasy")
        post = await post_repo.save(make_post(author.id, category_id=category.id))

        result = await use_case.execute(
            UpdatePostRequest(
                post_id=str(post.id),
                user_id=str(author.id),
                changes={"category_id": None},
            )
        )

        assert result.category is None

    @pytest.mark.asyncio
    async def test_non_author_cannot_update(self, unit_env):
        """Only the author may edit a post."""
        use_case = await unit_env.get(UpdatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        author = await user_repo.save(make_user("Ada"))
        intruder = await user_repo.save(make_user("Eve"))
        post = await post_repo.save(make_post(author.id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(post.id),
                    user_id=str(intruder.id),
                    changes={"title": "Hijacked"},
                )
            )

        assert (await post_repo.find_by_id(post.id)).title == post.title

    @pytest.mark.asyncio
    async def test_author_cannot_be_changed(self, unit_env):
        """author_id is not an editable field."""
        use_case = await unit_env.get(UpdatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        author = await user_repo.save(make_user())
        post = await post_repo.save(make_post(author.id))

        with pytest.raises(ValidationError, match="author_id"):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(post.id),
                    user_id=str(author.id),
                    changes={"author_id": str(uuid4())},
                )
            )

    @pytest.mark.asyncio
    async def test_invalid_status_raises_validation_error(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        author = await user_repo.save(make_user())
        post = await post_repo.save(make_post(author.id))

        with pytest.raises(ValidationError, match="status"):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(post.id),
                    user_id=str(author.id),
                    changes={"status": "archived"},
                )
            )

    @pytest.mark.asyncio
    async def test_update_missing_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdatePostRequest(
                    post_id=str(uuid4()),
                    user_id=str(uuid4()),
                    changes={"title": "Anything"},
                )
            )
