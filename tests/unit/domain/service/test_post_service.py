"""Unit tests for PostService."""

from datetime import datetime
from uuid import uuid4

import pytest

from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.model import NewPost, PostUpdate
from inkwell.domain.repository import PostRepository, UserRepository
from inkwell.domain.service import CategoryService, PostService, TagService
from inkwell.domain.value import CategoryId, PostId, PostStatus, TagId
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def words(count: int) -> str:
    return " ".join(["word"] * count)


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post_with_category_and_tags(self, unit_env):
        """A valid post is stored with derived reading time and equal timestamps."""
        post_service = await unit_env.get(PostService)
        category_service = await unit_env.get(CategoryService)
        tag_service = await unit_env.get(TagService)
        user_repo = await unit_env.get(UserRepository)

        author = await user_repo.save(make_user())
        category = await category_service.create_category("Fantasy")
        tags = await tag_service.create_tags(["magic", "dragons"])

        post = await post_service.create_post(
            author,
            NewPost(
                title="Dragons of the North",
                content=words(450),
                category_id=category.id,
                tag_ids=frozenset(tag.id for tag in tags),
            ),
        )

        assert post.author_id == author.id
        assert post.category_id == category.id
        assert post.tag_ids == frozenset(tag.id for tag in tags)
        assert post.status == PostStatus.DRAFT
        assert post.reading_time == 3  # 450 words at 200 wpm
        assert post.created_at == post.updated_at
        assert await post_service.get_post(post.id) == post

    @pytest.mark.asyncio
    async def test_unknown_category_raises_validation_error(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(ValidationError, match="Category not found"):
            await post_service.create_post(
                author,
                NewPost(
                    title="Lost",
                    content=words(20),
                    category_id=CategoryId(uuid4()),
                ),
            )

    @pytest.mark.asyncio
    async def test_unknown_tag_raises_validation_error(self, unit_env):
        """One unknown tag rejects the post even when the others exist."""
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        magic, = await tag_service.create_tags(["magic"])

        with pytest.raises(ValidationError, match="Tags not found"):
            await post_service.create_post(
                author,
                NewPost(
                    title="Half tagged",
                    content=words(20),
                    tag_ids=frozenset({magic.id, TagId(uuid4())}),
                ),
            )

        post_repo = await unit_env.get(PostRepository)
        assert await post_repo.find_by_author_and_status(author.id, PostStatus.DRAFT) == []

    @pytest.mark.asyncio
    async def test_unknown_author_raises_validation_error(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError, match="Author not found"):
            await post_service.create_post(
                make_user(), NewPost(title="Ghost", content=words(20))
            )

    @pytest.mark.asyncio
    async def test_too_many_tags_raises_validation_error(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        tags = await tag_service.create_tags([f"tag{i}" for i in range(11)])

        with pytest.raises(ValidationError, match="at most 10 tags"):
            await post_service.create_post(
                author,
                NewPost(
                    title="Over tagged",
                    content=words(20),
                    tag_ids=frozenset(tag.id for tag in tags),
                ),
            )

    @pytest.mark.asyncio
    async def test_short_title_raises_validation_error(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(ValidationError, match="title"):
            await post_service.create_post(author, NewPost(title="Hi", content=words(20)))


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_update_title_keeps_reading_time(self, unit_env):
        """Changing the title alone bumps updated_at and nothing else."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        original_time = datetime(2024, 1, 1, 12, 0, 0)
        post = await post_repo.save(
            make_post(make_user().id, created_at=original_time)
        )

        result = await post_service.update_post(
            post.id, PostUpdate(title="A New Title")
        )

        assert result.title == "A New Title"
        assert result.content == post.content
        assert result.reading_time == post.reading_time
        assert result.created_at == original_time
        assert result.updated_at > original_time

        saved = await post_repo.find_by_id(post.id)
        assert saved.title == "A New Title"

    @pytest.mark.asyncio
    async def test_update_content_recomputes_reading_time(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id))
        assert post.reading_time == 1

        result = await post_service.update_post(
            post.id, PostUpdate(content=words(601))
        )

        assert result.reading_time == 4

    @pytest.mark.asyncio
    async def test_explicit_null_category_clears_it(self, unit_env):
        """category_id=None removes the category; omitting it keeps it."""
        post_service = await unit_env.get(PostService)
        category_service = await unit_env.get(CategoryService)
        post_repo = await unit_env.get(PostRepository)
        category = await category_service.create_category("Fantasy")
        post = await post_repo.save(
            make_post(make_user().id, category_id=category.id)
        )

        kept = await post_service.update_post(post.id, PostUpdate(title="Still Here"))
        cleared = await post_service.update_post(post.id, PostUpdate(category_id=None))

        assert kept.category_id == category.id
        assert cleared.category_id is None

    @pytest.mark.asyncio
    async def test_null_tags_clear_all_tags(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        post_repo = await unit_env.get(PostRepository)
        magic, = await tag_service.create_tags(["magic"])
        post = await post_repo.save(make_post(make_user().id, tag_ids={magic.id}))

        result = await post_service.update_post(post.id, PostUpdate(tag_ids=None))

        assert result.tag_ids == frozenset()

    @pytest.mark.asyncio
    async def test_update_with_unknown_category_raises_validation_error(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id))

        with pytest.raises(ValidationError):
            await post_service.update_post(
                post.id, PostUpdate(category_id=CategoryId(uuid4()))
            )

        assert (await post_repo.find_by_id(post.id)) == post

    @pytest.mark.asyncio
    async def test_publish_draft(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(
            make_post(make_user().id, status=PostStatus.DRAFT)
        )

        result = await post_service.update_post(
            post.id, PostUpdate(status=PostStatus.PUBLISHED)
        )

        assert result.is_published
        assert [p.id for p in await post_service.get_all_posts()] == [post.id]

    @pytest.mark.asyncio
    async def test_update_unknown_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.update_post(PostId(uuid4()), PostUpdate(title="Nope"))


class TestReadPosts:
    """Tests for listing and deleting posts."""

    @pytest.mark.asyncio
    async def test_get_all_posts_excludes_drafts(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = make_user().id
        published = await post_repo.save(make_post(author_id))
        await post_repo.save(make_post(author_id, status=PostStatus.DRAFT))

        posts = await post_service.get_all_posts()

        assert [p.id for p in posts] == [published.id]

    @pytest.mark.asyncio
    async def test_get_draft_posts_only_returns_own_drafts(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice, bob = make_user("Alice"), make_user("Bob")
        mine = await post_repo.save(make_post(alice.id, status=PostStatus.DRAFT))
        await post_repo.save(make_post(alice.id, status=PostStatus.PUBLISHED))
        await post_repo.save(make_post(bob.id, status=PostStatus.DRAFT))

        drafts = await post_service.get_draft_posts(alice)

        assert [p.id for p in drafts] == [mine.id]

    @pytest.mark.asyncio
    async def test_delete_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id))

        await post_service.delete_post(post.id)

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId(uuid4()))
