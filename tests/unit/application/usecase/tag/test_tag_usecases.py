"""Unit tests for the tag use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from inkwell.application.usecase.tag import (
    CreateTagsRequest,
    CreateTagsUseCase,
    DeleteTagRequest,
    DeleteTagUseCase,
    ListTagsUseCase,
)
from inkwell.domain.error import NotFoundError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestTagUseCases:
    """Tag lifecycle through the use cases."""

    def test_create_request_requires_a_name(self):
        with pytest.raises(PydanticValidationError):
            CreateTagsRequest(names=[])

    @pytest.mark.asyncio
    async def test_create_then_list(self, unit_env):
        create = await unit_env.get(CreateTagsUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)

        created = await create.execute(
            CreateTagsRequest(names=["Magic", "magic", "Dragons"])
        )
        listed = await list_tags.execute()

        assert [tag.name for tag in created.tags] == ["dragons", "magic"]
        assert listed == created

    @pytest.mark.asyncio
    async def test_delete_tag(self, unit_env):
        create = await unit_env.get(CreateTagsUseCase)
        delete = await unit_env.get(DeleteTagUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)
        created = await create.execute(CreateTagsRequest(names=["magic"]))

        await delete.execute(DeleteTagRequest(tag_id=created.tags[0].id))

        assert (await list_tags.execute()).tags == []

    @pytest.mark.asyncio
    async def test_delete_missing_tag_raises_not_found(self, unit_env):
        delete = await unit_env.get(DeleteTagUseCase)

        with pytest.raises(NotFoundError):
            await delete.execute(DeleteTagRequest(tag_id=str(uuid4())))
