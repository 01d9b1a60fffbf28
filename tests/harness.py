"""Test harness for unit, integration and E2E tests.

Unit and E2E fixtures run against in-memory persistence. Integration
fixtures unmock persistence and expect PostgreSQL at DATABASE__URL with
migrations applied.
"""

import pytest_asyncio

from inkwell.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a fresh test container with the given unmocking
    - Yields a request-scoped container for service access
    - Closes both when the test ends

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_category(unit_env):
            service = await unit_env.get(CategoryService)
            category = await service.create_category("Fantasy")
            assert category.post_count == 0
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
