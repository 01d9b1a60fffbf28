"""Fixtures for end-to-end API tests.

The app runs in-process over httpx's ASGI transport with in-memory
persistence, so no server or database is needed.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.service import JWTService
from inkwell.interface.api.app import create_app
from inkwell.util.di.container import setup_di
from tests.conftest import make_user
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    container = build_test_container()
    yield container
    await container.close()


@pytest_asyncio.fixture
async def client(container):
    app = create_app()
    setup_di(app, container)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def sign_up(container):
    """Register a user and return it with its Authorization header."""

    async def _sign_up(name: str = "Ada Writer") -> tuple[User, dict[str, str]]:
        user = make_user(name)
        async with container() as request_container:
            await (await request_container.get(UserRepository)).save(user)
            jwt_service = await request_container.get(JWTService)
            token = jwt_service.create_token(str(user.id), user.email)
        return user, {"Authorization": f"Bearer {token}"}

    return _sign_up
