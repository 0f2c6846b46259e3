"""Unit tests for UserService."""

import pytest

from dojo.domain.repository import UserRepository
from dojo.domain.service import UserService
from dojo.domain.value import UserId
from tests.conftest import seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_get_user_by_id_returns_stored_name(unit_env):
    await seed_user(await unit_env.get(UserRepository), 10, name="Kenji Sato")
    service = await unit_env.get(UserService)

    user = await service.get_user_by_id(UserId(10))

    assert user is not None
    assert user.name.root == "Kenji Sato"


@pytest.mark.asyncio
async def test_get_user_by_id_unknown(unit_env):
    service = await unit_env.get(UserService)

    assert await service.get_user_by_id(UserId(999)) is None
