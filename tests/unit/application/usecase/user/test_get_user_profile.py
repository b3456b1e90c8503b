"""Unit tests for GetUserProfileUseCase."""

from uuid import uuid4

import pytest

from projectlink.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
)
from projectlink.domain.error import NotFoundError
from projectlink.domain.repository import UserRepository
from projectlink.domain.service import UserService
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUserProfileUseCase:
    @pytest.mark.asyncio
    async def test_private_fields_only_for_self(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user_service = await unit_env.get(UserService)
        alice = await user_repo.save(make_user("Alice", is_admin=True))
        bob = await user_repo.save(make_user("Bob"))
        use_case = GetUserProfileUseCase(user_service)

        own = await use_case.execute(
            GetUserProfileRequest(user_id=str(alice.id), viewer_id=str(alice.id))
        )
        seen_by_bob = await use_case.execute(
            GetUserProfileRequest(user_id=str(alice.id), viewer_id=str(bob.id))
        )

        assert own.email == alice.email
        assert own.is_admin is True
        assert seen_by_bob.email is None
        assert seen_by_bob.is_admin is None

    @pytest.mark.asyncio
    async def test_follow_lists_are_resolved(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user_service = await unit_env.get(UserService)
        alice = await user_repo.save(make_user("Alice"))
        bob = await user_repo.save(make_user("Bob"))
        await user_service.follow(bob.id, alice.id)
        use_case = GetUserProfileUseCase(user_service)

        profile = await use_case.execute(
            GetUserProfileRequest(user_id=str(alice.id), viewer_id=str(bob.id))
        )

        assert [p.name for p in profile.followers] == ["Bob"]
        assert profile.follower_count == 1
        assert profile.following == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", ["not-a-uuid", str(uuid4())])
    async def test_unknown_user(self, unit_env, user_id):
        user_service = await unit_env.get(UserService)
        use_case = GetUserProfileUseCase(user_service)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetUserProfileRequest(user_id=user_id, viewer_id=str(uuid4()))
            )
