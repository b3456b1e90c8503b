"""Unit tests for comment use cases."""

import pytest

from projectlink.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from projectlink.domain.error import NotFoundError
from projectlink.domain.repository import ProjectRepository, UserRepository
from projectlink.domain.service import CommentService
from tests.factories import make_project, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    @pytest.mark.asyncio
    async def test_returns_comment_with_author_profile(self, unit_env):
        # Arrange
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        comment_service = await unit_env.get(CommentService)
        author = await users.save(make_user("Author"))
        commenter = await users.save(make_user("Grace", avatar_url="https://x/g.png"))
        project = await projects.save(make_project(author.id))
        use_case = CreateCommentUseCase(comment_service)

        # Act
        view = await use_case.execute(
            CreateCommentRequest(
                user_id=str(commenter.id),
                project_id=str(project.id),
                text="<i>Great</i> work",
            )
        )

        # Assert
        assert view.text == "Great work"
        assert view.user.name == "Grace"
        assert view.user.avatar_url == "https://x/g.png"

        listed = await GetCommentsUseCase(comment_service).execute(
            GetCommentsRequest(project_id=str(project.id))
        )
        assert [c.id for c in listed.comments] == [view.id]

    @pytest.mark.asyncio
    async def test_malformed_project_id_is_not_found(self, unit_env):
        users = await unit_env.get(UserRepository)
        comment_service = await unit_env.get(CommentService)
        user = await users.save(make_user())

        with pytest.raises(NotFoundError):
            await CreateCommentUseCase(comment_service).execute(
                CreateCommentRequest(
                    user_id=str(user.id), project_id="nope", text="hello"
                )
            )
