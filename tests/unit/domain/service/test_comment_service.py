"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from projectlink.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from projectlink.domain.repository import ProjectRepository, UserRepository
from projectlink.domain.service import CommentService
from projectlink.domain.value import CommentId, ProjectId
from tests.factories import make_comment, make_project, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for add_comment."""

    @pytest.mark.asyncio
    async def test_comment_is_appended_with_profile(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        author = await users.save(make_user("Author"))
        commenter = await users.save(make_user("Grace", institution="Yale"))
        project = await projects.save(
            make_project(author.id, comments=[make_comment(author.id, "First")])
        )

        # Act
        comment, profile = await service.add_comment(
            commenter.id, project.id, "  Great demo!  "
        )

        # Assert
        assert comment.text == "Great demo!"
        assert comment.user_id == commenter.id
        assert profile.name == "Grace"
        assert profile.institution == "Yale"
        stored = await projects.find_by_id(project.id)
        assert [c.text for c in stored.comments] == ["First", "Great demo!"]

    @pytest.mark.asyncio
    async def test_markup_is_stripped(self, unit_env):
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        user = await users.save(make_user())
        project = await projects.save(make_project(user.id))

        comment, _ = await service.add_comment(
            user.id,
            project.id,
            '<script>alert(1)</script><b>Bold</b> <a href="javascript:x()">link</a>',
        )

        assert "<" not in comment.text
        assert "script" not in comment.text
        assert "javascript:" not in comment.text
        assert comment.text.startswith("Bold")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "<script>alert(1)</script>", "<br/>"])
    async def test_empty_text_rejected(self, unit_env, text):
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        user = await users.save(make_user())
        project = await projects.save(make_project(user.id))

        with pytest.raises(ValidationError, match="Comment text is required"):
            await service.add_comment(user.id, project.id, text)

        assert (await projects.find_by_id(project.id)).comments == []

    @pytest.mark.asyncio
    async def test_too_long_rejected(self, unit_env):
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        user = await users.save(make_user())
        project = await projects.save(make_project(user.id))

        with pytest.raises(ValidationError):
            await service.add_comment(user.id, project.id, "x" * 5001)

    @pytest.mark.asyncio
    async def test_missing_project(self, unit_env):
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        user = await users.save(make_user())

        with pytest.raises(NotFoundError):
            await service.add_comment(user.id, ProjectId(uuid4()), "Hi")


class TestDeleteComment:
    """Tests for delete_comment."""

    @pytest.mark.asyncio
    async def test_commenter_and_project_author_may_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        author = await users.save(make_user("Author"))
        commenter = await users.save(make_user("Commenter"))
        first = make_comment(commenter.id, "one")
        second = make_comment(commenter.id, "two")
        project = await projects.save(
            make_project(author.id, comments=[first, second])
        )

        await service.delete_comment(commenter.id, project.id, first.id)
        await service.delete_comment(author.id, project.id, second.id)

        assert (await projects.find_by_id(project.id)).comments == []

    @pytest.mark.asyncio
    async def test_others_may_not_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        author = await users.save(make_user("Author"))
        commenter = await users.save(make_user("Commenter"))
        stranger = await users.save(make_user("Stranger"))
        comment = make_comment(commenter.id)
        project = await projects.save(make_project(author.id, comments=[comment]))

        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(stranger.id, project.id, comment.id)

        assert len((await projects.find_by_id(project.id)).comments) == 1

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        author = await users.save(make_user())
        project = await projects.save(make_project(author.id))

        with pytest.raises(NotFoundError, match="Comment"):
            await service.delete_comment(author.id, project.id, CommentId(uuid4()))


class TestListComments:
    @pytest.mark.asyncio
    async def test_deleted_commenter_shows_as_unknown(self, unit_env):
        service = await unit_env.get(CommentService)
        users = await unit_env.get(UserRepository)
        projects = await unit_env.get(ProjectRepository)
        author = await users.save(make_user("Author"))
        ghost = make_user("Ghost")  # never saved
        project = await projects.save(
            make_project(
                author.id,
                comments=[make_comment(author.id, "a"), make_comment(ghost.id, "b")],
            )
        )

        listed = await service.list_comments(project.id)

        assert [(c.text, p.name) for c, p in listed] == [
            ("a", "Author"),
            ("b", "Unknown User"),
        ]
