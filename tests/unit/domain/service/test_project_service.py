"""Unit tests for ProjectService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from projectlink.domain.error import (
    AlreadyLikedError,
    NotAuthorizedError,
    NotFoundError,
    SelfReferenceError,
)
from projectlink.domain.model.common import utcnow
from projectlink.domain.repository import ProjectRepository, UserRepository
from projectlink.domain.service import ProjectService, UserService, ViewCache
from projectlink.domain.value import CollaboratorAction, ProjectId, ProjectStatus, UserId
from projectlink.persistence.repository.inmemory import (
    InMemoryProjectRepository,
    InMemoryUserRepository,
)
from tests.factories import make_project, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup(env):
    service = await env.get(ProjectService)
    users = await env.get(UserRepository)
    projects = await env.get(ProjectRepository)
    author = await users.save(make_user("Author"))
    return service, users, projects, author


class TestCreateAndUpdate:
    """Tests for project lifecycle."""

    @pytest.mark.asyncio
    async def test_create_derives_status_from_progress(self, unit_env):
        service, _, _, author = await _setup(unit_env)

        active = await service.create_project(
            author.id, {"title": "A", "description": "d", "progress": 40}
        )
        done = await service.create_project(
            author.id, {"title": "B", "description": "d", "progress": 100}
        )

        assert active.status == ProjectStatus.ACTIVE
        assert done.status == ProjectStatus.COMPLETED
        assert active.views == 0
        assert active.likes == []

    @pytest.mark.asyncio
    async def test_create_normalizes_tags(self, unit_env):
        service, _, _, author = await _setup(unit_env)

        project = await service.create_project(
            author.id,
            {"title": "A", "description": "d", "tags": ["ML", " ml ", "Vision", ""]},
        )

        assert project.tags == ["ml", "vision"]

    @pytest.mark.asyncio
    async def test_create_requires_existing_author(self, unit_env):
        service = await unit_env.get(ProjectService)

        with pytest.raises(NotFoundError):
            await service.create_project(
                UserId(uuid4()), {"title": "A", "description": "d"}
            )

    @pytest.mark.asyncio
    async def test_progress_update_rederives_status(self, unit_env):
        service, _, _, author = await _setup(unit_env)
        project = await service.create_project(
            author.id, {"title": "A", "description": "d", "progress": 10}
        )

        completed = await service.update_project(
            author.id, project.id, {"progress": 100}
        )
        reopened = await service.update_project(author.id, project.id, {"progress": 80})

        assert completed.status == ProjectStatus.COMPLETED
        assert reopened.status == ProjectStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_explicit_status_holds_until_progress_changes(self, unit_env):
        service, _, _, author = await _setup(unit_env)
        project = await service.create_project(
            author.id, {"title": "A", "description": "d"}
        )

        on_hold = await service.set_status(author.id, project.id, ProjectStatus.ON_HOLD)
        renamed = await service.update_project(author.id, project.id, {"title": "B"})

        assert on_hold.status == ProjectStatus.ON_HOLD
        assert renamed.status == ProjectStatus.ON_HOLD
        assert renamed.title == "B"

    @pytest.mark.asyncio
    async def test_non_author_cannot_update_or_delete(self, unit_env):
        service, users, _, author = await _setup(unit_env)
        other = await users.save(make_user("Other"))
        project = await service.create_project(
            author.id, {"title": "A", "description": "d"}
        )

        with pytest.raises(NotAuthorizedError):
            await service.update_project(other.id, project.id, {"title": "Hijack"})
        with pytest.raises(NotAuthorizedError):
            await service.delete_project(other.id, project.id)

        assert (await service.get_by_id(project.id)).title == "A"

    @pytest.mark.asyncio
    async def test_update_keeps_view_count(self, unit_env):
        service, _, projects, author = await _setup(unit_env)
        project = await service.create_project(
            author.id, {"title": "A", "description": "d"}
        )
        await service.record_view(project.id, "ip:10.0.0.1")

        await service.update_project(author.id, project.id, {"title": "B"})

        assert (await projects.find_by_id(project.id)).views == 1


class TestLikesAndBookmarks:
    """Tests for likes and bookmarks."""

    @pytest.mark.asyncio
    async def test_like_once(self, unit_env):
        service, users, projects, author = await _setup(unit_env)
        fan = await users.save(make_user("Fan"))
        project = await projects.save(make_project(author.id))

        assert await service.like(fan.id, project.id) == 1
        with pytest.raises(AlreadyLikedError):
            await service.like(fan.id, project.id)

        assert (await projects.find_by_id(project.id)).like_ids == [fan.id]

    @pytest.mark.asyncio
    async def test_unlike(self, unit_env):
        service, users, projects, author = await _setup(unit_env)
        fan = await users.save(make_user("Fan"))
        project = await projects.save(make_project(author.id))
        await service.like(fan.id, project.id)

        assert await service.unlike(fan.id, project.id) == 0
        # Unliking again changes nothing
        assert await service.unlike(fan.id, project.id) == 0

    @pytest.mark.asyncio
    async def test_like_missing_project(self, unit_env):
        service, _, _, author = await _setup(unit_env)

        with pytest.raises(NotFoundError):
            await service.like(author.id, ProjectId(uuid4()))

    @pytest.mark.asyncio
    async def test_bookmark_toggles(self, unit_env):
        service, users, projects, author = await _setup(unit_env)
        reader = await users.save(make_user("Reader"))
        project = await projects.save(make_project(author.id))

        assert await service.toggle_bookmark(reader.id, project.id) is True
        assert (await projects.find_by_id(project.id)).bookmarks == [reader.id]
        assert await service.toggle_bookmark(reader.id, project.id) is False
        assert (await projects.find_by_id(project.id)).bookmarks == []

    @pytest.mark.asyncio
    async def test_bookmark_touches_updated_at(self, unit_env):
        service, users, projects, author = await _setup(unit_env)
        reader = await users.save(make_user("Reader"))
        stale = utcnow() - timedelta(days=3)
        project = await projects.save(make_project(author.id, updated_at=stale))

        await service.toggle_bookmark(reader.id, project.id)

        assert (await projects.find_by_id(project.id)).updated_at > stale


class TestCollaborators:
    """Tests for set_collaborator."""

    @pytest.mark.asyncio
    async def test_add_is_idempotent(self, unit_env):
        service, users, projects, author = await _setup(unit_env)
        helper = await users.save(make_user("Helper"))
        project = await projects.save(make_project(author.id))

        await service.set_collaborator(
            author.id, project.id, helper.id, CollaboratorAction.ADD
        )
        collaborators = await service.set_collaborator(
            author.id, project.id, helper.id, CollaboratorAction.ADD
        )

        assert collaborators == [helper.id]

    @pytest.mark.asyncio
    async def test_remove(self, unit_env):
        service, users, projects, author = await _setup(unit_env)
        helper = await users.save(make_user("Helper"))
        project = await projects.save(
            make_project(author.id, collaborators=[helper.id])
        )

        collaborators = await service.set_collaborator(
            author.id, project.id, helper.id, CollaboratorAction.REMOVE
        )

        assert collaborators == []

    @pytest.mark.asyncio
    async def test_author_cannot_be_collaborator(self, unit_env):
        service, _, projects, author = await _setup(unit_env)
        project = await projects.save(make_project(author.id))

        with pytest.raises(SelfReferenceError):
            await service.set_collaborator(
                author.id, project.id, author.id, CollaboratorAction.ADD
            )

    @pytest.mark.asyncio
    async def test_only_author_manages_collaborators(self, unit_env):
        service, users, projects, author = await _setup(unit_env)
        other = await users.save(make_user("Other"))
        project = await projects.save(make_project(author.id))

        with pytest.raises(NotAuthorizedError):
            await service.set_collaborator(
                other.id, project.id, other.id, CollaboratorAction.ADD
            )

    @pytest.mark.asyncio
    async def test_unknown_collaborator(self, unit_env):
        service, _, projects, author = await _setup(unit_env)
        project = await projects.save(make_project(author.id))

        with pytest.raises(NotFoundError):
            await service.set_collaborator(
                author.id, project.id, UserId(uuid4()), CollaboratorAction.ADD
            )


class TestRecordView:
    """Tests for view counting with cooldown."""

    @pytest.mark.asyncio
    async def test_cooldown_per_viewer(self, unit_env):
        service, _, projects, author = await _setup(unit_env)
        project = await projects.save(make_project(author.id))
        t0 = utcnow()

        assert await service.record_view(project.id, "user:x", now=t0) == 1
        assert (
            await service.record_view(project.id, "user:x", now=t0 + timedelta(hours=1))
            == 1
        )
        assert (
            await service.record_view(
                project.id, "user:x", now=t0 + timedelta(hours=25)
            )
            == 2
        )

    @pytest.mark.asyncio
    async def test_viewers_counted_independently(self, unit_env):
        service, _, projects, author = await _setup(unit_env)
        project = await projects.save(make_project(author.id))

        await service.record_view(project.id, "user:x")
        views = await service.record_view(project.id, "ip:192.0.2.7")

        assert views == 2

    @pytest.mark.asyncio
    async def test_missing_project(self, unit_env):
        service = await unit_env.get(ProjectService)

        with pytest.raises(NotFoundError):
            await service.record_view(ProjectId(uuid4()), "user:x")

    @pytest.mark.asyncio
    async def test_delete_forgets_cached_views(self, unit_env):
        service, _, projects, author = await _setup(unit_env)
        cache = await unit_env.get(ViewCache)
        project = await projects.save(make_project(author.id))
        await service.record_view(project.id, "user:x")
        assert len(cache) == 1

        await service.delete_project(author.id, project.id)

        assert len(cache) == 0
        assert await projects.find_by_id(project.id) is None


class FailingIncrementRepository(InMemoryProjectRepository):
    def __init__(self) -> None:
        super().__init__()
        self.fail_next = True

    async def increment_views(self, project_id):
        if self.fail_next:
            self.fail_next = False
            raise ConnectionError("database went away")
        return await super().increment_views(project_id)


class TestRecordViewFailure:
    """A view whose increment fails is not held against the viewer."""

    @pytest.mark.asyncio
    async def test_failed_increment_releases_cooldown(self):
        users = InMemoryUserRepository()
        projects = FailingIncrementRepository()
        cache = ViewCache(cooldown=timedelta(hours=24))
        service = ProjectService(projects, UserService(users), cache)
        author = await users.save(make_user("Author"))
        project = await projects.save(make_project(author.id))

        with pytest.raises(ConnectionError):
            await service.record_view(project.id, "user:x")
        assert len(cache) == 0

        assert await service.record_view(project.id, "user:x") == 1
