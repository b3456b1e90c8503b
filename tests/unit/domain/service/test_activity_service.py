"""Unit tests for ActivityService."""

from uuid import uuid4

import pytest

from projectlink.config import ActivitySettings
from projectlink.domain.error import NotFoundError
from projectlink.domain.service import ActivityService, UserService
from projectlink.domain.value import ActivityType, UserId
from projectlink.persistence.repository.inmemory import (
    InMemoryNotificationReadRepository,
    InMemoryProjectRepository,
    InMemoryUserRepository,
)
from tests.factories import follow_edge, like, make_comment, make_project, make_user


@pytest.fixture
def repos():
    return (
        InMemoryUserRepository(),
        InMemoryProjectRepository(),
        InMemoryNotificationReadRepository(),
    )


def make_service(repos, **settings) -> ActivityService:
    users, projects, reads = repos
    return ActivityService(
        user_service=UserService(users),
        project_repository=projects,
        notification_read_repository=reads,
        activity_settings=ActivitySettings(**settings),
    )


class TestDeriveActivities:
    """Tests for derive_activities."""

    @pytest.mark.asyncio
    async def test_collects_likes_comments_and_follows_newest_first(self, repos):
        users, projects, _ = repos
        owner = await users.save(make_user("Owner"))
        fan = await users.save(make_user("Fan"))
        await users.save(owner.model_copy(update={"followers": [follow_edge(fan.id, 5)]}))
        await projects.save(
            make_project(
                owner.id,
                title="Rover",
                likes=[like(fan.id, 30)],
                comments=[make_comment(fan.id, "Cool", minutes_ago=10)],
            )
        )
        service = make_service(repos)

        activities = await service.derive_activities(owner.id)

        assert [a.type for a in activities] == [
            ActivityType.FOLLOW,
            ActivityType.COMMENT,
            ActivityType.LIKE,
        ]
        assert all(a.actor.name == "Fan" for a in activities)
        assert activities[1].project_title == "Rover"
        assert activities[1].content == "Cool"
        assert activities[0].project_id is None

    @pytest.mark.asyncio
    async def test_own_actions_are_excluded(self, repos):
        users, projects, _ = repos
        owner = await users.save(make_user("Owner"))
        await projects.save(
            make_project(
                owner.id,
                likes=[like(owner.id)],
                comments=[make_comment(owner.id, "note to self")],
            )
        )
        service = make_service(repos)

        assert await service.derive_activities(owner.id) == []

    @pytest.mark.asyncio
    async def test_duplicate_events_collapse(self, repos):
        users, projects, _ = repos
        owner = await users.save(make_user("Owner"))
        fan = await users.save(make_user("Fan"))
        await projects.save(
            make_project(
                owner.id,
                comments=[
                    make_comment(fan.id, "same", minutes_ago=20),
                    make_comment(fan.id, "same", minutes_ago=10),
                    make_comment(fan.id, "different", minutes_ago=5),
                ],
            )
        )
        service = make_service(repos)

        activities = await service.derive_activities(owner.id)

        assert [a.content for a in activities] == ["different", "same"]

    @pytest.mark.asyncio
    async def test_deleted_actor_is_unknown(self, repos):
        users, projects, _ = repos
        owner = await users.save(make_user("Owner"))
        await projects.save(make_project(owner.id, likes=[like(UserId(uuid4()))]))
        service = make_service(repos)

        activities = await service.derive_activities(owner.id)

        assert activities[0].actor.name == "Unknown User"

    @pytest.mark.asyncio
    async def test_unknown_user(self, repos):
        service = make_service(repos)

        with pytest.raises(NotFoundError):
            await service.derive_activities(UserId(uuid4()))


class TestNotifications:
    """Tests for notification listing and read markers."""

    async def _seed(self, repos, likes: int):
        users, projects, _ = repos
        owner = await users.save(make_user("Owner"))
        fans = [await users.save(make_user(f"Fan {i}")) for i in range(likes)]
        await projects.save(
            make_project(
                owner.id,
                title="Rover",
                likes=[like(f.id, minutes_ago=i) for i, f in enumerate(fans)],
            )
        )
        return owner, fans

    @pytest.mark.asyncio
    async def test_default_limit_and_unread_count(self, repos):
        owner, _ = await self._seed(repos, likes=7)
        service = make_service(repos)

        notifications, unread = await service.list_notifications(owner.id)

        assert len(notifications) == 5
        assert unread == 7
        assert notifications[0].message == 'Fan 0 liked your project "Rover"'
        assert not any(n.read for n in notifications)

    @pytest.mark.asyncio
    async def test_explicit_limit(self, repos):
        owner, _ = await self._seed(repos, likes=7)
        service = make_service(repos)

        notifications, _ = await service.list_notifications(owner.id, limit=20)

        assert len(notifications) == 7

    @pytest.mark.asyncio
    async def test_mark_read_ignores_unknown_ids(self, repos):
        owner, _ = await self._seed(repos, likes=3)
        service = make_service(repos)
        notifications, _ = await service.list_notifications(owner.id)

        unread = await service.mark_read(
            owner.id, [notifications[0].id, "not-a-notification"]
        )

        assert unread == 2
        after, _ = await service.list_notifications(owner.id)
        assert [n.read for n in after] == [True, False, False]
        _, _, reads = repos
        assert await reads.find_read_ids(owner.id, ["not-a-notification"]) == set()

    @pytest.mark.asyncio
    async def test_mark_all_read(self, repos):
        owner, _ = await self._seed(repos, likes=3)
        service = make_service(repos)

        assert await service.mark_all_read(owner.id) == 0

        _, unread = await service.list_notifications(owner.id)
        assert unread == 0

    @pytest.mark.asyncio
    async def test_read_state_survives_new_events(self, repos):
        owner, fans = await self._seed(repos, likes=1)
        service = make_service(repos)
        await service.mark_all_read(owner.id)

        users, _, _ = repos
        newcomer = await users.save(make_user("Newcomer"))
        await users.save(
            (await users.find_by_id(owner.id)).model_copy(
                update={"followers": [follow_edge(newcomer.id)]}
            )
        )

        notifications, unread = await service.list_notifications(owner.id)
        assert unread == 1
        assert notifications[0].message == "Newcomer started following you"
        assert notifications[0].read is False
        assert notifications[1].read is True


class TestDashboard:
    """Tests for build_dashboard."""

    @pytest.mark.asyncio
    async def test_stats_and_limits(self, repos):
        users, projects, _ = repos
        owner = await users.save(make_user("Owner"))
        fan = await users.save(make_user("Fan"))
        await users.save(owner.model_copy(update={"followers": [follow_edge(fan.id)]}))
        await projects.save(
            make_project(
                owner.id,
                likes=[like(fan.id), like(owner.id)],
                comments=[make_comment(fan.id, "a"), make_comment(fan.id, "b")],
            )
        )
        await projects.save(make_project(owner.id, title="Second"))
        service = make_service(repos, notification_limit=2, feed_limit=3)

        dashboard = await service.build_dashboard(owner.id)

        # Self-like counts in totals but never appears in the feed
        assert dashboard.stats.total_projects == 2
        assert dashboard.stats.total_likes == 2
        assert dashboard.stats.total_comments == 2
        assert dashboard.stats.total_followers == 1
        assert len(dashboard.activities) == 3
        assert len(dashboard.notifications) == 2
        assert dashboard.unread_count == 4
