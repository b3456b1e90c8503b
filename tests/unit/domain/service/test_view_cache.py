"""Unit tests for ViewCache."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from projectlink.domain.service import ViewCache
from projectlink.domain.value import ProjectId

T0 = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def cache():
    return ViewCache(cooldown=timedelta(hours=24))


class TestShouldCount:
    def test_first_view_counts(self, cache):
        assert cache.should_count("user:a", ProjectId(uuid4()), now=T0) is True

    def test_repeat_within_cooldown_ignored(self, cache):
        project = ProjectId(uuid4())
        cache.should_count("user:a", project, now=T0)

        assert cache.should_count("user:a", project, now=T0 + timedelta(hours=1)) is False
        assert (
            cache.should_count("user:a", project, now=T0 + timedelta(hours=23, minutes=59))
            is False
        )

    def test_counts_again_after_cooldown(self, cache):
        project = ProjectId(uuid4())
        cache.should_count("user:a", project, now=T0)

        assert cache.should_count("user:a", project, now=T0 + timedelta(hours=24)) is True

    def test_ignored_view_does_not_extend_window(self, cache):
        project = ProjectId(uuid4())
        cache.should_count("user:a", project, now=T0)
        cache.should_count("user:a", project, now=T0 + timedelta(hours=20))

        assert cache.should_count("user:a", project, now=T0 + timedelta(hours=25)) is True

    def test_viewers_and_projects_are_independent(self, cache):
        first, second = ProjectId(uuid4()), ProjectId(uuid4())
        cache.should_count("user:a", first, now=T0)

        assert cache.should_count("user:b", first, now=T0) is True
        assert cache.should_count("user:a", second, now=T0) is True
        assert cache.should_count("ip:203.0.113.9", first, now=T0) is True


class TestBounds:
    def test_oldest_entries_evicted(self):
        cache = ViewCache(cooldown=timedelta(hours=24), max_entries=2)
        project = ProjectId(uuid4())
        cache.should_count("user:a", project, now=T0)
        cache.should_count("user:b", project, now=T0)
        cache.should_count("user:c", project, now=T0)

        assert len(cache) == 2
        # "a" was evicted, so it counts again
        assert cache.should_count("user:a", project, now=T0) is True

    def test_forget_project(self, cache):
        kept, dropped = ProjectId(uuid4()), ProjectId(uuid4())
        cache.should_count("user:a", kept, now=T0)
        cache.should_count("user:a", dropped, now=T0)

        cache.forget_project(dropped)

        assert len(cache) == 1

    def test_release_lets_the_viewer_count_again(self, cache):
        project = ProjectId(uuid4())
        cache.should_count("user:a", project, now=T0)

        cache.release("user:a", project)
        cache.release("user:b", project)

        assert cache.should_count("user:a", project, now=T0 + timedelta(minutes=1)) is True

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            ViewCache(cooldown=timedelta(hours=1), max_entries=0)
