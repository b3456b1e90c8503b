"""Process-local view deduplication cache."""

from collections import OrderedDict
from datetime import datetime, timedelta

from projectlink.domain.model.common import utcnow
from projectlink.domain.value import ProjectId


class ViewCache:
    """Remembers when each viewer last counted a view of each project.

    A view counts when the viewer has no entry for the project or the entry
    is at least ``cooldown`` old. State lives in process memory only: it is
    lost on restart and not shared between workers, so a cold start admits
    one extra view per active viewer. The least recently counted pairs are
    evicted once ``max_entries`` is exceeded.

    ``should_count`` does not await, so check-and-set is atomic under the
    asyncio request model. A caller whose increment fails hands the slot back
    with ``release``.
    """

    def __init__(self, cooldown: timedelta, max_entries: int = 100_000) -> None:
        """Initialize view cache.

        Args:
            cooldown: Minimum interval between two counted views
            max_entries: Upper bound on remembered (viewer, project) pairs
        """
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self.cooldown = cooldown
        self.max_entries = max_entries
        self._last_seen: OrderedDict[tuple[str, ProjectId], datetime] = OrderedDict()

    def should_count(
        self,
        viewer_key: str,
        project_id: ProjectId,
        now: datetime | None = None,
    ) -> bool:
        """Check whether a view counts, recording it if so.

        Args:
            viewer_key: Stable viewer identity (user or network origin)
            project_id: Viewed project
            now: Current time (defaults to UTC now)

        Returns:
            True if the view should increment the project's counter
        """
        now = now or utcnow()
        key = (viewer_key, project_id)

        last_seen = self._last_seen.get(key)
        if last_seen is not None and now - last_seen < self.cooldown:
            return False

        self._last_seen[key] = now
        self._last_seen.move_to_end(key)
        while len(self._last_seen) > self.max_entries:
            self._last_seen.popitem(last=False)
        return True

    def release(self, viewer_key: str, project_id: ProjectId) -> None:
        """Undo a counted view whose increment did not go through."""
        self._last_seen.pop((viewer_key, project_id), None)

    def forget_project(self, project_id: ProjectId) -> None:
        """Drop every entry for a deleted project."""
        for key in [k for k in self._last_seen if k[1] == project_id]:
            del self._last_seen[key]

    def __len__(self) -> int:
        return len(self._last_seen)
