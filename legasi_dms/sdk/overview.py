"""
Dashboard Overview - Projects and counters for the manager landing page.

Both halves are fetched concurrently. One failing does not discard the
other; each keeps its own error message.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional

from legasi_dms.domain.project import DashboardStats, Project
from legasi_dms.domain.result import ApiError, ErrorKind, Result
from legasi_dms.ports.dashboard_api_port import DashboardApiPort

logger = logging.getLogger(__name__)


@dataclass
class OverviewSnapshot:
    projects: List[Project] = field(default_factory=list)
    stats: DashboardStats = field(default_factory=DashboardStats)
    projects_error: Optional[str] = None
    stats_error: Optional[str] = None

    @property
    def complete(self) -> bool:
        return self.projects_error is None and self.stats_error is None


class DashboardOverview:
    """Loads the project manager landing page."""

    def __init__(self, api: DashboardApiPort):
        self._api = api
        self.snapshot = OverviewSnapshot()

    def load(self) -> OverviewSnapshot:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="overview") as pool:
            projects_future = pool.submit(self._api.fetch_projects)
            stats_future = pool.submit(self._api.fetch_stats)

        snapshot = OverviewSnapshot()

        projects = _settle(projects_future, "projects")
        if projects.ok:
            snapshot.projects = projects.value or []
        else:
            snapshot.projects_error = projects.message

        stats = _settle(stats_future, "stats")
        if stats.ok:
            snapshot.stats = stats.value or DashboardStats()
        else:
            snapshot.stats_error = stats.message

        self.snapshot = snapshot
        return snapshot


def _settle(future, what: str) -> Result:
    """Turn a finished future into a Result, logging unexpected exceptions."""
    exc = future.exception()
    if exc is None:
        return future.result()

    logger.error("Loading %s failed: %s", what, exc)
    return Result.failure(ApiError(kind=ErrorKind.UNEXPECTED, message=f"Failed to load {what}"))
