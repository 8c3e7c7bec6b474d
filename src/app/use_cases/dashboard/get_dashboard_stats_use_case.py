"""
Dashboard Stats Use Case

Summary counts shown at the top of the admin dashboard.
"""
import logging
from datetime import datetime, timedelta
from typing import Callable
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import STORE_ERRORS, store_failure
from src.domain.base import utcnow
from src.domain.node import DEFAULT_HEALTH_WINDOW
from .dtos import DashboardStatsDTO

logger = logging.getLogger(__name__)


class GetDashboardStatsUseCase:
    """
    Use case: Dashboard summary

    Counts are read fresh on every call. A node counts as active when its
    last heartbeat is strictly newer than now minus the health window.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        health_window: timedelta = DEFAULT_HEALTH_WINDOW,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.health_window = health_window
        self.clock = clock

    async def execute(self) -> Result[DashboardStatsDTO]:
        now = self.clock()

        try:
            async with self.uow:
                total_dead_letters = await self.uow.dead_letters.count()
                replayable_dead_letters = await self.uow.dead_letters.count(replayable_only=True)
                total_incoming_envelopes = await self.uow.incoming_envelopes.count()
                active_nodes = await self.uow.nodes.count_active(since=now - self.health_window)
        except STORE_ERRORS as e:
            logger.error(f"Failed to collect dashboard stats: {e}")
            return Return.err(store_failure(e))

        return Return.ok(
            DashboardStatsDTO(
                total_dead_letters=total_dead_letters,
                replayable_dead_letters=replayable_dead_letters,
                total_incoming_envelopes=total_incoming_envelopes,
                active_nodes=active_nodes,
                timestamp=now,
            )
        )
