import logging
from datetime import datetime, timedelta
from typing import Callable
from uuid import UUID
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import NODE_NOT_FOUND, STORE_ERRORS, store_failure
from src.domain.base import utcnow
from src.domain.node import DEFAULT_HEALTH_WINDOW
from .dtos import NodeDTO
from .list_nodes_use_case import to_node_dto

logger = logging.getLogger(__name__)


class GetNodeUseCase:
    """Use case for getting a single node by ID"""

    def __init__(
        self,
        uow: UnitOfWork,
        health_window: timedelta = DEFAULT_HEALTH_WINDOW,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.health_window = health_window
        self.clock = clock

    async def execute(self, node_id: UUID) -> Result[NodeDTO]:
        try:
            async with self.uow:
                node = await self.uow.nodes.get(node_id)
        except STORE_ERRORS as e:
            logger.error(f"Failed to get node {node_id}: {e}")
            return Return.err(store_failure(e))

        if node is None:
            return Return.err(Error(code=NODE_NOT_FOUND, message="Node not found"))

        return Return.ok(to_node_dto(node, self.clock(), self.health_window))
