import logging
from datetime import datetime, timedelta
from typing import Callable
from libs.result import Result, Return
from src.app.queries import DEFAULT_MAX_PAGE_SIZE, NodeFilter, build_page_request
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import STORE_ERRORS, store_failure
from src.domain.base import utcnow
from src.domain.node import DEFAULT_HEALTH_WINDOW, Node
from .dtos import ListNodesResponseDTO, NodeDTO

logger = logging.getLogger(__name__)


def to_node_dto(node: Node, now: datetime, health_window: timedelta) -> NodeDTO:
    return NodeDTO(
        id=node.id,
        node_number=node.node_number,
        description=node.description,
        uri=node.uri,
        started=node.started,
        health_check=node.health_check,
        capabilities=node.capabilities,
        is_active=node.is_active(now, health_window),
    )


class ListNodesUseCase:
    """
    Use case: List Nodes

    Nodes are ordered by node number. With active_only, only nodes whose
    heartbeat is inside the health window are returned.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        health_window: timedelta = DEFAULT_HEALTH_WINDOW,
        clock: Callable[[], datetime] = utcnow,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ):
        self.uow = uow
        self.health_window = health_window
        self.clock = clock
        self.max_page_size = max_page_size

    async def execute(
        self, active_only: bool = False, page: int = 1, page_size: int = 10
    ) -> Result[ListNodesResponseDTO]:
        page_request = build_page_request(page, page_size, self.max_page_size)
        if page_request.is_err():
            return page_request

        now = self.clock()
        filters = NodeFilter(active_since=now - self.health_window if active_only else None)

        try:
            async with self.uow:
                result = await self.uow.nodes.list(filters, page_request.value)
        except STORE_ERRORS as e:
            logger.error(f"Failed to list nodes: {e}")
            return Return.err(store_failure(e))

        return Return.ok(
            ListNodesResponseDTO(
                count=result.total_count,
                page=result.page,
                page_size=result.page_size,
                total_pages=result.total_pages,
                data=[to_node_dto(node, now, self.health_window) for node in result.items],
            )
        )
