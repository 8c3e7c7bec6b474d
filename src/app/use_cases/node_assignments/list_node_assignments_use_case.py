import logging
from typing import Optional
from uuid import UUID
from libs.result import Result, Return
from src.app.queries import DEFAULT_MAX_PAGE_SIZE, NodeAssignmentFilter, build_page_request
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import STORE_ERRORS, store_failure
from .dtos import ListNodeAssignmentsResponseDTO, to_node_assignment_dto

logger = logging.getLogger(__name__)


class ListNodeAssignmentsUseCase:
    """Use case for listing node assignments, most recently started first"""

    def __init__(self, uow: UnitOfWork, max_page_size: int = DEFAULT_MAX_PAGE_SIZE):
        self.uow = uow
        self.max_page_size = max_page_size

    async def execute(
        self, node_id: Optional[UUID] = None, page: int = 1, page_size: int = 10
    ) -> Result[ListNodeAssignmentsResponseDTO]:
        page_request = build_page_request(page, page_size, self.max_page_size)
        if page_request.is_err():
            return page_request

        try:
            async with self.uow:
                result = await self.uow.node_assignments.list(
                    NodeAssignmentFilter(node_id=node_id), page_request.value
                )
        except STORE_ERRORS as e:
            logger.error(f"Failed to list node assignments: {e}")
            return Return.err(store_failure(e))

        return Return.ok(
            ListNodeAssignmentsResponseDTO(
                count=result.total_count,
                page=result.page,
                page_size=result.page_size,
                total_pages=result.total_pages,
                data=[to_node_assignment_dto(assignment) for assignment in result.items],
            )
        )
