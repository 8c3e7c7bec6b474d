import logging
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    NODE_ASSIGNMENT_NOT_FOUND,
    STORE_ERRORS,
    invalid_input,
    store_failure,
)
from .dtos import NodeAssignmentDTO, to_node_assignment_dto

logger = logging.getLogger(__name__)


class GetNodeAssignmentUseCase:
    """Use case for getting a single node assignment by ID"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, assignment_id: str) -> Result[NodeAssignmentDTO]:
        if not assignment_id:
            return Return.err(invalid_input("assignment id is required"))

        try:
            async with self.uow:
                assignment = await self.uow.node_assignments.get(assignment_id)
        except STORE_ERRORS as e:
            logger.error(f"Failed to get node assignment {assignment_id}: {e}")
            return Return.err(store_failure(e))

        if assignment is None:
            return Return.err(
                Error(code=NODE_ASSIGNMENT_NOT_FOUND, message="Node assignment not found")
            )

        return Return.ok(to_node_assignment_dto(assignment))
