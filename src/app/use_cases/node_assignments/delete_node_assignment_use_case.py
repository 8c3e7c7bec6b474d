import logging
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    NODE_ASSIGNMENT_NOT_FOUND,
    STORE_ERRORS,
    invalid_input,
    store_failure,
)
from .dtos import DeleteNodeAssignmentResponseDTO

logger = logging.getLogger(__name__)


class DeleteNodeAssignmentUseCase:
    """Use case for releasing a node assignment"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, assignment_id: str) -> Result[DeleteNodeAssignmentResponseDTO]:
        if not assignment_id:
            return Return.err(invalid_input("assignment id is required"))

        try:
            async with self.uow:
                deleted = await self.uow.node_assignments.delete(assignment_id)
                await self.uow.commit()
        except STORE_ERRORS as e:
            logger.error(f"Failed to delete node assignment {assignment_id}: {e}")
            return Return.err(store_failure(e))

        if deleted == 0:
            return Return.err(
                Error(code=NODE_ASSIGNMENT_NOT_FOUND, message="Node assignment not found")
            )

        logger.info(f"Deleted node assignment {assignment_id}")
        return Return.ok(
            DeleteNodeAssignmentResponseDTO(message="Node assignment deleted successfully")
        )
