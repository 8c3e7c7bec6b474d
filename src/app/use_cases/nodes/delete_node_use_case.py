import logging
from uuid import UUID
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import NODE_NOT_FOUND, STORE_ERRORS, store_failure
from .dtos import DeleteNodeResponseDTO

logger = logging.getLogger(__name__)


class DeleteNodeUseCase:
    """
    Use case: Delete a node record

    Used to clean up rows left behind by nodes that died without
    deregistering. Assignments pointing at the node are left untouched.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, node_id: UUID) -> Result[DeleteNodeResponseDTO]:
        try:
            async with self.uow:
                deleted = await self.uow.nodes.delete(node_id)
                await self.uow.commit()
        except STORE_ERRORS as e:
            logger.error(f"Failed to delete node {node_id}: {e}")
            return Return.err(store_failure(e))

        if deleted == 0:
            return Return.err(Error(code=NODE_NOT_FOUND, message="Node not found"))

        logger.info(f"Deleted node {node_id}")
        return Return.ok(DeleteNodeResponseDTO(message="Node deleted successfully"))
