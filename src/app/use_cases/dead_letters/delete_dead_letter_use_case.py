import logging
from uuid import UUID
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    DEAD_LETTER_NOT_FOUND,
    STORE_ERRORS,
    invalid_input,
    store_failure,
)
from src.domain.envelope_key import EnvelopeKey, InvalidEnvelopeKey
from .dtos import DeleteDeadLetterResponseDTO

logger = logging.getLogger(__name__)


class DeleteDeadLetterUseCase:
    """Use case for discarding a dead letter. Requires the full composite key."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, dead_letter_id: UUID, received_at: str
    ) -> Result[DeleteDeadLetterResponseDTO]:
        try:
            key = EnvelopeKey(id=dead_letter_id, received_at=received_at)
        except InvalidEnvelopeKey as e:
            return Return.err(invalid_input(str(e)))

        try:
            async with self.uow:
                deleted = await self.uow.dead_letters.delete(key)
                await self.uow.commit()
        except STORE_ERRORS as e:
            logger.error(f"Failed to delete dead letter {dead_letter_id}: {e}")
            return Return.err(store_failure(e))

        if deleted == 0:
            return Return.err(Error(code=DEAD_LETTER_NOT_FOUND, message="Dead letter not found"))

        logger.info(f"Deleted dead letter {dead_letter_id} ({received_at})")
        return Return.ok(DeleteDeadLetterResponseDTO(message="Dead letter deleted successfully"))
