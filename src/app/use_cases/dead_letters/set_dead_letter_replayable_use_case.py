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
from .dtos import SetReplayableResponseDTO

logger = logging.getLogger(__name__)


class SetDeadLetterReplayableUseCase:
    """
    Use case: Mark a single dead letter as replayable (or not)

    Setting the flag to the value it already has still counts as a match.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, dead_letter_id: UUID, received_at: str, replayable: bool
    ) -> Result[SetReplayableResponseDTO]:
        try:
            key = EnvelopeKey(id=dead_letter_id, received_at=received_at)
        except InvalidEnvelopeKey as e:
            return Return.err(invalid_input(str(e)))

        try:
            async with self.uow:
                updated = await self.uow.dead_letters.set_replayable(key, replayable)
                await self.uow.commit()
        except STORE_ERRORS as e:
            logger.error(f"Failed to update dead letter {dead_letter_id}: {e}")
            return Return.err(store_failure(e))

        if updated == 0:
            return Return.err(Error(code=DEAD_LETTER_NOT_FOUND, message="Dead letter not found"))

        logger.info(f"Dead letter {dead_letter_id} ({received_at}) replayable={replayable}")
        return Return.ok(
            SetReplayableResponseDTO(
                message="Dead letter updated successfully", replayable=replayable
            )
        )
