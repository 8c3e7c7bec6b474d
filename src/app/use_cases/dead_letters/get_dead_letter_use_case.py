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
from .dtos import DeadLetterDTO, to_dead_letter_dto

logger = logging.getLogger(__name__)


class GetDeadLetterUseCase:
    """Use case for getting a single dead letter by (id, received_at)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, dead_letter_id: UUID, received_at: str) -> Result[DeadLetterDTO]:
        try:
            key = EnvelopeKey(id=dead_letter_id, received_at=received_at)
        except InvalidEnvelopeKey as e:
            return Return.err(invalid_input(str(e)))

        try:
            async with self.uow:
                dead_letter = await self.uow.dead_letters.get(key)
        except STORE_ERRORS as e:
            logger.error(f"Failed to get dead letter {dead_letter_id}: {e}")
            return Return.err(store_failure(e))

        if dead_letter is None:
            return Return.err(Error(code=DEAD_LETTER_NOT_FOUND, message="Dead letter not found"))

        return Return.ok(to_dead_letter_dto(dead_letter))
