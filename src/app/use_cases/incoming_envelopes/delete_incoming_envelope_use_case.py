import logging
from uuid import UUID
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    INCOMING_ENVELOPE_NOT_FOUND,
    STORE_ERRORS,
    invalid_input,
    store_failure,
)
from src.domain.envelope_key import EnvelopeKey, InvalidEnvelopeKey
from .dtos import DeleteIncomingEnvelopeResponseDTO

logger = logging.getLogger(__name__)


class DeleteIncomingEnvelopeUseCase:
    """Use case for deleting an incoming envelope by (id, received_at)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, envelope_id: UUID, received_at: str
    ) -> Result[DeleteIncomingEnvelopeResponseDTO]:
        try:
            key = EnvelopeKey(id=envelope_id, received_at=received_at)
        except InvalidEnvelopeKey as e:
            return Return.err(invalid_input(str(e)))

        try:
            async with self.uow:
                deleted = await self.uow.incoming_envelopes.delete(key)
                await self.uow.commit()
        except STORE_ERRORS as e:
            logger.error(f"Failed to delete incoming envelope {envelope_id}: {e}")
            return Return.err(store_failure(e))

        if deleted == 0:
            return Return.err(
                Error(code=INCOMING_ENVELOPE_NOT_FOUND, message="Incoming envelope not found")
            )

        logger.info(f"Deleted incoming envelope {envelope_id} ({received_at})")
        return Return.ok(
            DeleteIncomingEnvelopeResponseDTO(message="Incoming envelope deleted successfully")
        )
