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
from .dtos import IncomingEnvelopeDTO, to_incoming_envelope_dto

logger = logging.getLogger(__name__)


class GetIncomingEnvelopeUseCase:
    """Use case for getting a single incoming envelope by (id, received_at)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, envelope_id: UUID, received_at: str) -> Result[IncomingEnvelopeDTO]:
        try:
            key = EnvelopeKey(id=envelope_id, received_at=received_at)
        except InvalidEnvelopeKey as e:
            return Return.err(invalid_input(str(e)))

        try:
            async with self.uow:
                envelope = await self.uow.incoming_envelopes.get(key)
        except STORE_ERRORS as e:
            logger.error(f"Failed to get incoming envelope {envelope_id}: {e}")
            return Return.err(store_failure(e))

        if envelope is None:
            return Return.err(
                Error(code=INCOMING_ENVELOPE_NOT_FOUND, message="Incoming envelope not found")
            )

        return Return.ok(to_incoming_envelope_dto(envelope))
