"""
Bulk Replayable Use Case

Operator flags a selection of dead letters in one go. The batch is atomic:
either every update commits or none does.
"""
import logging
from typing import List
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import STORE_ERRORS, invalid_input, store_failure
from src.domain.envelope_key import EnvelopeKey, InvalidEnvelopeKey
from .dtos import BulkSetReplayableRequestDTO, BulkSetReplayableResponseDTO

logger = logging.getLogger(__name__)


class SetDeadLettersReplayableUseCase:
    """
    Use case: Set the replayable flag on many dead letters

    Keys that match no row are skipped; the returned count is the number of
    rows actually matched.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, request: BulkSetReplayableRequestDTO
    ) -> Result[BulkSetReplayableResponseDTO]:
        """
        Apply request.replayable to every listed dead letter

        Args:
            request: Composite keys and the flag to apply

        Returns:
            Result[BulkSetReplayableResponseDTO]: Matched row count or error
        """
        if not request.dead_letters:
            return Return.err(invalid_input("dead_letters list cannot be empty"))

        keys: List[EnvelopeKey] = []
        for identifier in request.dead_letters:
            try:
                keys.append(EnvelopeKey(id=identifier.id, received_at=identifier.received_at))
            except InvalidEnvelopeKey as e:
                return Return.err(invalid_input(f"Invalid dead letter {identifier.id}: {e}"))

        try:
            async with self.uow:
                updated = await self.uow.dead_letters.set_replayable_many(keys, request.replayable)
                await self.uow.commit()
        except STORE_ERRORS as e:
            # Leaving the unit of work rolled back the whole batch
            logger.error(f"Bulk replayable update of {len(keys)} dead letters failed: {e}")
            return Return.err(store_failure(e))

        logger.info(
            f"Bulk replayable={request.replayable}: {updated} of {len(keys)} dead letters matched"
        )
        return Return.ok(
            BulkSetReplayableResponseDTO(
                message=f"Updated {updated} dead letters successfully",
                count=updated,
                replayable=request.replayable,
            )
        )
