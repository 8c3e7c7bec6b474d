import logging
from libs.result import Result, Return
from src.app.queries import DEFAULT_MAX_PAGE_SIZE, IncomingEnvelopeFilter, build_page_request
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import STORE_ERRORS, store_failure
from .dtos import (
    IncomingEnvelopeFiltersDTO,
    ListIncomingEnvelopesResponseDTO,
    to_incoming_envelope_dto,
)

logger = logging.getLogger(__name__)


class ListIncomingEnvelopesUseCase:
    """
    Use case: List Incoming Envelopes

    Same paging contract as dead letters; facets are message types and
    statuses.
    """

    def __init__(self, uow: UnitOfWork, max_page_size: int = DEFAULT_MAX_PAGE_SIZE):
        self.uow = uow
        self.max_page_size = max_page_size

    async def execute(
        self, filters: IncomingEnvelopeFilter, page: int = 1, page_size: int = 10
    ) -> Result[ListIncomingEnvelopesResponseDTO]:
        page_request = build_page_request(page, page_size, self.max_page_size)
        if page_request.is_err():
            return page_request

        try:
            async with self.uow:
                result = await self.uow.incoming_envelopes.list(filters, page_request.value)
                facets = await self.uow.incoming_envelopes.facets()
        except STORE_ERRORS as e:
            logger.error(f"Failed to list incoming envelopes: {e}")
            return Return.err(store_failure(e))

        return Return.ok(
            ListIncomingEnvelopesResponseDTO(
                count=result.total_count,
                page=result.page,
                page_size=result.page_size,
                total_pages=result.total_pages,
                data=[to_incoming_envelope_dto(envelope) for envelope in result.items],
                filters=IncomingEnvelopeFiltersDTO(
                    message_types=facets.message_types,
                    statuses=facets.statuses,
                ),
            )
        )
