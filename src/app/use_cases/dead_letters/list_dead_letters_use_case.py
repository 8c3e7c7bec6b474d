"""
List Dead Letters Use Case

Operator browses failed messages with optional filters, one page at a time.
"""
import logging
from libs.result import Result, Return
from src.app.queries import DEFAULT_MAX_PAGE_SIZE, DeadLetterFilter, build_page_request
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import STORE_ERRORS, store_failure
from .dtos import DeadLetterFiltersDTO, ListDeadLettersResponseDTO, to_dead_letter_dto

logger = logging.getLogger(__name__)


class ListDeadLettersUseCase:
    """
    Use case: List Dead Letters

    Returns the requested page of dead letters, newest execution first, with
    the total count of matches and the full set of known message and
    exception types for the filter pickers.
    """

    def __init__(self, uow: UnitOfWork, max_page_size: int = DEFAULT_MAX_PAGE_SIZE):
        self.uow = uow
        self.max_page_size = max_page_size

    async def execute(
        self, filters: DeadLetterFilter, page: int = 1, page_size: int = 10
    ) -> Result[ListDeadLettersResponseDTO]:
        """
        List dead letters

        Args:
            filters: Optional filter criteria
            page: 1-indexed page number
            page_size: Rows per page

        Returns:
            Result[ListDeadLettersResponseDTO]: Page of dead letters plus facets
        """
        page_request = build_page_request(page, page_size, self.max_page_size)
        if page_request.is_err():
            return page_request

        try:
            async with self.uow:
                result = await self.uow.dead_letters.list(filters, page_request.value)
                facets = await self.uow.dead_letters.facets()
        except STORE_ERRORS as e:
            logger.error(f"Failed to list dead letters: {e}")
            return Return.err(store_failure(e))

        return Return.ok(
            ListDeadLettersResponseDTO(
                count=result.total_count,
                page=result.page,
                page_size=result.page_size,
                total_pages=result.total_pages,
                data=[to_dead_letter_dto(dead_letter) for dead_letter in result.items],
                filters=DeadLetterFiltersDTO(
                    message_types=facets.message_types,
                    exception_types=facets.exception_types,
                ),
            )
        )
