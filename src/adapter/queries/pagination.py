import logging
from typing import Any, Callable, Sequence, TypeVar
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.queries.predicates import PredicateBuilder
from src.app.queries import Page, PageRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginatedQuery:
    """
    Count plus bounded select over one table.

    Both statements share the same predicates, so total_count always describes
    the filtered set while items only covers the requested window.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch(
        self,
        table,
        columns: Sequence[Any],
        predicates: PredicateBuilder,
        order_by: Sequence[Any],
        page_request: PageRequest,
        mapper: Callable[[Any], T],
    ) -> Page[T]:
        count_query = predicates.apply(select(func.count()).select_from(table))
        total_result = await self.session.exec(count_query)
        total_count = total_result.one()

        query = (
            predicates.apply(select(*columns).select_from(table))
            .order_by(*order_by)
            .limit(page_request.limit)
            .offset(page_request.offset)
        )
        result = await self.session.exec(query)
        items = [mapper(row) for row in result.all()]

        logger.debug(
            f"{table.name}: {len(predicates)} filters, page {page_request.page}, "
            f"{len(items)} of {total_count} rows"
        )

        return Page(
            items=items,
            total_count=total_count,
            page=page_request.page,
            page_size=page_request.page_size,
        )
