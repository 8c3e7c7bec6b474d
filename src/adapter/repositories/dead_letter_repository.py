"""Dead Letter Repository Implementation

SQLAlchemy implementation over the broker's dead letter table.
"""
import logging
from typing import List, Optional
from sqlalchemy import delete, func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.queries import (
    DEAD_LETTER_COLUMNS,
    PaginatedQuery,
    dead_letter_predicates,
    distinct_values,
    map_dead_letter,
)
from src.app.queries import DeadLetterFilter, Facets, Page, PageRequest
from src.app.repositories.dead_letter_repository import IDeadLetterRepository
from src.domain.dead_letter import DeadLetter
from src.domain.envelope_key import EnvelopeKey

logger = logging.getLogger(__name__)

dead_letters = DeadLetter.__table__

DEAD_LETTER_ORDER = (
    dead_letters.c.execution_time.desc().nulls_last(),
    dead_letters.c.id.asc(),
    dead_letters.c.received_at.asc(),
)


def _matches(key: EnvelopeKey):
    return (dead_letters.c.id == key.id) & (dead_letters.c.received_at == key.received_at)


class DeadLetterRepository(IDeadLetterRepository):
    """SQLAlchemy implementation of DeadLetter repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self, filters: DeadLetterFilter, page_request: PageRequest) -> Page[DeadLetter]:
        return await PaginatedQuery(self.session).fetch(
            table=dead_letters,
            columns=DEAD_LETTER_COLUMNS,
            predicates=dead_letter_predicates(filters),
            order_by=DEAD_LETTER_ORDER,
            page_request=page_request,
            mapper=map_dead_letter,
        )

    async def facets(self) -> Facets:
        return Facets(
            message_types=await distinct_values(self.session, dead_letters.c.message_type),
            exception_types=await distinct_values(self.session, dead_letters.c.exception_type),
        )

    async def get(self, key: EnvelopeKey) -> Optional[DeadLetter]:
        stmt = select(*DEAD_LETTER_COLUMNS).where(_matches(key))
        result = await self.session.exec(stmt)
        row = result.first()
        return map_dead_letter(row) if row is not None else None

    async def set_replayable(self, key: EnvelopeKey, replayable: bool) -> int:
        stmt = update(dead_letters).where(_matches(key)).values(replayable=replayable)
        result = await self.session.execute(stmt)
        return result.rowcount

    async def set_replayable_many(self, keys: List[EnvelopeKey], replayable: bool) -> int:
        # A key listed twice still addresses one row
        unique_keys = list(dict.fromkeys(keys))
        total_updated = 0
        for key in unique_keys:
            total_updated += await self.set_replayable(key, replayable)
        logger.debug(
            f"Replayable={replayable} matched {total_updated} of {len(unique_keys)} dead letters"
        )
        return total_updated

    async def delete(self, key: EnvelopeKey) -> int:
        stmt = delete(dead_letters).where(_matches(key))
        result = await self.session.execute(stmt)
        return result.rowcount

    async def count(self, replayable_only: bool = False) -> int:
        stmt = select(func.count()).select_from(dead_letters)
        if replayable_only:
            stmt = stmt.where(dead_letters.c.replayable.is_(True))
        result = await self.session.exec(stmt)
        return result.one()
