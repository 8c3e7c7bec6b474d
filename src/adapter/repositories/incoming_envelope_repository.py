from typing import Optional
from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.queries import (
    INCOMING_ENVELOPE_COLUMNS,
    PaginatedQuery,
    distinct_values,
    incoming_envelope_predicates,
    map_incoming_envelope,
)
from src.app.queries import Facets, IncomingEnvelopeFilter, Page, PageRequest
from src.app.repositories.incoming_envelope_repository import IIncomingEnvelopeRepository
from src.domain.envelope_key import EnvelopeKey
from src.domain.incoming_envelope import IncomingEnvelope

incoming_envelopes = IncomingEnvelope.__table__

INCOMING_ENVELOPE_ORDER = (
    incoming_envelopes.c.execution_time.desc().nulls_last(),
    incoming_envelopes.c.id.asc(),
    incoming_envelopes.c.received_at.asc(),
)


def _matches(key: EnvelopeKey):
    return (incoming_envelopes.c.id == key.id) & (
        incoming_envelopes.c.received_at == key.received_at
    )


class IncomingEnvelopeRepository(IIncomingEnvelopeRepository):
    """SQLAlchemy implementation of IncomingEnvelope repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(
        self, filters: IncomingEnvelopeFilter, page_request: PageRequest
    ) -> Page[IncomingEnvelope]:
        return await PaginatedQuery(self.session).fetch(
            table=incoming_envelopes,
            columns=INCOMING_ENVELOPE_COLUMNS,
            predicates=incoming_envelope_predicates(filters),
            order_by=INCOMING_ENVELOPE_ORDER,
            page_request=page_request,
            mapper=map_incoming_envelope,
        )

    async def facets(self) -> Facets:
        return Facets(
            message_types=await distinct_values(self.session, incoming_envelopes.c.message_type),
            statuses=await distinct_values(self.session, incoming_envelopes.c.status),
        )

    async def get(self, key: EnvelopeKey) -> Optional[IncomingEnvelope]:
        stmt = select(*INCOMING_ENVELOPE_COLUMNS).where(_matches(key))
        result = await self.session.exec(stmt)
        row = result.first()
        return map_incoming_envelope(row) if row is not None else None

    async def delete(self, key: EnvelopeKey) -> int:
        result = await self.session.execute(delete(incoming_envelopes).where(_matches(key)))
        return result.rowcount

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(incoming_envelopes))
        return result.one()
