import pytest
from uuid import uuid4
from src.adapter.repositories import IncomingEnvelopeRepository
from src.app.queries import IncomingEnvelopeFilter, PageRequest
from src.domain import EnvelopeKey
from tests.fixtures.factories import make_incoming_envelope


@pytest.mark.asyncio
async def test_list_filters_by_status(db_session, seed):
    scheduled = make_incoming_envelope(status="Scheduled")
    await seed(scheduled, make_incoming_envelope(status="Incoming"))
    repo = IncomingEnvelopeRepository(db_session)

    page = await repo.list(IncomingEnvelopeFilter(status="Scheduled"), PageRequest())

    assert page.total_count == 1
    assert page.items[0].id == scheduled.id
    assert page.items[0].status == "Scheduled"


@pytest.mark.asyncio
async def test_empty_filter_values_are_ignored(db_session, seed):
    await seed(make_incoming_envelope(), make_incoming_envelope())
    repo = IncomingEnvelopeRepository(db_session)

    page = await repo.list(
        IncomingEnvelopeFilter(message_type="", status="", body_search=""), PageRequest()
    )

    assert page.total_count == 2


@pytest.mark.asyncio
async def test_facets_are_sorted_and_distinct(db_session, seed):
    await seed(
        make_incoming_envelope(status="Scheduled", message_type="Orders.Ship"),
        make_incoming_envelope(status="Incoming", message_type="Orders.Ship"),
        make_incoming_envelope(status="Incoming", message_type="Billing.Charge"),
    )
    repo = IncomingEnvelopeRepository(db_session)

    facets = await repo.facets()

    assert facets.message_types == ["Billing.Charge", "Orders.Ship"]
    assert facets.statuses == ["Incoming", "Scheduled"]


@pytest.mark.asyncio
async def test_delete_requires_full_key(session_factory, seed):
    shared_id = uuid4()
    await seed(
        make_incoming_envelope(id=shared_id, received_at="node-1"),
        make_incoming_envelope(id=shared_id, received_at="node-2"),
    )

    async with session_factory() as session:
        repo = IncomingEnvelopeRepository(session)
        deleted = await repo.delete(EnvelopeKey(id=shared_id, received_at="node-2"))
        await session.commit()

    assert deleted == 1
    async with session_factory() as session:
        assert await IncomingEnvelopeRepository(session).count() == 1
