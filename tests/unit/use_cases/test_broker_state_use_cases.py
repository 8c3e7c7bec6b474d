"""
Unit tests for the dashboard, node, node assignment and incoming envelope use cases
"""
import pytest
from datetime import datetime, timedelta, timezone
from uuid import uuid4
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import OperationalError
from src.app.queries import Facets, IncomingEnvelopeFilter, Page
from src.app.use_cases.dashboard import GetDashboardStatsUseCase
from src.app.use_cases.incoming_envelopes import (
    DeleteIncomingEnvelopeUseCase,
    ListIncomingEnvelopesUseCase,
)
from src.app.use_cases.node_assignments import (
    DeleteNodeAssignmentUseCase,
    GetNodeAssignmentUseCase,
    ListNodeAssignmentsUseCase,
)
from src.app.use_cases.nodes import DeleteNodeUseCase, GetNodeUseCase, ListNodesUseCase
from src.domain import IncomingEnvelope, Node

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_uow():
    """Create a mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.dead_letters = MagicMock()
    uow.incoming_envelopes = MagicMock()
    uow.nodes = MagicMock()
    uow.node_assignments = MagicMock()
    return uow


def make_node(minutes_since_heartbeat: int) -> Node:
    return Node(
        id=uuid4(),
        node_number=1,
        description="worker-1",
        uri="tcp://worker-1:5000",
        started=NOW - timedelta(hours=1),
        health_check=NOW - timedelta(minutes=minutes_since_heartbeat),
    )


@pytest.mark.asyncio
async def test_dashboard_stats(mock_uow):
    # Arrange
    mock_uow.dead_letters.count = AsyncMock(side_effect=[10, 4])
    mock_uow.incoming_envelopes.count = AsyncMock(return_value=7)
    mock_uow.nodes.count_active = AsyncMock(return_value=2)
    use_case = GetDashboardStatsUseCase(mock_uow, clock=lambda: NOW)

    # Act
    result = await use_case.execute()

    # Assert
    assert result.is_ok()
    assert result.value.total_dead_letters == 10
    assert result.value.replayable_dead_letters == 4
    assert result.value.total_incoming_envelopes == 7
    assert result.value.active_nodes == 2
    assert result.value.timestamp == NOW
    mock_uow.nodes.count_active.assert_awaited_once_with(since=NOW - timedelta(minutes=5))


@pytest.mark.asyncio
async def test_dashboard_stats_store_failure(mock_uow):
    mock_uow.dead_letters.count = AsyncMock(
        side_effect=OperationalError("SELECT count(*)", {}, Exception("timeout"))
    )
    use_case = GetDashboardStatsUseCase(mock_uow, clock=lambda: NOW)

    result = await use_case.execute()

    assert result.is_err()
    assert result.error.code == "STORE_FAILURE"


@pytest.mark.asyncio
async def test_list_nodes_active_only_filters_by_window(mock_uow):
    # Arrange
    mock_uow.nodes.list = AsyncMock(
        return_value=Page(items=[make_node(4)], total_count=1, page=1, page_size=10)
    )
    use_case = ListNodesUseCase(mock_uow, health_window=timedelta(minutes=5), clock=lambda: NOW)

    # Act
    result = await use_case.execute(active_only=True)

    # Assert
    assert result.is_ok()
    filters, _ = mock_uow.nodes.list.call_args.args
    assert filters.active_since == NOW - timedelta(minutes=5)
    assert result.value.data[0].is_active is True


@pytest.mark.asyncio
async def test_list_nodes_reports_stale_nodes_as_inactive(mock_uow):
    mock_uow.nodes.list = AsyncMock(
        return_value=Page(items=[make_node(6)], total_count=1, page=1, page_size=10)
    )
    use_case = ListNodesUseCase(mock_uow, clock=lambda: NOW)

    result = await use_case.execute()

    filters, _ = mock_uow.nodes.list.call_args.args
    assert filters.active_since is None
    assert result.value.data[0].is_active is False


@pytest.mark.asyncio
async def test_get_node_not_found(mock_uow):
    mock_uow.nodes.get = AsyncMock(return_value=None)
    use_case = GetNodeUseCase(mock_uow, clock=lambda: NOW)

    result = await use_case.execute(uuid4())

    assert result.is_err()
    assert result.error.code == "NODE_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_node(mock_uow):
    mock_uow.nodes.delete = AsyncMock(return_value=1)
    use_case = DeleteNodeUseCase(mock_uow)

    result = await use_case.execute(uuid4())

    assert result.is_ok()
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_list_node_assignments_passes_node_filter(mock_uow):
    node_id = uuid4()
    mock_uow.node_assignments.list = AsyncMock(return_value=Page(items=[], total_count=0))
    use_case = ListNodeAssignmentsUseCase(mock_uow)

    result = await use_case.execute(node_id=node_id)

    assert result.is_ok()
    assert result.value.total_pages == 0
    filters, _ = mock_uow.node_assignments.list.call_args.args
    assert filters.node_id == node_id


@pytest.mark.asyncio
async def test_get_node_assignment_requires_id(mock_uow):
    use_case = GetNodeAssignmentUseCase(mock_uow)

    result = await use_case.execute("")

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_delete_node_assignment_not_found(mock_uow):
    mock_uow.node_assignments.delete = AsyncMock(return_value=0)
    use_case = DeleteNodeAssignmentUseCase(mock_uow)

    result = await use_case.execute("agent-1")

    assert result.is_err()
    assert result.error.code == "NODE_ASSIGNMENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_incoming_envelopes(mock_uow):
    # Arrange
    envelope = IncomingEnvelope(
        id=uuid4(),
        received_at="node-1",
        status="Scheduled",
        owner_id=0,
        attempts=2,
        message_type="Orders.Ship",
        body=b"\x00\x01",
    )
    mock_uow.incoming_envelopes.list = AsyncMock(
        return_value=Page(items=[envelope], total_count=1, page=1, page_size=10)
    )
    mock_uow.incoming_envelopes.facets = AsyncMock(
        return_value=Facets(message_types=["Orders.Ship"], statuses=["Scheduled"])
    )
    use_case = ListIncomingEnvelopesUseCase(mock_uow)

    # Act
    result = await use_case.execute(IncomingEnvelopeFilter(status="Scheduled"))

    # Assert
    assert result.is_ok()
    assert result.value.data[0].body == "AAE="
    assert result.value.filters.statuses == ["Scheduled"]


@pytest.mark.asyncio
async def test_delete_incoming_envelope_requires_received_at(mock_uow):
    mock_uow.incoming_envelopes.delete = AsyncMock()
    use_case = DeleteIncomingEnvelopeUseCase(mock_uow)

    result = await use_case.execute(uuid4(), "")

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"
    mock_uow.incoming_envelopes.delete.assert_not_called()
