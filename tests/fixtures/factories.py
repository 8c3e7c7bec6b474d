"""Row builders for seeding the message store in tests."""
from datetime import timedelta
from typing import Optional
from uuid import UUID, uuid4
from src.domain import DeadLetter, IncomingEnvelope, Node, NodeAssignment, utcnow


def make_dead_letter(
    id: Optional[UUID] = None,
    received_at: str = "node-1",
    message_type: str = "Orders.PlaceOrder",
    exception_type: Optional[str] = "System.InvalidOperationException",
    body: bytes = b'{"orderId":"A-1"}',
    minutes_ago: Optional[int] = 1,
    replayable: Optional[bool] = False,
) -> DeadLetter:
    now = utcnow()
    return DeadLetter(
        id=id or uuid4(),
        received_at=received_at,
        message_type=message_type,
        body=body,
        source="orders-service",
        exception_type=exception_type,
        exception_message="Order could not be placed" if exception_type else None,
        execution_time=now - timedelta(minutes=minutes_ago) if minutes_ago is not None else None,
        sent_at=now - timedelta(minutes=minutes_ago) if minutes_ago is not None else None,
        replayable=replayable,
    )


def make_incoming_envelope(
    id: Optional[UUID] = None,
    received_at: str = "node-1",
    status: str = "Incoming",
    message_type: str = "Orders.PlaceOrder",
    body: bytes = b'{"orderId":"A-1"}',
    minutes_ago: Optional[int] = 1,
) -> IncomingEnvelope:
    now = utcnow()
    return IncomingEnvelope(
        id=id or uuid4(),
        received_at=received_at,
        status=status,
        owner_id=1,
        attempts=0,
        message_type=message_type,
        body=body,
        execution_time=now - timedelta(minutes=minutes_ago) if minutes_ago is not None else None,
        keep_until=None,
    )


def make_node(
    id: Optional[UUID] = None,
    node_number: int = 1,
    heartbeat_minutes_ago: int = 1,
) -> Node:
    now = utcnow()
    return Node(
        id=id or uuid4(),
        node_number=node_number,
        description=f"worker-{node_number}",
        uri=f"tcp://worker-{node_number}:5000",
        started=now - timedelta(hours=1),
        health_check=now - timedelta(minutes=heartbeat_minutes_ago),
        capabilities=["durable://orders"],
    )


def make_node_assignment(
    id: str = "agent-1",
    node_id: Optional[UUID] = None,
    minutes_ago: int = 1,
) -> NodeAssignment:
    return NodeAssignment(
        id=id,
        node_id=node_id,
        started=utcnow() - timedelta(minutes=minutes_ago),
    )
