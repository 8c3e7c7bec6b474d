"""Row to entity mappers.

Each mapper reads a row positionally, in the order of the column tuple
declared next to it, and never touches the database.
"""
from src.domain.dead_letter import DeadLetter
from src.domain.incoming_envelope import IncomingEnvelope
from src.domain.node import Node
from src.domain.node_assignment import NodeAssignment

dead_letters = DeadLetter.__table__
incoming_envelopes = IncomingEnvelope.__table__
nodes = Node.__table__
node_assignments = NodeAssignment.__table__


DEAD_LETTER_COLUMNS = (
    dead_letters.c.id,
    dead_letters.c.execution_time,
    dead_letters.c.body,
    dead_letters.c.message_type,
    dead_letters.c.received_at,
    dead_letters.c.source,
    dead_letters.c.exception_type,
    dead_letters.c.exception_message,
    dead_letters.c.sent_at,
    dead_letters.c.replayable,
)


def map_dead_letter(row) -> DeadLetter:
    return DeadLetter(
        id=row[0],
        execution_time=row[1],
        body=_as_bytes(row[2]),
        message_type=row[3],
        received_at=row[4],
        source=row[5],
        exception_type=row[6],
        exception_message=row[7],
        sent_at=row[8],
        replayable=row[9],
    )


INCOMING_ENVELOPE_COLUMNS = (
    incoming_envelopes.c.id,
    incoming_envelopes.c.status,
    incoming_envelopes.c.owner_id,
    incoming_envelopes.c.execution_time,
    incoming_envelopes.c.attempts,
    incoming_envelopes.c.body,
    incoming_envelopes.c.message_type,
    incoming_envelopes.c.received_at,
    incoming_envelopes.c.keep_until,
)


def map_incoming_envelope(row) -> IncomingEnvelope:
    return IncomingEnvelope(
        id=row[0],
        status=row[1],
        owner_id=row[2],
        execution_time=row[3],
        attempts=row[4],
        body=_as_bytes(row[5]),
        message_type=row[6],
        received_at=row[7],
        keep_until=row[8],
    )


NODE_COLUMNS = (
    nodes.c.id,
    nodes.c.node_number,
    nodes.c.description,
    nodes.c.uri,
    nodes.c.started,
    nodes.c.health_check,
    nodes.c.capabilities,
)


def map_node(row) -> Node:
    return Node(
        id=row[0],
        node_number=row[1],
        description=row[2],
        uri=row[3],
        started=row[4],
        health_check=row[5],
        capabilities=list(row[6]) if row[6] is not None else None,
    )


NODE_ASSIGNMENT_COLUMNS = (
    node_assignments.c.id,
    node_assignments.c.node_id,
    node_assignments.c.started,
)


def map_node_assignment(row) -> NodeAssignment:
    return NodeAssignment(id=row[0], node_id=row[1], started=row[2])


def _as_bytes(value) -> bytes:
    # asyncpg returns bytes, some drivers return memoryview
    if value is None:
        return b""
    return bytes(value)
