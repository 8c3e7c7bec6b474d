from src.adapter.queries.mappers import (
    dead_letters,
    incoming_envelopes,
    nodes,
    node_assignments,
)
from src.adapter.queries.predicates import PredicateBuilder
from src.app.queries import (
    DeadLetterFilter,
    IncomingEnvelopeFilter,
    NodeFilter,
    NodeAssignmentFilter,
)


def dead_letter_predicates(filters: DeadLetterFilter) -> PredicateBuilder:
    # Date range applies to when the failed message was originally sent
    return (
        PredicateBuilder()
        .equals(dead_letters.c.message_type, filters.message_type)
        .equals(dead_letters.c.exception_type, filters.exception_type)
        .contains_text(dead_letters.c.body, filters.body_search)
        .at_least(dead_letters.c.sent_at, filters.start_date)
        .at_most(dead_letters.c.sent_at, filters.end_date)
    )


def incoming_envelope_predicates(filters: IncomingEnvelopeFilter) -> PredicateBuilder:
    return (
        PredicateBuilder()
        .equals(incoming_envelopes.c.message_type, filters.message_type)
        .equals(incoming_envelopes.c.status, filters.status)
        .contains_text(incoming_envelopes.c.body, filters.body_search)
        .at_least(incoming_envelopes.c.execution_time, filters.start_date)
        .at_most(incoming_envelopes.c.execution_time, filters.end_date)
    )


def node_predicates(filters: NodeFilter) -> PredicateBuilder:
    return PredicateBuilder().newer_than(nodes.c.health_check, filters.active_since)


def node_assignment_predicates(filters: NodeAssignmentFilter) -> PredicateBuilder:
    return PredicateBuilder().equals(node_assignments.c.node_id, filters.node_id)
