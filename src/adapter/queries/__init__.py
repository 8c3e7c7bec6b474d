from src.adapter.queries.predicates import PredicateBuilder
from src.adapter.queries.pagination import PaginatedQuery
from src.adapter.queries.facets import distinct_values
from src.adapter.queries.mappers import (
    DEAD_LETTER_COLUMNS,
    INCOMING_ENVELOPE_COLUMNS,
    NODE_COLUMNS,
    NODE_ASSIGNMENT_COLUMNS,
    map_dead_letter,
    map_incoming_envelope,
    map_node,
    map_node_assignment,
)
from src.adapter.queries.filters import (
    dead_letter_predicates,
    incoming_envelope_predicates,
    node_predicates,
    node_assignment_predicates,
)

__all__ = [
    "PredicateBuilder",
    "PaginatedQuery",
    "distinct_values",
    "DEAD_LETTER_COLUMNS",
    "INCOMING_ENVELOPE_COLUMNS",
    "NODE_COLUMNS",
    "NODE_ASSIGNMENT_COLUMNS",
    "map_dead_letter",
    "map_incoming_envelope",
    "map_node",
    "map_node_assignment",
    "dead_letter_predicates",
    "incoming_envelope_predicates",
    "node_predicates",
    "node_assignment_predicates",
]
