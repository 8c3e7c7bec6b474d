from src.adapter.repositories.dead_letter_repository import DeadLetterRepository
from src.adapter.repositories.incoming_envelope_repository import IncomingEnvelopeRepository
from src.adapter.repositories.node_repository import NodeRepository
from src.adapter.repositories.node_assignment_repository import NodeAssignmentRepository

__all__ = [
    "DeadLetterRepository",
    "IncomingEnvelopeRepository",
    "NodeRepository",
    "NodeAssignmentRepository",
]
