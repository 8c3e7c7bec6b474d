from src.app.repositories.dead_letter_repository import IDeadLetterRepository
from src.app.repositories.incoming_envelope_repository import IIncomingEnvelopeRepository
from src.app.repositories.node_repository import INodeRepository
from src.app.repositories.node_assignment_repository import INodeAssignmentRepository

__all__ = [
    "IDeadLetterRepository",
    "IIncomingEnvelopeRepository",
    "INodeRepository",
    "INodeAssignmentRepository",
]
