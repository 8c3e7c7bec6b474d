from src.domain.base import BaseModel, utcnow
from src.domain.envelope_key import EnvelopeKey, InvalidEnvelopeKey
from src.domain.message_body import decode_body, extract_json_body
from src.domain.dead_letter import DeadLetter
from src.domain.incoming_envelope import IncomingEnvelope
from src.domain.node import Node, DEFAULT_HEALTH_WINDOW
from src.domain.node_assignment import NodeAssignment

__all__ = [
    # Base
    "BaseModel",
    "utcnow",
    # Identity
    "EnvelopeKey",
    "InvalidEnvelopeKey",
    # Message body helpers
    "decode_body",
    "extract_json_body",
    # Entities
    "DeadLetter",
    "IncomingEnvelope",
    "Node",
    "DEFAULT_HEALTH_WINDOW",
    "NodeAssignment",
]
