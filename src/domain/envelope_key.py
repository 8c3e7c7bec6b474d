"""Composite identity shared by dead letters and incoming envelopes."""
from dataclasses import dataclass
from uuid import UUID


class InvalidEnvelopeKey(ValueError):
    pass


@dataclass(frozen=True)
class EnvelopeKey:
    """
    (id, received_at) pair addressing a single dead letter or incoming envelope.

    received_at is an opaque partition marker written by the broker, not a
    timestamp. The same id may appear under several received_at values, so
    both parts are always required.
    """

    id: UUID
    received_at: str

    def __post_init__(self):
        if not isinstance(self.id, UUID):
            raise InvalidEnvelopeKey("id must be a UUID")
        if not self.received_at:
            raise InvalidEnvelopeKey("received_at is required")
