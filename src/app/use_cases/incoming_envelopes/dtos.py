import base64
from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel
from src.domain.incoming_envelope import IncomingEnvelope


class IncomingEnvelopeDTO(BaseModel):
    """Response DTO for a single incoming envelope"""

    id: UUID
    received_at: str
    status: str
    owner_id: int
    attempts: int
    message_type: str
    execution_time: Optional[datetime] = None
    keep_until: Optional[datetime] = None
    body: str


class IncomingEnvelopeFiltersDTO(BaseModel):
    message_types: List[str]
    statuses: List[str]


class ListIncomingEnvelopesResponseDTO(BaseModel):
    """Response DTO for listing incoming envelopes"""

    count: int
    page: int
    page_size: int
    total_pages: int
    data: List[IncomingEnvelopeDTO]
    filters: IncomingEnvelopeFiltersDTO


class DeleteIncomingEnvelopeResponseDTO(BaseModel):
    message: str


def to_incoming_envelope_dto(envelope: IncomingEnvelope) -> IncomingEnvelopeDTO:
    return IncomingEnvelopeDTO(
        id=envelope.id,
        received_at=envelope.received_at,
        status=envelope.status,
        owner_id=envelope.owner_id,
        attempts=envelope.attempts,
        message_type=envelope.message_type,
        execution_time=envelope.execution_time,
        keep_until=envelope.keep_until,
        body=base64.b64encode(envelope.body or b"").decode("ascii"),
    )
