import base64
from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel
from src.domain.dead_letter import DeadLetter


class DeadLetterDTO(BaseModel):
    """Response DTO for a single dead letter"""

    id: UUID
    received_at: str
    message_type: str
    execution_time: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    source: Optional[str] = None
    exception_type: Optional[str] = None
    exception_message: Optional[str] = None
    replayable: Optional[bool] = None
    # Base64 of the raw serialized envelope
    body: str
    json_body: Optional[str] = None


class DeadLetterFiltersDTO(BaseModel):
    """Known filter values across every dead letter"""

    message_types: List[str]
    exception_types: List[str]


class ListDeadLettersResponseDTO(BaseModel):
    """Response DTO for listing dead letters"""

    count: int
    page: int
    page_size: int
    total_pages: int
    data: List[DeadLetterDTO]
    filters: DeadLetterFiltersDTO


class DeadLetterIdentifierDTO(BaseModel):
    id: UUID
    received_at: str


class SetReplayableRequestDTO(BaseModel):
    """Request DTO for flagging a single dead letter"""

    replayable: bool


class SetReplayableResponseDTO(BaseModel):
    message: str
    replayable: bool


class BulkSetReplayableRequestDTO(BaseModel):
    """Request DTO for flagging several dead letters in one transaction"""

    dead_letters: List[DeadLetterIdentifierDTO] = []
    replayable: bool


class BulkSetReplayableResponseDTO(BaseModel):
    message: str
    count: int
    replayable: bool


class DeleteDeadLetterResponseDTO(BaseModel):
    message: str


def to_dead_letter_dto(dead_letter: DeadLetter) -> DeadLetterDTO:
    return DeadLetterDTO(
        id=dead_letter.id,
        received_at=dead_letter.received_at,
        message_type=dead_letter.message_type,
        execution_time=dead_letter.execution_time,
        sent_at=dead_letter.sent_at,
        source=dead_letter.source,
        exception_type=dead_letter.exception_type,
        exception_message=dead_letter.exception_message,
        replayable=dead_letter.replayable,
        body=base64.b64encode(dead_letter.body or b"").decode("ascii"),
        json_body=dead_letter.json_body,
    )
