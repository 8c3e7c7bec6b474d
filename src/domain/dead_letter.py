"""Dead Letter Entity

A message whose processing failed permanently and was parked by the broker.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID
from sqlmodel import Field, Column
from sqlalchemy import DateTime, LargeBinary
from src.domain.base import BaseModel
from src.domain.envelope_key import EnvelopeKey
from src.domain.message_body import extract_json_body


class DeadLetter(BaseModel, table=True):
    """
    DeadLetter Entity

    Keyed by (id, received_at). The only field this service changes is
    replayable; the broker picks up replayable rows and redelivers them.
    """
    __tablename__ = "wolverine_dead_letters"

    # Composite identity
    id: UUID = Field(primary_key=True)
    received_at: str = Field(primary_key=True)

    # Message
    message_type: str = Field(nullable=False, index=True)
    body: bytes = Field(default=b"", sa_column=Column(LargeBinary, nullable=False))
    source: Optional[str] = Field(default=None)

    # Failure information
    exception_type: Optional[str] = Field(default=None)
    exception_message: Optional[str] = Field(default=None)

    # Timestamps
    execution_time: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )
    sent_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )

    # None means the broker never decided, which differs from False
    replayable: Optional[bool] = Field(default=None)

    @property
    def key(self) -> EnvelopeKey:
        return EnvelopeKey(id=self.id, received_at=self.received_at)

    @property
    def json_body(self) -> Optional[str]:
        return extract_json_body(self.body)
