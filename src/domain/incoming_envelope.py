"""Incoming Envelope Entity

A message received by a node and persisted before it is handled.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID
from sqlmodel import Field, Column
from sqlalchemy import DateTime, LargeBinary
from src.domain.base import BaseModel
from src.domain.envelope_key import EnvelopeKey


class IncomingEnvelope(BaseModel, table=True):
    """IncomingEnvelope Entity, keyed by (id, received_at)"""
    __tablename__ = "wolverine_incoming_envelopes"

    id: UUID = Field(primary_key=True)
    received_at: str = Field(primary_key=True)

    # Processing state, e.g. Incoming / Scheduled / Handled
    status: str = Field(nullable=False, index=True)
    owner_id: int = Field(nullable=False)
    attempts: int = Field(default=0, nullable=False)

    message_type: str = Field(nullable=False)
    body: bytes = Field(default=b"", sa_column=Column(LargeBinary, nullable=False))

    execution_time: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )
    keep_until: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )

    @property
    def key(self) -> EnvelopeKey:
        return EnvelopeKey(id=self.id, received_at=self.received_at)
