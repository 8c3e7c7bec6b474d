"""Node Assignment Entity

Records which node currently owns a queue or agent. node_id is None while the
assignment is unclaimed.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID
from sqlmodel import Field, Column
from sqlalchemy import DateTime
from src.domain.base import BaseModel


class NodeAssignment(BaseModel, table=True):
    __tablename__ = "wolverine_node_assignments"

    # Assignment identifier such as "wolverine://durable/queue", not a UUID
    id: str = Field(primary_key=True)
    node_id: Optional[UUID] = Field(default=None)
    started: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
