"""Node Entity

A running broker process. Nodes write their own row on startup and refresh
health_check on every heartbeat.
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from uuid import UUID
from sqlmodel import Field, Column
from sqlalchemy import ARRAY, JSON, DateTime, String
from src.domain.base import BaseModel

DEFAULT_HEALTH_WINDOW = timedelta(minutes=5)


class Node(BaseModel, table=True):
    """Node Entity"""
    __tablename__ = "wolverine_nodes"

    id: UUID = Field(primary_key=True)
    node_number: int = Field(nullable=False)
    description: str = Field(nullable=False)
    uri: str = Field(nullable=False)

    started: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    health_check: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))

    # text[] on PostgreSQL
    capabilities: Optional[List[str]] = Field(
        default=None,
        sa_column=Column(ARRAY(String).with_variant(JSON(), "sqlite"), nullable=True),
    )

    def is_active(self, now: datetime, window: timedelta = DEFAULT_HEALTH_WINDOW) -> bool:
        """Check if the last heartbeat falls inside the freshness window"""
        return _as_utc(self.health_check) > _as_utc(now) - window


def _as_utc(value: datetime) -> datetime:
    # Drivers without timezone support hand back naive UTC values
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
