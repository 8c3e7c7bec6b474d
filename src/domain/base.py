from datetime import datetime, timezone
from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Base for the persisted queue entities.

    The tables are owned by the message broker; this service only reads them
    and applies the few mutations the admin surface allows.
    """


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
