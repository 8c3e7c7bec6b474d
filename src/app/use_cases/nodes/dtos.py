from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel


class NodeDTO(BaseModel):
    """Response DTO for a single node"""

    id: UUID
    node_number: int
    description: str
    uri: str
    started: datetime
    health_check: datetime
    capabilities: Optional[List[str]] = None
    # Derived from health_check at request time
    is_active: bool


class ListNodesResponseDTO(BaseModel):
    count: int
    page: int
    page_size: int
    total_pages: int
    data: List[NodeDTO]


class DeleteNodeResponseDTO(BaseModel):
    message: str
