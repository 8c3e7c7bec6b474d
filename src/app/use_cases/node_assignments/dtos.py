from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel
from src.domain.node_assignment import NodeAssignment


class NodeAssignmentDTO(BaseModel):
    """Response DTO for a single node assignment"""

    id: str
    node_id: Optional[UUID] = None
    started: datetime


class ListNodeAssignmentsResponseDTO(BaseModel):
    count: int
    page: int
    page_size: int
    total_pages: int
    data: List[NodeAssignmentDTO]


class DeleteNodeAssignmentResponseDTO(BaseModel):
    message: str


def to_node_assignment_dto(assignment: NodeAssignment) -> NodeAssignmentDTO:
    return NodeAssignmentDTO(
        id=assignment.id,
        node_id=assignment.node_id,
        started=assignment.started,
    )
