from .list_node_assignments_use_case import ListNodeAssignmentsUseCase
from .get_node_assignment_use_case import GetNodeAssignmentUseCase
from .delete_node_assignment_use_case import DeleteNodeAssignmentUseCase
from .dtos import (
    NodeAssignmentDTO,
    ListNodeAssignmentsResponseDTO,
    DeleteNodeAssignmentResponseDTO,
)

__all__ = [
    "ListNodeAssignmentsUseCase",
    "GetNodeAssignmentUseCase",
    "DeleteNodeAssignmentUseCase",
    "NodeAssignmentDTO",
    "ListNodeAssignmentsResponseDTO",
    "DeleteNodeAssignmentResponseDTO",
]
