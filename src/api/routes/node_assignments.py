from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.node_assignments import (
    ListNodeAssignmentsUseCase,
    ListNodeAssignmentsResponseDTO,
    GetNodeAssignmentUseCase,
    NodeAssignmentDTO,
    DeleteNodeAssignmentUseCase,
    DeleteNodeAssignmentResponseDTO,
)
from src.depends import get_unit_of_work, get_max_page_size, get_page_size

router = APIRouter()


@router.get(
    "/node-assignments",
    response_model=ListNodeAssignmentsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_node_assignments(
    node_id: Optional[UUID] = Query(None, description="Only assignments owned by this node"),
    page: int = Query(1, description="1-indexed page number"),
    page_size: int = Depends(get_page_size),
    uow: UnitOfWork = Depends(get_unit_of_work),
    max_page_size: int = Depends(get_max_page_size),
):
    """List node assignments, most recently started first"""
    use_case = ListNodeAssignmentsUseCase(uow=uow, max_page_size=max_page_size)
    result = await use_case.execute(node_id=node_id, page=page, page_size=page_size)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


# Assignment ids are URIs such as "wolverine://durable/queue", hence the path converter
@router.get(
    "/node-assignments/{assignment_id:path}",
    response_model=NodeAssignmentDTO,
    status_code=status.HTTP_200_OK,
)
async def get_node_assignment(
    assignment_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Get a node assignment by ID"""
    use_case = GetNodeAssignmentUseCase(uow=uow)
    result = await use_case.execute(assignment_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/node-assignments/{assignment_id:path}",
    response_model=DeleteNodeAssignmentResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def delete_node_assignment(
    assignment_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a node assignment by ID"""
    use_case = DeleteNodeAssignmentUseCase(uow=uow)
    result = await use_case.execute(assignment_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
