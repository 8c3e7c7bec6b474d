from datetime import timedelta
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.nodes import (
    ListNodesUseCase,
    ListNodesResponseDTO,
    GetNodeUseCase,
    NodeDTO,
    DeleteNodeUseCase,
    DeleteNodeResponseDTO,
)
from src.depends import get_unit_of_work, get_health_window, get_max_page_size, get_page_size

router = APIRouter()


@router.get("/nodes", response_model=ListNodesResponseDTO, status_code=status.HTTP_200_OK)
async def list_nodes(
    active_only: bool = Query(False, description="Only nodes with a recent heartbeat"),
    page: int = Query(1, description="1-indexed page number"),
    page_size: int = Depends(get_page_size),
    uow: UnitOfWork = Depends(get_unit_of_work),
    health_window: timedelta = Depends(get_health_window),
    max_page_size: int = Depends(get_max_page_size),
):
    """List nodes ordered by node number"""
    use_case = ListNodesUseCase(uow=uow, health_window=health_window, max_page_size=max_page_size)
    result = await use_case.execute(active_only=active_only, page=page, page_size=page_size)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/nodes/{node_id}", response_model=NodeDTO, status_code=status.HTTP_200_OK)
async def get_node(
    node_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    health_window: timedelta = Depends(get_health_window),
):
    """Get a node by ID"""
    use_case = GetNodeUseCase(uow=uow, health_window=health_window)
    result = await use_case.execute(node_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/nodes/{node_id}", response_model=DeleteNodeResponseDTO, status_code=status.HTTP_200_OK
)
async def delete_node(
    node_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a node record, e.g. one left behind by a crashed process"""
    use_case = DeleteNodeUseCase(uow=uow)
    result = await use_case.execute(node_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
