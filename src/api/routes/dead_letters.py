"""
Dead Letter API Routes

Browse, inspect, flag for replay, and discard failed messages.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from src.api.error import raise_for_error
from src.app.queries import DeadLetterFilter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dead_letters import (
    ListDeadLettersUseCase,
    ListDeadLettersResponseDTO,
    GetDeadLetterUseCase,
    DeadLetterDTO,
    SetDeadLetterReplayableUseCase,
    SetReplayableRequestDTO,
    SetReplayableResponseDTO,
    SetDeadLettersReplayableUseCase,
    BulkSetReplayableRequestDTO,
    BulkSetReplayableResponseDTO,
    DeleteDeadLetterUseCase,
    DeleteDeadLetterResponseDTO,
)
from src.depends import get_unit_of_work, get_max_page_size, get_page_size

router = APIRouter()


@router.get(
    "/dead-letters",
    response_model=ListDeadLettersResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_dead_letters(
    message_type: Optional[str] = Query(None, description="Exact message type"),
    exception_type: Optional[str] = Query(None, description="Exact exception type"),
    body_search: Optional[str] = Query(None, description="Case-insensitive text in the body"),
    start_date: Optional[datetime] = Query(None, description="Sent at or after"),
    end_date: Optional[datetime] = Query(None, description="Sent at or before"),
    page: int = Query(1, description="1-indexed page number"),
    page_size: int = Depends(get_page_size),
    uow: UnitOfWork = Depends(get_unit_of_work),
    max_page_size: int = Depends(get_max_page_size),
):
    """
    List dead letters with optional filters.

    Returns the page plus the total match count and every known message and
    exception type.
    """
    use_case = ListDeadLettersUseCase(uow=uow, max_page_size=max_page_size)
    result = await use_case.execute(
        DeadLetterFilter(
            message_type=message_type,
            exception_type=exception_type,
            body_search=body_search,
            start_date=start_date,
            end_date=end_date,
        ),
        page=page,
        page_size=page_size,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/dead-letters/replay-multiple",
    response_model=BulkSetReplayableResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def set_dead_letters_replayable(
    request: BulkSetReplayableRequestDTO,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Set the replayable flag on several dead letters in one transaction.

    Unknown keys are skipped; count reports how many rows matched.
    """
    use_case = SetDeadLettersReplayableUseCase(uow=uow)
    result = await use_case.execute(request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/dead-letters/{dead_letter_id}",
    response_model=DeadLetterDTO,
    status_code=status.HTTP_200_OK,
)
async def get_dead_letter(
    dead_letter_id: UUID,
    received_at: Optional[str] = Query(None, description="Partition marker, part of the key"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Get a dead letter by id and received_at"""
    use_case = GetDeadLetterUseCase(uow=uow)
    result = await use_case.execute(dead_letter_id, received_at)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/dead-letters/{dead_letter_id}/replay",
    response_model=SetReplayableResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def set_dead_letter_replayable(
    dead_letter_id: UUID,
    request: SetReplayableRequestDTO,
    received_at: Optional[str] = Query(None, description="Partition marker, part of the key"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Flag a single dead letter for replay, or clear the flag"""
    use_case = SetDeadLetterReplayableUseCase(uow=uow)
    result = await use_case.execute(dead_letter_id, received_at, request.replayable)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/dead-letters/{dead_letter_id}",
    response_model=DeleteDeadLetterResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def delete_dead_letter(
    dead_letter_id: UUID,
    received_at: Optional[str] = Query(None, description="Partition marker, part of the key"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a dead letter by id and received_at"""
    use_case = DeleteDeadLetterUseCase(uow=uow)
    result = await use_case.execute(dead_letter_id, received_at)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
