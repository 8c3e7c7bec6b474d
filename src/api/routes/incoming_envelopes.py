from datetime import datetime
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from src.api.error import raise_for_error
from src.app.queries import IncomingEnvelopeFilter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.incoming_envelopes import (
    ListIncomingEnvelopesUseCase,
    ListIncomingEnvelopesResponseDTO,
    GetIncomingEnvelopeUseCase,
    IncomingEnvelopeDTO,
    DeleteIncomingEnvelopeUseCase,
    DeleteIncomingEnvelopeResponseDTO,
)
from src.depends import get_unit_of_work, get_max_page_size, get_page_size

router = APIRouter()


@router.get(
    "/incoming-envelopes",
    response_model=ListIncomingEnvelopesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_incoming_envelopes(
    message_type: Optional[str] = Query(None, description="Exact message type"),
    status_filter: Optional[str] = Query(None, alias="status", description="Exact status"),
    body_search: Optional[str] = Query(None, description="Case-insensitive text in the body"),
    start_date: Optional[datetime] = Query(None, description="Executes at or after"),
    end_date: Optional[datetime] = Query(None, description="Executes at or before"),
    page: int = Query(1, description="1-indexed page number"),
    page_size: int = Depends(get_page_size),
    uow: UnitOfWork = Depends(get_unit_of_work),
    max_page_size: int = Depends(get_max_page_size),
):
    """List incoming envelopes with optional filters"""
    use_case = ListIncomingEnvelopesUseCase(uow=uow, max_page_size=max_page_size)
    result = await use_case.execute(
        IncomingEnvelopeFilter(
            message_type=message_type,
            status=status_filter,
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


@router.get(
    "/incoming-envelopes/{envelope_id}",
    response_model=IncomingEnvelopeDTO,
    status_code=status.HTTP_200_OK,
)
async def get_incoming_envelope(
    envelope_id: UUID,
    received_at: Optional[str] = Query(None, description="Partition marker, part of the key"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Get an incoming envelope by id and received_at"""
    use_case = GetIncomingEnvelopeUseCase(uow=uow)
    result = await use_case.execute(envelope_id, received_at)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/incoming-envelopes/{envelope_id}",
    response_model=DeleteIncomingEnvelopeResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def delete_incoming_envelope(
    envelope_id: UUID,
    received_at: Optional[str] = Query(None, description="Partition marker, part of the key"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete an incoming envelope by id and received_at"""
    use_case = DeleteIncomingEnvelopeUseCase(uow=uow)
    result = await use_case.execute(envelope_id, received_at)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
