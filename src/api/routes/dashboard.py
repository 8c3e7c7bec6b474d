from datetime import timedelta
from fastapi import APIRouter, Depends, status
from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dashboard import GetDashboardStatsUseCase, DashboardStatsDTO
from src.depends import get_unit_of_work, get_health_window

router = APIRouter()


@router.get("/stats", response_model=DashboardStatsDTO, status_code=status.HTTP_200_OK)
async def get_dashboard_stats(
    uow: UnitOfWork = Depends(get_unit_of_work),
    health_window: timedelta = Depends(get_health_window),
):
    """
    Dashboard summary.

    Total and replayable dead letters, incoming envelopes, and nodes whose
    heartbeat falls inside the health window.
    """
    use_case = GetDashboardStatsUseCase(uow=uow, health_window=health_window)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
