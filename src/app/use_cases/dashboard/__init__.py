from .get_dashboard_stats_use_case import GetDashboardStatsUseCase
from .dtos import DashboardStatsDTO

__all__ = [
    "GetDashboardStatsUseCase",
    "DashboardStatsDTO",
]
