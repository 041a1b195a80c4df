"""Administrator use cases."""

from .admin_login import AdminLoginRequest, AdminLoginResponse, AdminLoginUseCase
from .get_overview import (
    AreaSummaryItem,
    GetOverviewRequest,
    GetOverviewResponse,
    GetOverviewUseCase,
)

__all__ = [
    "AdminLoginRequest",
    "AdminLoginResponse",
    "AdminLoginUseCase",
    "AreaSummaryItem",
    "GetOverviewRequest",
    "GetOverviewResponse",
    "GetOverviewUseCase",
]
