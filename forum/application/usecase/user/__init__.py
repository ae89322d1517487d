"""User use cases."""

from .list_overview import (
    ListUserOverviewRequest,
    ListUserOverviewResponse,
    ListUserOverviewUseCase,
    OverviewItem,
)

__all__ = [
    "ListUserOverviewRequest",
    "ListUserOverviewResponse",
    "ListUserOverviewUseCase",
    "OverviewItem",
]
