"""User routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from forum.application.usecase.user import (
    ListUserOverviewRequest,
    ListUserOverviewResponse,
    ListUserOverviewUseCase,
)
from forum.domain.value import SortMode, TimeWindow

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/overview", response_model=ListUserOverviewResponse)
async def list_user_overview(
    user_id: UUID,
    list_user_overview_use_case: FromDishka[ListUserOverviewUseCase],
    sort: SortMode = SortMode.NEW,
    t: TimeWindow = TimeWindow.ALL,
) -> ListUserOverviewResponse:
    """List a user's posts and comments in one ranked feed.

    Args:
        user_id: The user whose activity is listed
        list_user_overview_use_case: Use case from DI
        sort: new (default), hot, top, rising or controversial
        t: Time window for top

    Returns:
        The user's ranked posts and comments
    """
    try:
        return await list_user_overview_use_case.execute(
            ListUserOverviewRequest(user_id=str(user_id), sort=sort, t=t)
        )
    except Exception as e:
        logfire.error("Unexpected error listing user overview", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list user overview",
        )
