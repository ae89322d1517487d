"""Vote routes."""

from typing import Literal
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from forum.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from forum.domain.error import DomainError, NotFoundError
from forum.domain.value import VotableType

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting: 1 up, -1 down, 0 clear."""

    user_id: UUID
    dir: Literal[-1, 0, 1]


async def _cast_vote(
    use_case: CastVoteUseCase,
    votable_type: VotableType,
    votable_id: UUID,
    request: VoteAPIRequest,
) -> CastVoteResponse:
    try:
        return await use_case.execute(
            CastVoteRequest(
                votable_type=votable_type,
                votable_id=str(votable_id),
                user_id=str(request.user_id),
                dir=request.dir,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (DomainError, ValueError) as e:
        logfire.warn("Vote rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error casting vote", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to cast vote",
        )


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def vote_post(
    post_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote on a post.

    Returns:
        The post's updated vote totals
    """
    return await _cast_vote(cast_vote_use_case, VotableType.POST, post_id, request)


@router.post("/comments/{comment_id}/vote", response_model=CastVoteResponse)
async def vote_comment(
    comment_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote on a comment.

    Returns:
        The comment's updated vote totals
    """
    return await _cast_vote(
        cast_vote_use_case, VotableType.COMMENT, comment_id, request
    )
