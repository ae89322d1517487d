"""Cast vote use case."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import VoteService
from forum.domain.value import UserId, VotableType, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request.

    ``dir`` is 1 (up), -1 (down) or 0 (clear the caller's vote).
    """

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # Resolved by the identity provider
    dir: Literal[-1, 0, 1]


class CastVoteResponse(BaseModel):
    """Cast vote response with the item's updated totals."""

    votable_type: VotableType
    votable_id: str
    dir: int
    upvotes: int
    downvotes: int
    score: int


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on a post or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the item does not exist
        """
        result = await self.vote_service.cast_vote(
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            user_id=UserId(UUID(request.user_id)),
            direction=VoteDirection(request.dir),
        )

        return CastVoteResponse(
            votable_type=result.votable_type,
            votable_id=str(result.votable_id),
            dir=int(result.direction),
            upvotes=result.tally.upvotes,
            downvotes=result.tally.downvotes,
            score=result.tally.score,
        )
