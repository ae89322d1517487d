"""List comments use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.service import (
    CommentService,
    PostService,
    RankingService,
    VoteService,
)
from forum.domain.value import PostId, SortMode, TimeWindow, UserId, VotableType

from .comment_item import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str
    sort: SortMode = SortMode.HOT
    t: TimeWindow = TimeWindow.ALL
    user_id: Optional[str] = None


class ListCommentsResponse(BaseModel):
    """List comments response.

    Comments come back flat in ranked order; ``parent_id`` lets the client
    rebuild the thread.
    """

    comments: list[CommentItem]
    sort: SortMode
    t: TimeWindow


class ListCommentsUseCase(BaseUseCase[ListCommentsRequest, ListCommentsResponse]):
    """Use case for listing the ranked comments of a post."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
        ranking_service: RankingService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
            ranking_service: Ranking domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.ranking_service = ranking_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span(
            "list_comments.execute",
            post_id=request.post_id,
            sort=request.sort.value,
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", request.post_id)

            comments = await self.comment_service.get_comments_for_post(post_id)
            comments = await self.vote_service.enrich_comments(comments)
            ranked = self.ranking_service.rank(comments, request.sort, request.t)

            user_votes: dict[UUID, int] = {}
            if request.user_id and ranked:
                user_votes = await self.vote_service.get_user_votes(
                    UserId(UUID(request.user_id)),
                    VotableType.COMMENT,
                    [comment.id for comment in ranked],
                )

            return ListCommentsResponse(
                comments=[
                    CommentItem.from_comment(c, user_votes.get(c.id, 0))
                    for c in ranked
                ],
                sort=request.sort,
                t=request.t,
            )
