"""List user overview use case.

A user's overview mixes their posts and comments in one ranked feed.
"""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import Comment, Post
from forum.domain.ranking import sort_new
from forum.domain.service import (
    CommentService,
    PostService,
    RankingService,
    VoteService,
)
from forum.domain.value import SortMode, TimeWindow, UserId, VotableType


class OverviewItem(BaseModel):
    """A post or comment in a user's overview."""

    type: VotableType
    id: str
    post_id: str  # The post itself, or the post a comment belongs to
    title: Optional[str] = None  # Posts only
    content: str
    created_at: datetime
    upvotes: int
    downvotes: int
    score: int

    @classmethod
    def from_votable(cls, item: Union[Post, Comment]) -> "OverviewItem":
        if isinstance(item, Post):
            return cls(
                type=VotableType.POST,
                id=str(item.id),
                post_id=str(item.id),
                title=item.title,
                content=item.content,
                created_at=item.created_at,
                upvotes=item.upvotes,
                downvotes=item.downvotes,
                score=item.score,
            )
        return cls(
            type=VotableType.COMMENT,
            id=str(item.id),
            post_id=str(item.post_id),
            content=item.text,
            created_at=item.created_at,
            upvotes=item.upvotes,
            downvotes=item.downvotes,
            score=item.score,
        )


class ListUserOverviewRequest(BaseModel):
    """List user overview request."""

    user_id: str
    sort: SortMode = SortMode.NEW
    t: TimeWindow = TimeWindow.ALL


class ListUserOverviewResponse(BaseModel):
    """List user overview response."""

    items: list[OverviewItem]
    sort: SortMode
    t: TimeWindow


class ListUserOverviewUseCase(
    BaseUseCase[ListUserOverviewRequest, ListUserOverviewResponse]
):
    """Use case for ranking a user's posts and comments together."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
        ranking_service: RankingService,
    ) -> None:
        """Initialize list user overview use case.

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

    async def execute(
        self, request: ListUserOverviewRequest
    ) -> ListUserOverviewResponse:
        """Execute list user overview flow.

        Posts and comments are tallied with one batch each, merged newest
        first and then ranked, so ties in the ranking favour recent items.
        A user with no activity gets an empty overview.
        """
        author_id = UserId(UUID(request.user_id))

        with logfire.span(
            "list_user_overview.execute",
            user_id=request.user_id,
            sort=request.sort.value,
        ):
            posts = await self.post_service.list_posts_by_author(author_id)
            comments = await self.comment_service.get_comments_by_author(author_id)

            posts = await self.vote_service.enrich_posts(posts)
            comments = await self.vote_service.enrich_comments(comments)

            merged: list[Union[Post, Comment]] = sort_new([*posts, *comments])
            ranked = self.ranking_service.rank(merged, request.sort, request.t)

            logfire.info(
                "User overview ranked",
                posts=len(posts),
                comments=len(comments),
                returned=len(ranked),
            )

            return ListUserOverviewResponse(
                items=[OverviewItem.from_votable(item) for item in ranked],
                sort=request.sort,
                t=request.t,
            )
