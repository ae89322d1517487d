"""List posts use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase
from forum.config import Settings
from forum.domain.service import PostService, RankingService, VoteService
from forum.domain.value import SortMode, SubredditId, TimeWindow, UserId, VotableType

from .post_item import PostItem


class ListPostsRequest(BaseModel):
    """List posts request.

    Unset sort, window and limit fall back to the configured defaults.
    """

    sort: Optional[SortMode] = None
    t: Optional[TimeWindow] = None
    subreddit_id: str | None = None
    limit: Optional[int] = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)
    user_id: str | None = None  # Current user ID (if known)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int  # Posts in the ranked listing before pagination
    sort: SortMode
    t: TimeWindow
    limit: int
    offset: int


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for listing ranked posts.

    Candidates are fetched, tallied in one batch, ranked in memory, then
    paginated, so every page is cut from the same ordering.
    """

    def __init__(
        self,
        post_service: PostService,
        vote_service: VoteService,
        ranking_service: RankingService,
        settings: Settings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            vote_service: Vote domain service
            ranking_service: Ranking domain service
            settings: Application settings (listing defaults)
        """
        self.post_service = post_service
        self.vote_service = vote_service
        self.ranking_service = ranking_service
        self.settings = settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with ranking and pagination

        Returns:
            One page of ranked posts
        """
        ranking_settings = self.settings.ranking
        sort = request.sort or SortMode(ranking_settings.default_sort)
        window = request.t or TimeWindow(ranking_settings.default_time_window)
        limit = min(
            request.limit or ranking_settings.default_page_size,
            ranking_settings.max_page_size,
        )

        with logfire.span(
            "list_posts.execute",
            sort=sort.value,
            t=window.value,
            subreddit_id=request.subreddit_id,
            limit=limit,
            offset=request.offset,
        ):
            subreddit_id = (
                SubredditId(UUID(request.subreddit_id))
                if request.subreddit_id
                else None
            )

            posts = await self.post_service.list_posts(subreddit_id)
            posts = await self.vote_service.enrich_posts(posts)
            ranked = self.ranking_service.rank(posts, sort, window)

            page = ranked[request.offset : request.offset + limit]

            user_votes: dict[UUID, int] = {}
            if request.user_id and page:
                user_votes = await self.vote_service.get_user_votes(
                    UserId(UUID(request.user_id)),
                    VotableType.POST,
                    [post.id for post in page],
                )

            logfire.info("Posts listed", count=len(page), total=len(ranked))

            return ListPostsResponse(
                posts=[
                    PostItem.from_post(post, user_votes.get(post.id, 0))
                    for post in page
                ],
                total=len(ranked),
                sort=sort,
                t=window,
                limit=limit,
                offset=request.offset,
            )
