"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.service import PostService, VoteService
from forum.domain.value import PostId, UserId, VotableType

from .post_item import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    user_id: str | None = None  # Caller, to report their own vote


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for fetching a single post with its vote totals."""

    def __init__(self, post_service: PostService, vote_service: VoteService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.vote_service = vote_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))
        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        [post] = await self.vote_service.enrich_posts([post])

        user_vote = 0
        if request.user_id:
            votes = await self.vote_service.get_user_votes(
                UserId(UUID(request.user_id)), VotableType.POST, [post.id]
            )
            user_vote = votes[post.id]

        return GetPostResponse(post=PostItem.from_post(post, user_vote))
