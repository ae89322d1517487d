"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.service import CommentService, PostService, VoteService
from forum.domain.value import PostId, VotableType


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool
    message: str


class DeletePostUseCase(BaseUseCase[DeletePostRequest, DeletePostResponse]):
    """Use case for permanently deleting a post.

    Comments go with the post; votes on the post and on its comments are
    removed too so they never reach a tally again.
    """

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span("delete_post.execute", post_id=request.post_id):
            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", request.post_id)

            comments = await self.comment_service.get_comments_for_post(post_id)
            await self.vote_service.clear_votes(
                VotableType.COMMENT, [comment.id for comment in comments]
            )
            await self.vote_service.clear_votes(VotableType.POST, [post_id])

            await self.post_service.delete_post(post_id)

            return DeletePostResponse(success=True, message="Post deleted")
