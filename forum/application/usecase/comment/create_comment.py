"""Create comment use case."""

from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.model.comment import Comment
from forum.domain.model.common import utc_now
from forum.domain.service import CommentService, PostService
from forum.domain.value import CommentId, PostId, UserId

from .comment_item import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    text: str
    author_id: str  # Resolved by the identity provider
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The new comment

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If the parent is not a live comment on the same post
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span(
            "create_comment.execute",
            post_id=request.post_id,
            parent_id=request.parent_id,
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", request.post_id)

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=UserId(UUID(request.author_id)),
                text=request.text,
                parent_id=CommentId(UUID(request.parent_id))
                if request.parent_id
                else None,
                created_at=utc_now(),
            )

            saved = await self.comment_service.save_comment(comment)

            return CreateCommentResponse(comment=CommentItem.from_comment(saved))
