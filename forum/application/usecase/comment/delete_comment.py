"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.error import NotFoundError
from forum.domain.service import CommentService
from forum.domain.value import CommentId

from .comment_item import CommentItem


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment: CommentItem


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]):
    """Use case for removing a comment.

    The comment is soft-deleted: its text becomes ``[removed]`` and it keeps
    its place in the thread so replies still have a parent. Votes on it are
    kept and still count.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(UUID(request.comment_id))

        with logfire.span("delete_comment.execute", comment_id=request.comment_id):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", request.comment_id)

            removed = await self.comment_service.remove_comment(comment)

            return DeleteCommentResponse(comment=CommentItem.from_comment(removed))
