"""Comment domain service."""

import logfire

from forum.domain.error import ValidationError
from forum.domain.model.comment import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def save_comment(self, comment: Comment) -> Comment:
        """Save a comment, checking that a reply stays on its parent's post.

        Args:
            comment: Comment to save

        Returns:
            Saved comment

        Raises:
            ValidationError: If the parent is missing, removed or on another post
        """
        with logfire.span(
            "comment_service.save_comment",
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
        ):
            if comment.parent_id is not None:
                parent = await self.comment_repository.find_by_id(comment.parent_id)
                if parent is None or parent.post_id != comment.post_id:
                    logfire.warn(
                        "Reply to unknown parent",
                        parent_id=str(comment.parent_id),
                        post_id=str(comment.post_id),
                    )
                    raise ValidationError(
                        "Parent comment not found on this post"
                    )
                if parent.is_deleted:
                    logfire.warn(
                        "Reply to removed parent", parent_id=str(comment.parent_id)
                    )
                    raise ValidationError("Cannot reply to a removed comment")

            saved = await self.comment_repository.save(comment)
            logfire.info("Comment saved", comment_id=str(saved.id))
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments of a post, removed ones included.

        Args:
            post_id: Post ID

        Returns:
            Unranked comments without vote totals
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id=post_id)
            logfire.info("Comments fetched", post_id=str(post_id), count=len(comments))
            return comments

    async def get_comments_by_author(self, author_id: UserId) -> list[Comment]:
        """Get a user's live comments, newest first."""
        with logfire.span(
            "comment_service.get_comments_by_author", author_id=str(author_id)
        ):
            comments = await self.comment_repository.find_by_author(author_id)
            logfire.info("Author comments fetched", count=len(comments))
            return comments

    async def remove_comment(self, comment: Comment) -> Comment:
        """Soft-delete a comment, keeping its place in the thread.

        Removing an already removed comment changes nothing.

        Args:
            comment: Comment to remove

        Returns:
            The removed comment
        """
        with logfire.span(
            "comment_service.remove_comment", comment_id=str(comment.id)
        ):
            if comment.is_deleted:
                return comment

            removed = await self.comment_repository.save(comment.removed())
            logfire.info("Comment removed", comment_id=str(comment.id))
            return removed
