"""Comment representation shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model.comment import Comment


class CommentItem(BaseModel):
    """Comment with its vote totals."""

    comment_id: str
    post_id: str
    parent_id: str | None
    author_id: str
    text: str
    created_at: datetime
    upvotes: int
    downvotes: int
    score: int
    is_deleted: bool = False
    user_vote: int = 0

    @classmethod
    def from_comment(cls, comment: Comment, user_vote: int = 0) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_id=str(comment.author_id),
            text=comment.text,
            created_at=comment.created_at,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            score=comment.score,
            is_deleted=comment.is_deleted,
            user_vote=user_vote,
        )
