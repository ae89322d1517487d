"""Comment entity.

Comments are threaded: top-level comments have no parent, replies point at
the comment they answer.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel, utc_now
from forum.domain.value import CommentId, PostId, UserId, VoteTally

REMOVED_TEXT = "[removed]"


class Comment(DomainModel):
    """Comment entity.

    Vote totals are derived, exactly as on ``Post``. A removed comment stays
    in its thread with its text replaced, so replies keep their parent.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    @property
    def score(self) -> int:
        """Net score from the applied tally."""
        return self.upvotes - self.downvotes

    def with_tally(self, tally: VoteTally) -> "Comment":
        """Return a copy carrying the given vote totals."""
        return self.model_copy(
            update={"upvotes": tally.upvotes, "downvotes": tally.downvotes}
        )

    def removed(self) -> "Comment":
        """Return the soft-deleted copy of this comment."""
        return self.model_copy(update={"is_deleted": True, "text": REMOVED_TEXT})
