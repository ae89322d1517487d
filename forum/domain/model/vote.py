"""Vote entity.

A vote is one user's up or down judgment on a post or comment. Each user
holds at most one vote per item: voting again flips the stored value and
clearing the vote deletes the record.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from forum.domain.model.common import DomainModel, utc_now
from forum.domain.value import UserId, VotableType, VoteId, VoteValue


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (unique constraint in the database)
    - Value is +1 or -1, never 0
    - Polymorphic reference to votable (post or comment)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # PostId or CommentId (both are UUIDs)
    value: VoteValue
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
