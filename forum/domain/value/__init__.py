"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    PostId,
    SubredditId,
    UserId,
    VoteId,
)
from forum.domain.value.types import (
    ContentType,
    SortMode,
    TimeWindow,
    VotableType,
    VoteDirection,
    VoteTally,
    VoteValue,
)

__all__ = [
    # Identifiers
    "UserId",
    "SubredditId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "ContentType",
    "SortMode",
    "TimeWindow",
    "VotableType",
    "VoteDirection",
    "VoteTally",
    "VoteValue",
]
