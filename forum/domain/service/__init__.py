"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .ranking_service import RankingService
from .vote_service import CastVoteResult, VoteService

__all__ = [
    "Service",
    "PostService",
    "CommentService",
    "RankingService",
    "VoteService",
    "CastVoteResult",
]
