"""Vote domain service."""

from typing import Optional, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.comment import Comment
from forum.domain.model.common import utc_now
from forum.domain.model.post import Post
from forum.domain.model.vote import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import (
    CommentId,
    PostId,
    UserId,
    VotableType,
    VoteDirection,
    VoteId,
    VoteTally,
)
from forum.domain.value.common import ValueObject

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class CastVoteResult(ValueObject):
    """Result of casting a vote."""

    votable_type: VotableType
    votable_id: UUID
    direction: VoteDirection
    vote: Optional[Vote]  # None once the vote is cleared
    tally: VoteTally


class VoteService(Service):
    """Domain service for casting and tallying votes."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.comment_service = comment_service

    async def cast_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        direction: VoteDirection,
    ) -> CastVoteResult:
        """Record a user's vote on a post or comment.

        Up or down creates the user's vote, or flips it when it points the
        other way. Clear deletes it. Repeating the current direction changes
        nothing.

        Args:
            votable_type: Type of item voted on
            votable_id: ID of the item
            user_id: Voter
            direction: Up, down or clear

        Returns:
            The stored vote (if any) and the item's fresh tally

        Raises:
            NotFoundError: If the item does not exist
            ValidationError: If a concurrent vote by the same user won the race
        """
        with logfire.span(
            "vote_service.cast_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(user_id),
            direction=int(direction),
        ):
            await self._ensure_votable_exists(votable_type, votable_id)

            existing = await self.vote_repository.find_by_user_and_votable(
                user_id, votable_type, votable_id
            )
            value = direction.value_to_store

            vote: Optional[Vote]
            if value is None:
                if existing:
                    await self.vote_repository.delete_by_user_and_votable(
                        user_id, votable_type, votable_id
                    )
                    logfire.info("Vote cleared", votable_id=str(votable_id))
                else:
                    logfire.info("No vote to clear", votable_id=str(votable_id))
                vote = None
            elif existing is None:
                now = utc_now()
                new_vote = Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    votable_type=votable_type,
                    votable_id=votable_id,
                    value=value,
                    created_at=now,
                    updated_at=now,
                )
                try:
                    vote = await self.vote_repository.save(new_vote)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate vote attempt",
                        user_id=str(user_id),
                        votable_id=str(votable_id),
                    )
                    raise ValidationError("Vote already recorded, retry the request")
                logfire.info("Vote created", votable_id=str(votable_id))
            elif existing.value != value:
                vote = await self.vote_repository.update_value(existing, value)
                logfire.info("Vote flipped", votable_id=str(votable_id))
            else:
                vote = existing

            tallies = await self.tally(votable_type, [votable_id])

            return CastVoteResult(
                votable_type=votable_type,
                votable_id=votable_id,
                direction=direction,
                vote=vote,
                tally=tallies[votable_id],
            )

    async def clear_votes(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on a batch of items (used when they are deleted).

        Args:
            votable_type: Type of the items
            votable_ids: IDs of the items

        Returns:
            Number of votes removed
        """
        with logfire.span(
            "vote_service.clear_votes",
            votable_type=votable_type.value,
            count=len(votable_ids),
        ):
            removed = await self.vote_repository.delete_by_votables(
                votable_type, votable_ids
            )
            logfire.info(
                "Votes cleared", votable_type=votable_type.value, count=removed
            )
            return removed

    async def tally(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        """Count up and down votes for a batch of items.

        Args:
            votable_type: Type of the items
            votable_ids: Item IDs (duplicates are ignored)

        Returns:
            Mapping from every requested ID to its tally
        """
        # Deduplicate while keeping order so the query stays small
        unique_ids = list(dict.fromkeys(votable_ids))
        if not unique_ids:
            return {}

        with logfire.span(
            "vote_service.tally", votable_type=votable_type.value, count=len(unique_ids)
        ):
            tallies = await self.vote_repository.tally_by_votables(
                votable_type, unique_ids
            )
            return {vid: tallies.get(vid, VoteTally()) for vid in unique_ids}

    async def enrich_posts(self, posts: Sequence[Post]) -> list[Post]:
        """Attach vote totals to posts, keeping their order.

        Args:
            posts: Posts loaded from the repository

        Returns:
            Copies of the posts carrying upvotes and downvotes
        """
        tallies = await self.tally(VotableType.POST, [post.id for post in posts])
        return [post.with_tally(tallies[post.id]) for post in posts]

    async def enrich_comments(self, comments: Sequence[Comment]) -> list[Comment]:
        """Attach vote totals to comments, keeping their order.

        Args:
            comments: Comments loaded from the repository

        Returns:
            Copies of the comments carrying upvotes and downvotes
        """
        tallies = await self.tally(
            VotableType.COMMENT, [comment.id for comment in comments]
        )
        return [comment.with_tally(tallies[comment.id]) for comment in comments]

    async def get_user_votes(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> dict[UUID, int]:
        """Look up how a user voted on a batch of items.

        Args:
            user_id: The user
            votable_type: Type of the items
            votable_ids: Item IDs

        Returns:
            Mapping from item ID to +1, -1 or 0 (no vote)
        """
        if not votable_ids:
            return {}

        votes = await self.vote_repository.find_by_user_and_votables(
            user_id=user_id,
            votable_type=votable_type,
            votable_ids=votable_ids,
        )
        cast = {vote.votable_id: int(vote.value) for vote in votes}
        return {vid: cast.get(vid, 0) for vid in votable_ids}

    async def _ensure_votable_exists(
        self, votable_type: VotableType, votable_id: UUID
    ) -> None:
        if votable_type == VotableType.POST:
            post = await self.post_service.get_post_by_id(PostId(votable_id))
            if post is None:
                logfire.warn("Vote on non-existent post", post_id=str(votable_id))
                raise NotFoundError("Post", str(votable_id))
        else:
            comment = await self.comment_service.get_comment_by_id(
                CommentId(votable_id)
            )
            if comment is None:
                logfire.warn(
                    "Vote on non-existent comment", comment_id=str(votable_id)
                )
                raise NotFoundError("Comment", str(votable_id))
