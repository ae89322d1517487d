"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from forum.domain.model.common import utc_now
from forum.domain.model.vote import Vote
from forum.domain.repository.vote import VoteRepository
from forum.domain.value import UserId, VotableType, VoteTally, VoteValue


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    def _matches(
        self, vote: Vote, votable_type: VotableType, votable_id: UUID
    ) -> bool:
        return vote.votable_type == votable_type and vote.votable_id == votable_id

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        for vote in self._votes:
            if vote.user_id == user_id and self._matches(
                vote, votable_type, votable_id
            ):
                return vote
        return None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        wanted = set(votable_ids)
        return [
            v
            for v in self._votes
            if v.user_id == user_id
            and v.votable_type == votable_type
            and v.votable_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_user_and_votable(
            vote.user_id, vote.votable_type, vote.votable_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_value(self, vote: Vote, value: VoteValue) -> Vote:
        """Flip the value of an existing vote."""
        updated = vote.model_copy(update={"value": value, "updated_at": utc_now()})
        self._votes = [updated if v.id == vote.id else v for v in self._votes]
        return updated

    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> bool:
        """Delete a vote by user and votable item."""
        for i, vote in enumerate(self._votes):
            if vote.user_id == user_id and self._matches(
                vote, votable_type, votable_id
            ):
                self._votes.pop(i)
                return True
        return False

    async def delete_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> int:
        """Delete every vote cast on the given items."""
        doomed = set(votable_ids)
        kept = [
            v
            for v in self._votes
            if not (v.votable_type == votable_type and v.votable_id in doomed)
        ]
        removed = len(self._votes) - len(kept)
        self._votes = kept
        return removed

    async def tally_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> dict[UUID, VoteTally]:
        """Aggregate up/down counts in a single pass over the votes."""
        if not votable_ids:
            return {}

        counts = {vid: [0, 0] for vid in votable_ids}
        for vote in self._votes:
            if vote.votable_type != votable_type or vote.votable_id not in counts:
                continue
            if vote.value == VoteValue.UP:
                counts[vote.votable_id][0] += 1
            else:
                counts[vote.votable_id][1] += 1

        return {
            vid: VoteTally(upvotes=ups, downvotes=downs)
            for vid, (ups, downs) in counts.items()
        }
