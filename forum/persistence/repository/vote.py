"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import and_, case, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Vote
from forum.domain.model.common import utc_now
from forum.domain.repository import VoteRepository
from forum.domain.value import UserId, VotableType, VoteTally, VoteValue
from forum.persistence.mappers import row_to_vote, vote_to_dict
from forum.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_value(self, vote: Vote, value: VoteValue) -> Vote:
        """Flip the value of an existing vote."""
        updated = vote.model_copy(update={"value": value, "updated_at": utc_now()})
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote.id)
            .values(value=int(value), updated_at=updated.updated_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return updated

    async def delete_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> bool:
        """Delete a vote by user and votable."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> int:
        """Delete every vote on the given items with a single statement."""
        if not votable_ids:
            return 0

        stmt = delete(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(list(votable_ids)),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def tally_by_votables(
        self,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> dict[UUID, VoteTally]:
        """Aggregate up/down counts with a single grouped query."""
        if not votable_ids:
            return {}

        with logfire.span(
            "vote_repository.tally_by_votables",
            votable_type=votable_type.value,
            count=len(votable_ids),
        ):
            upvotes = func.count(case((votes_table.c.value == 1, 1)))
            downvotes = func.count(case((votes_table.c.value == -1, 1)))
            stmt = (
                select(
                    votes_table.c.votable_id,
                    upvotes.label("upvotes"),
                    downvotes.label("downvotes"),
                )
                .where(
                    and_(
                        votes_table.c.votable_type == votable_type.value,
                        votes_table.c.votable_id.in_(votable_ids),
                    )
                )
                .group_by(votes_table.c.votable_id)
            )
            result = await self.session.execute(stmt)

            tallies = {vid: VoteTally() for vid in votable_ids}
            for row in result.fetchall():
                tallies[row.votable_id] = VoteTally(
                    upvotes=row.upvotes, downvotes=row.downvotes
                )
            return tallies
