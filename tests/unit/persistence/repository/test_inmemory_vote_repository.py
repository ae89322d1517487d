"""Unit tests for the in-memory vote repository."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.model.vote import Vote
from forum.domain.value import (
    PostId,
    UserId,
    VotableType,
    VoteId,
    VoteTally,
    VoteValue,
)
from forum.persistence.repository.inmemory import InMemoryVoteRepository


def make_vote(
    votable_id, value=VoteValue.UP, votable_type=VotableType.POST, user_id=None
) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id or UserId(uuid4()),
        votable_type=votable_type,
        votable_id=votable_id,
        value=value,
    )


class TestInMemoryVoteRepository:
    """Unit tests for vote storage and tallying."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_raises_integrity_error(self):
        """A second vote by the same user on the same item is rejected."""
        # Arrange
        repo = InMemoryVoteRepository()
        post_id = PostId(uuid4())
        user_id = UserId(uuid4())
        await repo.save(make_vote(post_id, user_id=user_id))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.save(make_vote(post_id, VoteValue.DOWN, user_id=user_id))

    @pytest.mark.asyncio
    async def test_same_user_may_vote_on_post_and_comment_with_same_id(self):
        repo = InMemoryVoteRepository()
        shared_id = uuid4()
        user_id = UserId(uuid4())

        await repo.save(make_vote(shared_id, user_id=user_id))
        await repo.save(
            make_vote(shared_id, votable_type=VotableType.COMMENT, user_id=user_id)
        )

        tallies = await repo.tally_by_votables(VotableType.COMMENT, [shared_id])
        assert tallies[shared_id] == VoteTally(upvotes=1, downvotes=0)

    @pytest.mark.asyncio
    async def test_tally_counts_each_item_separately(self):
        """Tallies are computed for the whole batch at once."""
        # Arrange
        repo = InMemoryVoteRepository()
        first, second, silent = (PostId(uuid4()) for _ in range(3))

        for value in (VoteValue.UP, VoteValue.UP, VoteValue.DOWN):
            await repo.save(make_vote(first, value))
        await repo.save(make_vote(second, VoteValue.DOWN))

        # Act
        tallies = await repo.tally_by_votables(
            VotableType.POST, [first, second, silent]
        )

        # Assert
        assert tallies == {
            first: VoteTally(upvotes=2, downvotes=1),
            second: VoteTally(upvotes=0, downvotes=1),
            silent: VoteTally(),
        }

    @pytest.mark.asyncio
    async def test_tally_of_no_ids_is_empty(self):
        repo = InMemoryVoteRepository()

        assert await repo.tally_by_votables(VotableType.POST, []) == {}

    @pytest.mark.asyncio
    async def test_update_value_replaces_stored_vote(self):
        # Arrange
        repo = InMemoryVoteRepository()
        post_id = PostId(uuid4())
        vote = await repo.save(make_vote(post_id))

        # Act
        updated = await repo.update_value(vote, VoteValue.DOWN)

        # Assert
        assert updated.id == vote.id
        stored = await repo.find_by_user_and_votable(
            vote.user_id, VotableType.POST, post_id
        )
        assert stored.value == VoteValue.DOWN

    @pytest.mark.asyncio
    async def test_delete_by_votables_leaves_other_items(self):
        # Arrange
        repo = InMemoryVoteRepository()
        first, second, other = PostId(uuid4()), PostId(uuid4()), PostId(uuid4())
        await repo.save(make_vote(first))
        await repo.save(make_vote(first, VoteValue.DOWN))
        await repo.save(make_vote(second))
        await repo.save(make_vote(other))

        # Act
        removed = await repo.delete_by_votables(VotableType.POST, [first, second])

        # Assert
        assert removed == 3
        tallies = await repo.tally_by_votables(
            VotableType.POST, [first, second, other]
        )
        assert tallies[first] == VoteTally()
        assert tallies[second] == VoteTally()
        assert tallies[other] == VoteTally(upvotes=1, downvotes=0)

    @pytest.mark.asyncio
    async def test_delete_by_votables_respects_votable_type(self):
        repo = InMemoryVoteRepository()
        shared_id = uuid4()
        await repo.save(make_vote(shared_id))
        await repo.save(make_vote(shared_id, votable_type=VotableType.COMMENT))

        assert await repo.delete_by_votables(VotableType.COMMENT, [shared_id]) == 1
        assert await repo.delete_by_votables(VotableType.COMMENT, []) == 0
        tallies = await repo.tally_by_votables(VotableType.POST, [shared_id])
        assert tallies[shared_id] == VoteTally(upvotes=1, downvotes=0)
