"""Integration tests for the PostgreSQL repositories.

Requires a migrated database at DATABASE__URL:

    python scripts/run_migrations.py
    pytest -m integration
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model.vote import Vote
from forum.domain.repository import PostRepository, VoteRepository
from forum.domain.value import UserId, VotableType, VoteId, VoteTally, VoteValue
from tests.conftest import make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL, mocked external services
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(text("TRUNCATE TABLE votes, comments, posts CASCADE"))
    await session.commit()
    yield


def make_vote(votable_id, value=VoteValue.UP, user_id=None) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id or UserId(uuid4()),
        votable_type=VotableType.POST,
        votable_id=votable_id,
        value=value,
    )


class TestPostgresVoteRepository:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_tally_groups_votes_per_item(self, integration_env):
        """One grouped query should count both directions for every item."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        vote_repo = await integration_env.get(VoteRepository)

        busy = await post_repo.save(make_post("Busy"))
        quiet = await post_repo.save(make_post("Quiet"))
        for value in (VoteValue.UP, VoteValue.UP, VoteValue.DOWN):
            await vote_repo.save(make_vote(busy.id, value))

        # Act
        tallies = await vote_repo.tally_by_votables(
            VotableType.POST, [busy.id, quiet.id]
        )

        # Assert
        assert tallies[busy.id] == VoteTally(upvotes=2, downvotes=1)
        assert tallies.get(quiet.id, VoteTally()) == VoteTally()

    @pytest.mark.asyncio
    async def test_unique_vote_constraint(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        vote_repo = await integration_env.get(VoteRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())
        await vote_repo.save(make_vote(post.id, user_id=user_id))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await vote_repo.save(make_vote(post.id, VoteValue.DOWN, user_id=user_id))

    @pytest.mark.asyncio
    async def test_update_and_delete(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        vote_repo = await integration_env.get(VoteRepository)
        post = await post_repo.save(make_post())
        vote = await vote_repo.save(make_vote(post.id))

        # Act
        flipped = await vote_repo.update_value(vote, VoteValue.DOWN)
        removed = await vote_repo.delete_by_votables(VotableType.POST, [post.id])

        # Assert
        assert flipped.value == VoteValue.DOWN
        assert removed == 1
