"""Unit tests for GetPostUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.post import GetPostRequest, GetPostUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import PostRepository
from forum.domain.service import VoteService
from forum.domain.value import UserId, VotableType, VoteDirection
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_get_post_with_tally_and_user_vote(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        vote_service = await unit_env.get(VoteService)

        post = await post_repo.save(make_post())
        voter = UserId(uuid4())
        await vote_service.cast_vote(VotableType.POST, post.id, voter, VoteDirection.UP)

        # Act
        response = await use_case.execute(
            GetPostRequest(post_id=str(post.id), user_id=str(voter))
        )

        # Assert
        assert response.post.post_id == str(post.id)
        assert response.post.upvotes == 1
        assert response.post.user_vote == 1

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_deleted_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        await post_repo.delete(post.id)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=str(post.id)))
