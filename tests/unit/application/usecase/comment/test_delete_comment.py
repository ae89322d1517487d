"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from forum.domain.error import NotFoundError
from forum.domain.repository import CommentRepository, PostRepository
from forum.domain.service import VoteService
from forum.domain.value import UserId, VotableType, VoteDirection
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_soft_deletes_comment(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        post = await post_repo.save(make_post())
        comment = await comment_repo.save(make_comment(post.id, "Oops"))

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id))
        )

        # Assert
        assert response.comment.is_deleted is True
        assert response.comment.text == "[removed]"
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.is_deleted is True
        assert stored.text == "[removed]"

    @pytest.mark.asyncio
    async def test_removed_comment_stays_in_ranked_thread(self, unit_env):
        """The thread keeps the removed parent and its votes, so replies attach."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        vote_service = await unit_env.get(VoteService)

        post = await post_repo.save(make_post())
        parent = await comment_repo.save(make_comment(post.id, "Parent"))
        reply = await comment_repo.save(
            make_comment(post.id, "Reply", parent_id=parent.id)
        )
        await vote_service.cast_vote(
            VotableType.COMMENT, parent.id, UserId(uuid4()), VoteDirection.UP
        )

        # Act
        await use_case.execute(DeleteCommentRequest(comment_id=str(parent.id)))
        listing = await list_comments.execute(
            ListCommentsRequest(post_id=str(post.id))
        )

        # Assert
        by_id = {c.comment_id: c for c in listing.comments}
        assert by_id[str(parent.id)].text == "[removed]"
        assert by_id[str(parent.id)].score == 1
        assert by_id[str(reply.id)].parent_id == str(parent.id)
        assert by_id[str(reply.id)].is_deleted is False

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await use_case.execute(DeleteCommentRequest(comment_id=str(uuid4())))
