"""Test configuration and helpers."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from forum.domain.model.comment import Comment
from forum.domain.model.common import utc_now
from forum.domain.model.post import Post
from forum.domain.value import CommentId, PostId, SubredditId, UserId


def make_post(
    title: str = "Test Post",
    created_at: Optional[datetime] = None,
    subreddit_id: Optional[SubredditId] = None,
    **overrides,
) -> Post:
    """Build a text post with fresh IDs."""
    return Post(
        id=overrides.pop("id", PostId(uuid4())),
        subreddit_id=subreddit_id or SubredditId(uuid4()),
        author_id=overrides.pop("author_id", UserId(uuid4())),
        title=title,
        content=overrides.pop("content", "Test content"),
        created_at=created_at or utc_now(),
        **overrides,
    )


def make_comment(
    post_id: PostId,
    text: str = "Test comment",
    created_at: Optional[datetime] = None,
    parent_id: Optional[CommentId] = None,
    **overrides,
) -> Comment:
    """Build a comment on the given post with fresh IDs."""
    return Comment(
        id=overrides.pop("id", CommentId(uuid4())),
        post_id=post_id,
        author_id=overrides.pop("author_id", UserId(uuid4())),
        text=text,
        parent_id=parent_id,
        created_at=created_at or utc_now(),
        **overrides,
    )
