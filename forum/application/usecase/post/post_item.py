"""Post representation shared by the post use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model.post import Post
from forum.domain.value import ContentType


class PostItem(BaseModel):
    """Post with its vote totals."""

    post_id: str
    subreddit_id: str
    author_id: str
    title: str
    content_type: ContentType
    content: str
    created_at: datetime
    upvotes: int
    downvotes: int
    score: int
    user_vote: int = 0  # +1, -1, or 0 when the caller has not voted

    @classmethod
    def from_post(cls, post: Post, user_vote: int = 0) -> "PostItem":
        return cls(
            post_id=str(post.id),
            subreddit_id=str(post.subreddit_id),
            author_id=str(post.author_id),
            title=post.title,
            content_type=post.content_type,
            content=post.content,
            created_at=post.created_at,
            upvotes=post.upvotes,
            downvotes=post.downvotes,
            score=post.score,
            user_vote=user_vote,
        )
