"""Post aggregate root.

Posts belong to a subreddit and carry one piece of content: body text, or
the URL of an image, video or link.
"""

from datetime import datetime

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel, utc_now
from forum.domain.value import ContentType, PostId, SubredditId, UserId, VoteTally


class Post(DomainModel):
    """Post aggregate root.

    ``upvotes`` and ``downvotes`` are derived from the vote ledger at query
    time and are never persisted with the post.
    """

    id: PostId
    subreddit_id: SubredditId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    content_type: ContentType = ContentType.TEXT
    content: str = Field(min_length=1, max_length=40000)
    created_at: datetime = Field(default_factory=utc_now)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_content(self) -> "Post":
        """URL content types must carry an http(s) URL."""
        if self.content_type.is_url and not self.content.startswith(
            ("http://", "https://")
        ):
            raise ValueError(
                f"A URL is required for {self.content_type.value} posts"
            )
        return self

    @property
    def score(self) -> int:
        """Net score from the applied tally."""
        return self.upvotes - self.downvotes

    def with_tally(self, tally: VoteTally) -> "Post":
        """Return a copy carrying the given vote totals."""
        return self.model_copy(
            update={"upvotes": tally.upvotes, "downvotes": tally.downvotes}
        )
