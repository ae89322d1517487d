"""Reddit API adapter."""

from .client import (
    MockRedditClient,
    RealRedditClient,
    RedditAPIError,
    RedditClient,
)

__all__ = ["RedditClient", "RealRedditClient", "MockRedditClient", "RedditAPIError"]
