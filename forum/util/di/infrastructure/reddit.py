"""Reddit infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.reddit.client import RealRedditClient, RedditClient
from forum.config import Settings
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_httpx


class RedditProvider(ProviderBase):
    """Reddit component base."""

    __mock_component__ = "reddit"


class ProdRedditProvider(RedditProvider):
    """Production Reddit provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_reddit_client(self, settings: Settings) -> RedditClient:
        """Provide Reddit API client."""
        instrument_httpx()
        return RealRedditClient(
            base_url=settings.reddit.base_url,
            user_agent=settings.reddit.user_agent,
            default_limit=settings.reddit.default_limit,
            comments_limit=settings.reddit.comments_limit,
            timeout=settings.reddit.timeout_seconds,
        )
