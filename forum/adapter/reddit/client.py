"""Client for the public Reddit JSON API.

Listings fetched here are passed through to the web client unchanged, so
real Reddit content can be browsed next to local posts.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

import httpx
import logfire

from forum.adapter.error import ProviderError

JSONPayload = Any
QueryParams = Mapping[str, Any]


class RedditAPIError(ProviderError):
    """Reddit API request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class RedditClient(ABC):
    """Read-only access to Reddit listings."""

    @abstractmethod
    async def get_listing(
        self,
        sort: str,
        subreddit: Optional[str] = None,
        params: Optional[QueryParams] = None,
    ) -> JSONPayload:
        """Fetch a front page or subreddit listing (hot, new, top, ...)."""
        pass

    @abstractmethod
    async def get_post(self, post_id: str) -> JSONPayload:
        """Fetch a single post by its fullname (e.g. ``t3_abc123``)."""
        pass

    @abstractmethod
    async def get_comments(
        self,
        subreddit: str,
        post_id: str,
        params: Optional[QueryParams] = None,
    ) -> JSONPayload:
        """Fetch a post together with its comment tree."""
        pass

    @abstractmethod
    async def get_subreddit_about(self, subreddit: str) -> JSONPayload:
        """Fetch a subreddit's description and metadata."""
        pass

    @abstractmethod
    async def get_popular_subreddits(
        self, params: Optional[QueryParams] = None
    ) -> JSONPayload:
        """Fetch the popular subreddits listing."""
        pass

    @abstractmethod
    async def search(self, params: Optional[QueryParams] = None) -> JSONPayload:
        """Search posts across Reddit."""
        pass


def build_params(
    defaults: QueryParams, overrides: Optional[QueryParams] = None
) -> dict[str, Any]:
    """Merge caller params over defaults, dropping empty values.

    ``raw_json=1`` is always sent so Reddit does not HTML-escape bodies.

    Args:
        defaults: Default query parameters
        overrides: Caller-supplied parameters (take precedence)

    Returns:
        Query parameters to send
    """
    merged = {"raw_json": 1, **defaults, **(overrides or {})}
    return {key: value for key, value in merged.items() if value is not None}


class RealRedditClient(RedditClient):
    """Reddit client backed by httpx."""

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        default_limit: int = 25,
        comments_limit: int = 100,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize Reddit client.

        Args:
            base_url: Reddit API root
            user_agent: User-Agent header (Reddit rejects generic agents)
            default_limit: Default page size for listings
            comments_limit: Default number of comments per thread
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.default_limit = default_limit
        self.comments_limit = comments_limit
        self.timeout = timeout
        self._transport = transport

    async def _get(self, path: str, params: QueryParams) -> JSONPayload:
        """Issue a GET and decode the JSON body.

        Raises:
            RedditAPIError: On transport errors, non-2xx responses or bad JSON
        """
        with logfire.span("reddit_client.get", path=path):
            try:
                async with httpx.AsyncClient(
                    base_url=self.base_url,
                    headers={"User-Agent": self.user_agent},
                    timeout=self.timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.get(path, params=params)
            except httpx.HTTPError as e:
                logfire.error("Reddit request failed", path=path, error=str(e))
                raise RedditAPIError(f"Reddit request failed: {e}") from e

            if response.status_code != 200:
                logfire.error(
                    "Reddit returned an error",
                    path=path,
                    status_code=response.status_code,
                )
                raise RedditAPIError(
                    f"Reddit returned {response.status_code} for {path}",
                    status_code=response.status_code,
                )

            try:
                return response.json()
            except ValueError as e:
                logfire.error("Reddit returned invalid JSON", path=path)
                raise RedditAPIError(f"Invalid JSON from Reddit for {path}") from e

    async def get_listing(
        self,
        sort: str,
        subreddit: Optional[str] = None,
        params: Optional[QueryParams] = None,
    ) -> JSONPayload:
        """Fetch a front page or subreddit listing."""
        path = f"/r/{subreddit}/{sort}.json" if subreddit else f"/{sort}.json"
        return await self._get(
            path, build_params({"limit": self.default_limit}, params)
        )

    async def get_post(self, post_id: str) -> JSONPayload:
        """Fetch a single post by fullname."""
        return await self._get(f"/by_id/{post_id}.json", build_params({}))

    async def get_comments(
        self,
        subreddit: str,
        post_id: str,
        params: Optional[QueryParams] = None,
    ) -> JSONPayload:
        """Fetch a post with its comments."""
        return await self._get(
            f"/r/{subreddit}/comments/{post_id}.json",
            build_params({"limit": self.comments_limit}, params),
        )

    async def get_subreddit_about(self, subreddit: str) -> JSONPayload:
        """Fetch subreddit metadata."""
        return await self._get(f"/r/{subreddit}/about.json", build_params({}))

    async def get_popular_subreddits(
        self, params: Optional[QueryParams] = None
    ) -> JSONPayload:
        """Fetch popular subreddits."""
        return await self._get(
            "/subreddits/popular.json",
            build_params({"limit": self.default_limit}, params),
        )

    async def search(self, params: Optional[QueryParams] = None) -> JSONPayload:
        """Search Reddit (no default limit, as Reddit applies its own)."""
        return await self._get("/search.json", build_params({}, params))


class MockRedditClient(RedditClient):
    """Mock Reddit client for testing.

    Returns small, deterministic listings and records every call.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _listing(self, *names: str) -> JSONPayload:
        return {
            "kind": "Listing",
            "data": {
                "after": None,
                "before": None,
                "children": [
                    {"kind": "t3", "data": {"name": name, "title": f"Mock {name}"}}
                    for name in names
                ],
            },
        }

    async def get_listing(
        self,
        sort: str,
        subreddit: Optional[str] = None,
        params: Optional[QueryParams] = None,
    ) -> JSONPayload:
        self.calls.append(
            ("get_listing", {"sort": sort, "subreddit": subreddit, **(params or {})})
        )
        return self._listing("t3_mock1", "t3_mock2")

    async def get_post(self, post_id: str) -> JSONPayload:
        self.calls.append(("get_post", {"post_id": post_id}))
        return self._listing(post_id)

    async def get_comments(
        self,
        subreddit: str,
        post_id: str,
        params: Optional[QueryParams] = None,
    ) -> JSONPayload:
        self.calls.append(
            (
                "get_comments",
                {"subreddit": subreddit, "post_id": post_id, **(params or {})},
            )
        )
        return [
            self._listing(f"t3_{post_id}"),
            {"kind": "Listing", "data": {"children": []}},
        ]

    async def get_subreddit_about(self, subreddit: str) -> JSONPayload:
        self.calls.append(("get_subreddit_about", {"subreddit": subreddit}))
        return {
            "kind": "t5",
            "data": {"display_name": subreddit, "subscribers": 0},
        }

    async def get_popular_subreddits(
        self, params: Optional[QueryParams] = None
    ) -> JSONPayload:
        self.calls.append(("get_popular_subreddits", dict(params or {})))
        return {"kind": "Listing", "data": {"children": []}}

    async def search(self, params: Optional[QueryParams] = None) -> JSONPayload:
        self.calls.append(("search", dict(params or {})))
        return self._listing("t3_search1")
