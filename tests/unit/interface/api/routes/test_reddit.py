"""Unit tests for the Reddit proxy routes."""

import pytest
from dishka import Provider, Scope, provide
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from forum.adapter.reddit import MockRedditClient, RedditAPIError, RedditClient
from tests.di import build_test_container
from tests.harness import create_test_app


class FailingRedditClient(MockRedditClient):
    """Reddit client whose every call fails upstream."""

    async def get_listing(self, sort, subreddit=None, params=None):
        raise RedditAPIError("Reddit returned 503", status_code=503)

    async def search(self, params=None):
        raise RedditAPIError("Reddit request failed")


class RedditOverrideProvider(Provider):
    def __init__(self, reddit_client: RedditClient):
        super().__init__()
        self.reddit_client = reddit_client

    @provide(scope=Scope.APP)
    def get_reddit_client(self) -> RedditClient:
        return self.reddit_client


def make_client(reddit_client: RedditClient) -> TestClient:
    container = build_test_container(
        extra_providers=[RedditOverrideProvider(reddit_client), FastapiProvider()]
    )
    return TestClient(create_test_app(container))


@pytest.fixture
def reddit_client() -> MockRedditClient:
    return MockRedditClient()


@pytest.fixture
def client(reddit_client):
    with make_client(reddit_client) as test_client:
        yield test_client


class TestRedditRoutes:
    """Listings are proxied with their query parameters."""

    def test_front_page_forwards_query(self, client, reddit_client):
        # Act
        response = client.get("/reddit/posts/top", params={"t": "week", "limit": 5})

        # Assert
        assert response.status_code == 200
        assert response.json()["kind"] == "Listing"
        assert reddit_client.calls == [
            ("get_listing", {"sort": "top", "subreddit": None, "t": "week", "limit": "5"})
        ]

    def test_subreddit_listing(self, client, reddit_client):
        response = client.get("/reddit/r/python/new", params={"after": "t3_x"})

        assert response.status_code == 200
        assert reddit_client.calls[-1] == (
            "get_listing",
            {"sort": "new", "subreddit": "python", "after": "t3_x"},
        )

    def test_subreddit_about_is_not_a_listing(self, client, reddit_client):
        response = client.get("/reddit/r/python/about")

        assert response.status_code == 200
        assert response.json()["data"]["display_name"] == "python"
        assert reddit_client.calls[-1] == (
            "get_subreddit_about",
            {"subreddit": "python"},
        )

    def test_comments(self, client, reddit_client):
        response = client.get("/reddit/r/python/comments/abc123")

        assert response.status_code == 200
        assert len(response.json()) == 2
        assert reddit_client.calls[-1][0] == "get_comments"

    def test_post_popular_and_search(self, client, reddit_client):
        assert client.get("/reddit/by_id/t3_abc").status_code == 200
        assert client.get("/reddit/subreddits/popular").status_code == 200
        assert client.get("/reddit/search", params={"q": "fastapi"}).status_code == 200

        assert [name for name, _ in reddit_client.calls] == [
            "get_post",
            "get_popular_subreddits",
            "search",
        ]
        assert reddit_client.calls[-1][1] == {"q": "fastapi"}

    @pytest.mark.parametrize(
        "path", ["/reddit/posts/TOP", "/reddit/r/bad-name/hot", "/reddit/by_id/t3.x"]
    )
    def test_unsafe_path_segments_are_rejected(self, client, reddit_client, path):
        response = client.get(path)

        assert response.status_code == 422
        assert reddit_client.calls == []


class TestRedditFailures:
    """Upstream failures surface as 502."""

    def test_listing_failure_returns_502(self):
        with make_client(FailingRedditClient()) as client:
            response = client.get("/reddit/posts/hot")

        assert response.status_code == 502
        assert response.json()["detail"] == "Failed to fetch posts from Reddit"

    def test_search_failure_returns_502(self):
        with make_client(FailingRedditClient()) as client:
            response = client.get("/reddit/search", params={"q": "x"})

        assert response.status_code == 502
