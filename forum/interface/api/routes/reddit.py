"""Reddit proxy routes.

Query parameters are forwarded to Reddit as-is (``after``, ``t``, ``q``,
``limit`` ...), so the web client can page through real listings.
"""

from typing import Annotated, Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Path, Request, status

from forum.adapter.reddit import RedditAPIError, RedditClient

router = APIRouter(prefix="/reddit", tags=["reddit"], route_class=DishkaRoute)

# Path segments are forwarded into Reddit URLs
Sort = Annotated[str, Path(pattern=r"^[a-z]+$")]
Name = Annotated[str, Path(pattern=r"^[A-Za-z0-9_]+$")]


def _bad_gateway(e: RedditAPIError, what: str) -> HTTPException:
    logfire.error("Failed to fetch {what} from Reddit", what=what, error=str(e))
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=f"Failed to fetch {what} from Reddit",
    )


@router.get("/posts/{sort}")
async def get_front_page(
    request: Request,
    reddit_client: FromDishka[RedditClient],
    sort: Sort,
) -> Any:
    """Front page listing (hot, new, top, rising, controversial)."""
    try:
        return await reddit_client.get_listing(
            sort, params=dict(request.query_params)
        )
    except RedditAPIError as e:
        raise _bad_gateway(e, "posts")


@router.get("/r/{subreddit}/about")
async def get_subreddit_about(
    reddit_client: FromDishka[RedditClient],
    subreddit: Name,
) -> Any:
    """Subreddit metadata."""
    try:
        return await reddit_client.get_subreddit_about(subreddit)
    except RedditAPIError as e:
        raise _bad_gateway(e, "subreddit info")


@router.get("/r/{subreddit}/comments/{post_id}")
async def get_comments(
    request: Request,
    reddit_client: FromDishka[RedditClient],
    subreddit: Name,
    post_id: Name,
) -> Any:
    """A post with its comment tree."""
    try:
        return await reddit_client.get_comments(
            subreddit, post_id, params=dict(request.query_params)
        )
    except RedditAPIError as e:
        raise _bad_gateway(e, "comments")


@router.get("/r/{subreddit}/{sort}")
async def get_subreddit_listing(
    request: Request,
    reddit_client: FromDishka[RedditClient],
    subreddit: Name,
    sort: Sort,
) -> Any:
    """Subreddit listing."""
    try:
        return await reddit_client.get_listing(
            sort, subreddit=subreddit, params=dict(request.query_params)
        )
    except RedditAPIError as e:
        raise _bad_gateway(e, "subreddit posts")


@router.get("/by_id/{post_id}")
async def get_post(
    reddit_client: FromDishka[RedditClient],
    post_id: Name,
) -> Any:
    """A single post by fullname (``t3_...``)."""
    try:
        return await reddit_client.get_post(post_id)
    except RedditAPIError as e:
        raise _bad_gateway(e, "post")


@router.get("/subreddits/popular")
async def get_popular_subreddits(
    request: Request,
    reddit_client: FromDishka[RedditClient],
) -> Any:
    """Popular subreddits."""
    try:
        return await reddit_client.get_popular_subreddits(
            params=dict(request.query_params)
        )
    except RedditAPIError as e:
        raise _bad_gateway(e, "popular subreddits")


@router.get("/search")
async def search(
    request: Request,
    reddit_client: FromDishka[RedditClient],
) -> Any:
    """Search Reddit posts (``q`` is required by Reddit)."""
    try:
        return await reddit_client.search(params=dict(request.query_params))
    except RedditAPIError as e:
        raise _bad_gateway(e, "search results")
