"""Post routes."""

from typing import Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from forum.domain.error import DomainError, NotFoundError
from forum.domain.value import ContentType, SortMode, TimeWindow

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    subreddit_id: UUID
    author_id: UUID
    title: str = Field(min_length=1, max_length=300)
    content_type: ContentType = ContentType.TEXT
    content: str = Field(min_length=1, max_length=40000)


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a new post.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI

    Returns:
        Created post details

    Raises:
        HTTPException: If validation fails
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                subreddit_id=str(request.subreddit_id),
                author_id=str(request.author_id),
                title=request.title,
                content_type=request.content_type,
                content=request.content,
            )
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    sort: Optional[SortMode] = None,
    t: Optional[TimeWindow] = None,
    subreddit_id: Optional[UUID] = None,
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    user_id: Optional[UUID] = None,
) -> ListPostsResponse:
    """List ranked posts.

    Args:
        list_posts_use_case: List posts use case from DI
        sort: hot (default), new, top, rising or controversial
        t: Time window for top (hour, day, week, month, year, all)
        subreddit_id: Restrict to one subreddit (optional)
        limit: Page size, capped at the configured maximum
        offset: Number of ranked posts to skip
        user_id: Caller, to include their own votes (optional)

    Returns:
        One page of ranked posts
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                sort=sort,
                t=t,
                subreddit_id=str(subreddit_id) if subreddit_id else None,
                limit=limit,
                offset=offset,
                user_id=str(user_id) if user_id else None,
            )
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Invalid post listing request", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list posts",
        )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    user_id: Optional[UUID] = None,
) -> GetPostResponse:
    """Get a post by ID with its vote totals.

    Raises:
        HTTPException: If post not found
    """
    try:
        return await get_post_use_case.execute(
            GetPostRequest(
                post_id=str(post_id), user_id=str(user_id) if user_id else None
            )
        )
    except NotFoundError as e:
        logfire.warn("Post not found", post_id=str(post_id))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error fetching post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch post",
        )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Permanently delete a post with its comments and votes.

    Raises:
        HTTPException: If post not found
    """
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id))
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error deleting post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post",
        )
