"""Create post use case."""

from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model.common import utc_now
from forum.domain.model.post import Post
from forum.domain.service import PostService
from forum.domain.value import ContentType, PostId, SubredditId, UserId

from .post_item import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    subreddit_id: str
    author_id: str  # Resolved by the identity provider
    title: str
    content_type: ContentType = ContentType.TEXT
    content: str  # Body text, or a URL for image/video/link posts


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostItem


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The new post, with an empty tally

        Raises:
            ValueError: If an ID is malformed or the post fails validation
        """
        with logfire.span(
            "create_post.execute",
            subreddit_id=request.subreddit_id,
            content_type=request.content_type.value,
        ):
            post = Post(
                id=PostId(uuid4()),
                subreddit_id=SubredditId(UUID(request.subreddit_id)),
                author_id=UserId(UUID(request.author_id)),
                title=request.title,
                content_type=request.content_type,
                content=request.content,
                created_at=utc_now(),
            )

            saved_post = await self.post_service.save_post(post)

            logfire.info("Post created successfully", post_id=str(saved_post.id))

            return CreatePostResponse(post=PostItem.from_post(saved_post))
