"""Post domain service."""

from typing import Optional

import logfire

from forum.domain.model.post import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, SubredditId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def list_posts(
        self, subreddit_id: Optional[SubredditId] = None
    ) -> list[Post]:
        """List the posts of a subreddit, or of every subreddit.

        Args:
            subreddit_id: Subreddit to restrict to (None for all)

        Returns:
            Unranked posts without vote totals
        """
        with logfire.span(
            "post_service.list_posts",
            subreddit_id=str(subreddit_id) if subreddit_id else None,
        ):
            posts = await self.post_repository.find_all(subreddit_id=subreddit_id)
            logfire.info("Posts fetched", count=len(posts))
            return posts

    async def list_posts_by_author(self, author_id: UserId) -> list[Post]:
        """List a user's posts, newest first, without vote totals."""
        with logfire.span(
            "post_service.list_posts_by_author", author_id=str(author_id)
        ):
            posts = await self.post_repository.find_by_author(author_id)
            logfire.info("Author posts fetched", count=len(posts))
            return posts

    async def delete_post(self, post_id: PostId) -> bool:
        """Hard-delete a post.

        Args:
            post_id: Post ID

        Returns:
            True if the post existed
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            if deleted:
                logfire.info("Post deleted", post_id=str(post_id))
            else:
                logfire.warn("Post to delete not found", post_id=str(post_id))
            return deleted
