"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.post import Post
from forum.domain.value import PostId, SubredditId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, subreddit_id: Optional[SubredditId] = None) -> List[Post]:
        """Find the candidate posts of a listing.

        Ranking happens in memory after tallying, so no ordering or
        pagination is applied here.

        Args:
            subreddit_id: Restrict to one subreddit (None for all)

        Returns:
            Posts matching the filter
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find every post written by a user, newest first.

        Args:
            author_id: The author's user ID

        Returns:
            The author's posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its comments (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass
