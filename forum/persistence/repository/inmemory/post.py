"""In-memory post repository for testing."""

from typing import Optional

from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId, SubredditId, UserId
from forum.persistence.repository.inmemory.comment import InMemoryCommentRepository


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Given the comment store, deleting a post removes its comments too.
    """

    def __init__(self, comments: Optional[InMemoryCommentRepository] = None) -> None:
        self._posts: dict[PostId, Post] = {}
        self._comments = comments

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self, subreddit_id: Optional[SubredditId] = None) -> list[Post]:
        """Find posts, in insertion order."""
        posts = list(self._posts.values())

        if subreddit_id is not None:
            posts = [p for p in posts if p.subreddit_id == subreddit_id]

        return posts

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find a user's posts, newest first."""
        posts = [p for p in self._posts.values() if p.author_id == author_id]
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its comments."""
        if self._posts.pop(post_id, None) is None:
            return False
        if self._comments is not None:
            self._comments.delete_by_post(post_id)
        return True
