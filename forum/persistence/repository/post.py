"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId, SubredditId, UserId
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_all(self, subreddit_id: Optional[SubredditId] = None) -> List[Post]:
        """Find the candidate posts of a listing."""
        with logfire.span(
            "post_repository.find_all",
            subreddit_id=str(subreddit_id) if subreddit_id else None,
        ):
            stmt = select(posts_table)

            if subreddit_id is not None:
                stmt = stmt.where(posts_table.c.subreddit_id == subreddit_id)

            stmt = stmt.order_by(posts_table.c.created_at.desc(), posts_table.c.id)

            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find every post written by a user, newest first."""
        with logfire.span("post_repository.find_by_author", author_id=str(author_id)):
            stmt = (
                select(posts_table)
                .where(posts_table.c.author_id == author_id)
                .order_by(posts_table.c.created_at.desc(), posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            existing = await self.find_by_id(post.id)
            post_dict = post_to_dict(post)

            if existing:
                logfire.info("Updating existing post", post_id=str(post.id))
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                logfire.info(
                    "Inserting new post",
                    post_id=str(post.id),
                    subreddit_id=str(post.subreddit_id),
                )
                stmt = posts_table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete, comments cascade)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
