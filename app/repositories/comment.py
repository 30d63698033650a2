"""Comment repository for database operations."""

from logging import getLogger

from app.configs import file_logger
from app.models.comment import CommentDB
from app.repositories.base import BaseRepository

logger = file_logger(getLogger(__name__))


class CommentRepository(BaseRepository[CommentDB]):
    """Repository for Comment database operations."""

    model = CommentDB

    async def create_visitor_comment(
        self,
        blog_id: int,
        visitor_token: str,
        value: str,
        parent: int | None = None,
    ) -> CommentDB:
        """
        Store a comment written by an anonymous visitor.

        Args:
            blog_id: Comment pool (blog ID)
            visitor_token: Encoded visitor IP, the only proof of ownership
            value: Comment text
            parent: Comment being replied to, stored unchecked

        Returns:
            CommentDB: Created comment with its id
        """
        db_comment = CommentDB(
            comment_pool=blog_id,
            parent=parent,
            is_visitor=True,
            visitor_ip=visitor_token,
            value=value,
        )
        db_comment = await self._add_and_refresh(db_comment)
        logger.info(f"Comment {db_comment.id} added to blog {blog_id}")
        return db_comment
