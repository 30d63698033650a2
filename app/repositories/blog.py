"""Blog repository for database operations."""

from logging import getLogger

from sqlalchemy import case, literal, select, update

from app.configs import file_logger
from app.models.blog import BlogDB
from app.models.comment import CommentDB
from app.repositories.base import BaseRepository, in_id_range

logger = file_logger(getLogger(__name__))


def split_likes(likes: str | None) -> list[str]:
    """Return the visitor tokens stored in a comma-joined like list."""
    return [token for token in (likes or "").split(",") if token]


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Writes that depend on the current row state (like-append, summary
    persist) are single conditional UPDATE statements, so concurrent requests
    cannot both pass the check.
    """

    model = BlogDB

    async def get_by_link(self, post_link: str) -> BlogDB | None:
        """
        Get blog by post link.

        Args:
            post_link: Link of the post on the static site

        Returns:
            BlogDB | None: Blog if found, None otherwise
        """
        return await self.get_by_field("post_link", post_link)

    async def get_with_comments(self, blog_id: int) -> tuple[BlogDB, list[CommentDB]] | None:
        """
        Load a blog and its comment pool in one outer-joined read.

        Args:
            blog_id: Blog ID

        Returns:
            The blog and its comments ordered by id, or None if the blog is missing.
        """
        if not in_id_range(blog_id):
            return None
        statement = (
            select(BlogDB, CommentDB)
            .outerjoin(CommentDB, CommentDB.comment_pool == BlogDB.id)
            .where(BlogDB.id == blog_id)
            .order_by(CommentDB.id)
        )
        result = await self.session.execute(statement)
        rows = result.all()
        if not rows:
            return None

        blog = rows[0][0]
        comments = [comment for _, comment in rows if comment is not None]
        return blog, comments

    async def create(
        self,
        post_link: str,
        title: str | None = None,
        blog_id: int | None = None,
    ) -> BlogDB:
        """
        Create a new blog record.

        Args:
            post_link: Unique link of the post
            title: Optional title
            blog_id: Explicit id, auto-incremented when None

        Returns:
            BlogDB: Created blog

        Raises:
            DuplicateEntryError: If the link or id already exists
            DatabaseError: For other database errors
        """
        db_blog = BlogDB(id=blog_id, post_link=post_link, title=title, likes="")
        db_blog = await self._add_and_refresh(db_blog)
        logger.info(f"Blog {db_blog.id} bound to {post_link}")
        return db_blog

    async def add_like(self, blog_id: int, token: str) -> bool:
        """
        Append a visitor token to the like list unless it is already there.

        Args:
            blog_id: Blog ID
            token: Encoded visitor IP

        Returns:
            bool: True if the token was added, False if the row was not
            updated (token present or blog missing).
        """
        if not in_id_range(blog_id):
            return False
        padded = literal(",") + BlogDB.likes + literal(",")
        statement = (
            update(BlogDB)
            .where(BlogDB.id == blog_id)
            .where(~padded.contains(f",{token},"))
            .values(likes=case((BlogDB.likes == "", token), else_=BlogDB.likes + "," + token))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        return result.rowcount > 0

    async def get_likes(self, blog_id: int) -> list[str]:
        """
        Read the current like list straight from the database.

        Args:
            blog_id: Blog ID

        Returns:
            list[str]: Visitor tokens in like order
        """
        if not in_id_range(blog_id):
            return []
        result = await self.session.execute(select(BlogDB.likes).where(BlogDB.id == blog_id))
        return split_likes(result.scalar_one_or_none())

    async def set_summary_if_absent(self, blog_id: int, summary: str) -> bool:
        """
        Store an AI summary only while none is present.

        Returns:
            bool: True if the summary was stored.
        """
        if not in_id_range(blog_id):
            return False
        statement = (
            update(BlogDB)
            .where(BlogDB.id == blog_id)
            .where(BlogDB.ai_summary.is_(None))
            .values(ai_summary=summary)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        return result.rowcount > 0

    async def clear_summary(self, blog_id: int) -> bool:
        """
        Reset the AI summary to null.

        Returns:
            bool: True if the blog exists.
        """
        if not in_id_range(blog_id):
            return False
        statement = (
            update(BlogDB)
            .where(BlogDB.id == blog_id)
            .values(ai_summary=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        return result.rowcount > 0
