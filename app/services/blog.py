"""Blog service: blog records and their like lists."""

from logging import getLogger

from app.configs import file_logger
from app.errors.blog import AlreadyLikedError, BlogExistsError, BlogNotFoundError
from app.errors.database import DuplicateEntryError
from app.models import BlogDB, CommentDB
from app.repositories import BlogRepository

logger = file_logger(getLogger(__name__))


class BlogService:
    """Existence checks and writes for blog records."""

    def __init__(self, blog_repo: BlogRepository) -> None:
        self.blog_repo = blog_repo

    async def find_by_link(self, post_link: str) -> BlogDB | None:
        return await self.blog_repo.get_by_link(post_link)

    async def get_context(self, blog_id: int) -> tuple[BlogDB, list[CommentDB]]:
        """
        Get a blog with its comments.

        Raises:
            BlogNotFoundError: If the blog does not exist.
        """
        context = await self.blog_repo.get_with_comments(blog_id)
        if context is None:
            raise BlogNotFoundError
        return context

    async def bind(
        self,
        post_link: str,
        title: str | None = None,
        blog_id: int | None = None,
    ) -> BlogDB:
        """
        Create a blog record for a post link.

        Args:
            post_link: Unique link of the post.
            title: Optional title.
            blog_id: Explicit id; auto-incremented when None.

        Raises:
            BlogExistsError: If the link (or the explicit id) is taken.
        """
        if await self.blog_repo.get_by_link(post_link) is not None:
            raise BlogExistsError
        if blog_id is not None and await self.blog_repo.exists(blog_id):
            raise BlogExistsError

        try:
            return await self.blog_repo.create(post_link, title=title, blog_id=blog_id)
        except DuplicateEntryError as e:
            # Lost a race against a concurrent bind of the same link
            raise BlogExistsError from e

    async def delete(self, blog_id: int) -> None:
        """
        Delete a blog record. Its comments are left in place.

        Raises:
            BlogNotFoundError: If the blog does not exist.
        """
        if not await self.blog_repo.delete(blog_id):
            raise BlogNotFoundError
        logger.info(f"Blog {blog_id} deleted")

    async def like(self, blog_id: int, visitor_token: str) -> int:
        """
        Record a like from a visitor.

        Args:
            blog_id: Blog ID.
            visitor_token: Encoded visitor IP.

        Returns:
            int: Number of likes after this one.

        Raises:
            BlogNotFoundError: If the blog does not exist.
            AlreadyLikedError: If the visitor already liked the blog.
        """
        if not await self.blog_repo.exists(blog_id):
            raise BlogNotFoundError
        if not await self.blog_repo.add_like(blog_id, visitor_token):
            raise AlreadyLikedError
        return len(await self.blog_repo.get_likes(blog_id))
