"""Comment service: visitor comments and their weak ownership check."""

from logging import getLogger

from app.configs import file_logger
from app.errors.blog import BlogNotFoundError, CommentForbiddenError, CommentNotFoundError
from app.models import CommentDB
from app.repositories import BlogRepository, CommentRepository, in_id_range

logger = file_logger(getLogger(__name__))


class CommentService:
    """
    Visitor comment operations.

    Ownership is the encoded visitor IP stored on the comment; anyone who
    presents the same apparent address can delete it.
    """

    def __init__(self, blog_repo: BlogRepository, comment_repo: CommentRepository) -> None:
        self.blog_repo = blog_repo
        self.comment_repo = comment_repo

    async def create_comment(
        self,
        blog_id: int,
        visitor_token: str,
        value: str,
        parent: int | None = None,
        *,
        is_visitor: bool = True,
    ) -> CommentDB:
        """
        Add a comment to a blog.

        Raises:
            BlogNotFoundError: If the blog does not exist.
            NotImplementedError: For account comments, which are not supported yet.
        """
        # A parent id no row can have makes the comment top level
        if parent is not None and not in_id_range(parent):
            parent = None
        if not await self.blog_repo.exists(blog_id):
            raise BlogNotFoundError
        if not is_visitor:
            raise NotImplementedError("Not implemented")
        return await self.comment_repo.create_visitor_comment(
            blog_id,
            visitor_token,
            value,
            parent=parent,
        )

    async def delete_visitor_comment(
        self,
        blog_id: int,
        comment_id: int | None,
        visitor_token: str,
    ) -> None:
        """
        Delete a comment written from the same apparent address.

        Raises:
            CommentNotFoundError: If the comment is missing from this blog.
            CommentForbiddenError: If the visitor token does not match.
        """
        if comment_id is None:
            raise CommentNotFoundError
        comment = await self.comment_repo.get_by_id(comment_id)
        if comment is None or comment.comment_pool != blog_id:
            raise CommentNotFoundError
        if comment.visitor_ip != visitor_token:
            logger.warning(f"Rejected deletion of comment {comment_id} by {visitor_token}")
            raise CommentForbiddenError

        await self.comment_repo.delete(comment_id)
