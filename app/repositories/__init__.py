"""Repository layer for database operations."""

from app.repositories.base import MAX_ID, in_id_range
from app.repositories.blog import BlogRepository, split_likes
from app.repositories.comment import CommentRepository

__all__ = ["MAX_ID", "BlogRepository", "CommentRepository", "in_id_range", "split_likes"]
