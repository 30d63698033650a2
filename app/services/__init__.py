from app.services.blog import BlogService
from app.services.comment import CommentService
from app.services.summary import SummaryService, build_prompt

__all__ = ["BlogService", "CommentService", "SummaryService", "build_prompt"]
