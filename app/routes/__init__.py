from app.routes.blog import router as blog_router
from app.routes.comments import router as comments_router
from app.routes.summary import router as summary_router
from app.routes.system import router as system_router

__all__ = [
    "blog_router",
    "comments_router",
    "summary_router",
    "system_router",
]
