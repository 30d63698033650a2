"""AI summary service."""

from logging import getLogger

from app.clients.ai_client import AiClient
from app.configs import file_logger, settings
from app.errors.blog import BlogNotFoundError, EmptyContentError, SummaryExistsError
from app.repositories import BlogRepository

logger = file_logger(getLogger(__name__))


def build_prompt(content: str, template: str | None = None) -> str:
    """Fill the summary prompt template with the post content."""
    return (template or settings.AI_SUMMARY_PROMPT).replace("{content}", content)


class SummaryService:
    """Generates a post summary once and lets it be cleared again."""

    def __init__(self, blog_repo: BlogRepository, ai_client: AiClient) -> None:
        self.blog_repo = blog_repo
        self.ai_client = ai_client

    async def generate(self, blog_id: int, content: str | None) -> str:
        """
        Summarize a post and store the result.

        The model is only called for an existing blog without a summary.

        Args:
            blog_id: Blog ID.
            content: Raw post content.

        Returns:
            str: The stored summary.

        Raises:
            EmptyContentError: If no content was sent.
            BlogNotFoundError: If the blog does not exist.
            SummaryExistsError: If the blog already has a summary.
            AiError: If the model call fails.
        """
        if not content:
            raise EmptyContentError

        blog = await self.blog_repo.get_by_id(blog_id)
        if blog is None:
            raise BlogNotFoundError
        if blog.ai_summary is not None:
            raise SummaryExistsError

        summary = await self.ai_client.generate_text(build_prompt(content))

        # Another request may have stored one while the model was running
        if not await self.blog_repo.set_summary_if_absent(blog_id, summary):
            raise SummaryExistsError

        logger.info(f"Summary generated for blog {blog_id} ({len(summary)} chars)")
        return summary

    async def delete(self, blog_id: int) -> None:
        """
        Clear a blog's summary.

        Raises:
            BlogNotFoundError: If the blog does not exist.
        """
        if not await self.blog_repo.clear_summary(blog_id):
            raise BlogNotFoundError
