"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Dynablog backend application.
"""

from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# Response constants
DEFAULT_ERROR_MESSAGE = "Internal Server Error"

# AI Model Configuration
GEMINI_MODEL = "gemini-2.0-flash"

SUMMARY_PROMPT = """
请概括一下这篇文章的内容：

{content}
"""


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Dynablog Backend"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    LOG_TO_FILE: bool = True
    LOG_FILE: str = "logs/app.log"

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./dynablog.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30
    POOL_RECYCLE: int = 1800

    # HTTP surface
    CORS_ORIGINS: list[str] = [
        "https://nickchen.top",
        "localhost:5173",
        "https://www.nickchen.top",
    ]
    # "auto": POST /blog/bind_new, "explicit": POST /blog/{id}/context
    BLOG_ID_STRATEGY: Literal["auto", "explicit", "both"] = "both"
    CLIENT_IP_HEADER: str = "CF-Connecting-IP"

    # AI Configuration
    GEMINI_API_KEY: str | None = None
    AI_MODEL: str = GEMINI_MODEL
    AI_SUMMARY_PROMPT: str = SUMMARY_PROMPT
    AI_MAX_OUTPUT_TOKENS: int = 2048
    AI_TEMPERATURE: float = 0.7
    AI_REQUEST_TIMEOUT: int = 60  # seconds
    AI_MAX_RETRIES: int = 2
    AI_RETRY_DELAY: float = 1.0  # seconds


settings = Settings()


def file_logger(logger: Logger) -> Logger:
    """
    Attach the shared rotating JSON file handler to a logger.

    Does nothing when file logging is disabled or the handler is already
    attached, so it is safe to call at import time of every module.

    Args:
        logger: Logger to extend.

    Returns:
        The same logger, for chaining.
    """
    if not settings.LOG_TO_FILE:
        return logger

    log_file = Path(settings.LOG_FILE)
    if any(
        isinstance(h, RotatingFileHandler) and Path(h.baseFilename) == log_file.resolve()
        for h in logger.handlers
    ):
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.setLevel(INFO)
    handler.setFormatter(JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger
