# app/middleware/middleware.py
"""
Middleware components for the Dynablog backend.

This module contains middleware for security headers, request logging and
CORS handling, plus the lifespan event handler that creates the database
tables and the AI client on startup and releases them on shutdown.
"""

from asyncio import get_event_loop
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import basicConfig, getLogger
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.logging import RichHandler
from rich.traceback import install
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import Receive, Scope, Send
from uvloop import Loop

from app.clients.ai_client import AiClient
from app.configs import file_logger, settings
from app.db import close_db, init_db
from app.utils.helpers import get_summary, host

# --- Logging Configuration ---
basicConfig(
    level="DEBUG" if settings.DEBUG else "INFO",
    format="%(message)s",
    datefmt="%X",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = file_logger(getLogger("rich"))

install()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events with service initialization."""
    # Startup
    logger.info(f"Starting {app.title}...")
    logger.info(f"{app.description}")

    try:
        if settings.LOG_TO_FILE:
            logger.info(f"Logging to file enabled: {settings.LOG_FILE}")

        await init_db()

        logger.info(f"is uvloop: {type(get_event_loop()) is Loop}")

        app.state.ai_client = AiClient()
        if app.state.ai_client.client is not None:
            logger.info("AI client initialized successfully.")

        logger.info(f"Blog id strategy: {settings.BLOG_ID_STRATEGY}")
        logger.info("Services initialized successfully")
        logger.info("  - API Documentation: http://localhost:8000/docs")
        logger.info("  - Health Check: http://localhost:8000/health")

    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title}...")

    try:
        if ai_client := getattr(app.state, "ai_client", None):
            await ai_client.close()
        await close_db()
        logger.info("Services cleaned up successfully")

    except Exception:
        logger.exception("Error during service cleanup")


class ApiCORSMiddleware(CORSMiddleware):
    """CORS for the `/api` routes only; other paths pass through untouched."""

    prefix = "/api"

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        path = scope.get("path", "")
        is_api = path == self.prefix or path.startswith(f"{self.prefix}/")
        if scope["type"] == "http" and not is_api:
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the blog front-end origins."""
    app.add_middleware(
        ApiCORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
