# app/main.py

"""Dynablog Backend - dynamic features for a statically generated blog."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.configs import settings
from app.db import ping_db
from app.errors import (
    AiError,
    DatabaseError,
    ai_exception_handler,
    database_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.routes import blog_router, comments_router, summary_router, system_router
from app.schemas import HealthCheckResponse, ServicesStatus
from app.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Likes, visitor comments and AI summaries for a static blog",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
# Behind Cloudflare; the visitor address itself comes from CLIENT_IP_HEADER
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


routes = [
    system_router,
    blog_router,
    comments_router,
    summary_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (DatabaseError, database_exception_handler),
    (AiError, ai_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (StarletteHTTPException, http_exception_handler),
    (Exception, unhandled_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 00:00:00",
                        "services": {"database": "ok", "ai_client": "initialized"},
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check(request: Request) -> ORJSONResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        Health status of the database and the AI client.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "...", "services": { ... }}
    """
    database_ok = await ping_db()

    ai_client = getattr(request.app.state, "ai_client", None)
    ai_client_status = (
        "initialized" if ai_client is not None and ai_client.client is not None else "not_initialized"
    )

    health = HealthCheckResponse(
        version=app.version,
        status="ok" if database_ok else "degraded",
        timestamp=today_str(),
        services=ServicesStatus(
            database="ok" if database_ok else "unavailable",
            ai_client=ai_client_status,
        ),
    )

    return ORJSONResponse(health.model_dump())


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_class=PlainTextResponse,
    responses={
        200: {"content": {"text/plain": {"example": "Hello World from Dynablog"}}},
    },
    operation_id="root_access",
)
async def root() -> str:
    """Root endpoint."""
    return "Hello World from Dynablog"


if __name__ == "__main__":
    from uvicorn import run

    run(
        "app.main:app",
        host="127.0.0.1",
        port=8000,
        log_level="info",
        reload=True,
        loop="uvloop",
        http="httptools",
    )
