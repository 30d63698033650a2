# app/routes/system.py

"""Liveness routes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/api", tags=["⚙️ System"])

PING_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route(
    "/ping",
    methods=PING_METHODS,
    response_class=PlainTextResponse,
    summary="Ping",
    operation_id="ping",
)
async def ping() -> str:
    return "pong"
