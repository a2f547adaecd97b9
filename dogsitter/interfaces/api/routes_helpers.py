"""Helper utilities shared across API route handlers."""

from __future__ import annotations

from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def preflight_response() -> Response:
    """Bare ``ok`` answer to an ``OPTIONS`` request."""

    return Response(content="ok", status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


def json_response(content: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


def error_response(message: str, status_code: int) -> JSONResponse:
    """Return ``{"error": message}``, the only error shape the functions expose."""

    return json_response({"error": message}, status_code=status_code)


async def read_json_body(request: Request) -> Any:
    """Decode the request body, raising ``ValueError`` when it is not JSON."""

    return await request.json()


__all__ = [
    "CORS_HEADERS",
    "error_response",
    "json_response",
    "preflight_response",
    "read_json_body",
]
