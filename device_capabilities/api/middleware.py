"""
Request logging and error envelopes shared by every route.
"""

import logging
import time
import traceback
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from device_capabilities.core.config import Settings

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def error_body(message: str, stack: Optional[str] = None) -> dict:
    error = {"message": message}
    if stack is not None:
        error["stack"] = stack
    return {"error": error}


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        # 未處理的例外由外層處理器轉為 500
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.info(f"{request.method} {request.url.path} - 500 ({elapsed_ms}ms)")
        raise
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    logger.info(
        f"{request.method} {request.url.path} - {response.status_code} ({elapsed_ms}ms)"
    )
    return response


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the HTTP error envelope and the catch-all 500 handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        if settings.is_development:
            stack = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )
            content = error_body(str(exc), stack)
        else:
            content = error_body(INTERNAL_ERROR_MESSAGE)
        return JSONResponse(status_code=500, content=content)
