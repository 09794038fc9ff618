# inject_kernel/web/errors.py
"""
JSON error envelope for the example server
──────────────────────────────────────────────
• database failures          → 503 DB_UNAVAILABLE
• injection done per request → 500 INJECTION_FAILED (names the failing step)
• anything else              → 500 SERVER_ERROR
Startup injection errors never get here: create_app() raises them.
"""
from __future__ import annotations
import logging
from fastapi import Request, FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from inject_kernel.di import InjectError

logger = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    body = {"error": {"code": code, "message": message, "path": request.url.path}}
    return JSONResponse(body, status_code=status_code)


async def exception_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except SQLAlchemyError as e:
        logger.exception("database error on %s", request.url.path)
        return error_response(request, 503, "DB_UNAVAILABLE", type(e).__name__)
    except InjectError as e:
        logger.error("injection failed on %s: %s", request.url.path, e)
        return error_response(request, 500, "INJECTION_FAILED", type(e).__name__)
    except Exception:
        logger.exception("unexpected error on %s", request.url.path)
        return error_response(request, 500, "SERVER_ERROR", "Unexpected error")


def add_error_handlers(app: FastAPI) -> None:
    """Attach the envelope middleware; add it last so it wraps every other middleware."""
    app.middleware("http")(exception_middleware)
    logger.debug("global error handlers registered")
