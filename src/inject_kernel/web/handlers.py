# inject_kernel/web/handlers.py
"""
Closure factories wired through the registry
──────────────────────────────────────────────────────────────
Each factory declares exactly what it needs; the registry calls it once
at startup and the returned closure serves every request.

    home(template, engine)   → GET /
    log_middleware(logger)   → HTTP middleware
    health(engine)           → /healthz, /dbz
──────────────────────────────────────────────────────────────
"""
from __future__ import annotations

import logging
import time
from string import Template
from typing import Awaitable, Callable

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from inject_kernel.db.engine import current_time

Handler = Callable[[Request], Response]
CallNext = Callable[[Request], Awaitable[Response]]
Middleware = Callable[[Request, CallNext], Awaitable[Response]]


# it's clear what home needs, and it's easy to hand it fakes
# sync handlers: FastAPI runs them in its threadpool, off the event loop
def home(template: Template, engine: Engine) -> Handler:
    def handler(request: Request) -> Response:
        now = current_time(engine)
        return HTMLResponse(template.safe_substitute(now=now))

    return handler


def log_middleware(logger: logging.Logger) -> Middleware:
    async def middleware(request: Request, call_next: CallNext) -> Response:
        logger.info("before: %s", request.url.path)
        response = await call_next(request)
        logger.info("after")
        return response

    return middleware


def health(engine: Engine) -> APIRouter:
    """Operational endpoints bound to the registered engine."""
    started = time.time()
    router = APIRouter(prefix="", tags=["system"])

    @router.get("/healthz")
    async def healthz():
        return {"ok": True, "uptime": round(time.time() - started, 1)}

    @router.get("/dbz")
    def db_health():
        try:
            return {"db_ok": True, "now": current_time(engine)}
        except SQLAlchemyError as e:
            return {"db_ok": False, "error": str(e)}

    return router
