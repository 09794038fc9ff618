# src/inject_kernel/web/api.py
from __future__ import annotations
import logging
from string import Template
from typing import Optional

from fastapi import FastAPI

from inject_kernel.config.base_settings import AppSettings
from inject_kernel.db.engine import create_engine_from_settings
from inject_kernel.di import Registry, must, new
from inject_kernel.web.errors import add_error_handlers
from inject_kernel.web.handlers import health, home, log_middleware


"""
──────────────────────────────────────────────────────────────
inject_kernel.web.api
──────────────────────────────────────────────────────────────
Purpose:
    Example FastAPI server whose handlers are built by the registry.

Responsibilities:
    • deps(): build every long-lived dependency once, in one place
    • create_app(): ask the registry for each handler/middleware
    • Attach global error handlers
If a dependency changes, only the factory's signature and deps() change;
create_app() stays as it is.
──────────────────────────────────────────────────────────────
"""

logger = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def request_logger(settings: AppSettings) -> logging.Logger:
    """The logger handed to log_middleware; prefixed like the app's access log."""
    lg = logging.getLogger("inject_kernel.requests")
    if not lg.handlers:
        lg.addHandler(logging.StreamHandler())
        lg.propagate = False
    # the latest settings win, also when deps() runs again
    for handler in lg.handlers:
        handler.setFormatter(logging.Formatter(f"{settings.log_prefix}%(asctime)s %(message)s"))
    lg.setLevel(settings.log_level.upper())
    return lg


# ──────────────────────────────────────────────────────────────
# Dependencies
# ──────────────────────────────────────────────────────────────
def deps(settings: Optional[AppSettings] = None) -> Registry:
    """Get all the dependencies and return them in a Registry."""
    settings = settings or AppSettings()
    template = Template(settings.home_template)
    engine = create_engine_from_settings(settings)
    registry = new(settings, template, engine, request_logger(settings))
    logger.info("registry ready: %r", registry)
    return registry


# ──────────────────────────────────────────────────────────────
# App Factory
# ──────────────────────────────────────────────────────────────
def create_app(registry: Registry, *, title: str = "inject example") -> FastAPI:
    """
    Build the example app. Any injection failure raises here, at startup,
    never while serving a request.
    """
    app = FastAPI(title=title)

    app.add_api_route("/", must(registry.inject(home)), methods=["GET"])
    app.include_router(must(registry.inject(health)))

    app.middleware("http")(must(registry.inject(log_middleware)))
    add_error_handlers(app)

    logger.info("app '%s' ready", title)
    return app
