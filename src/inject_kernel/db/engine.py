# inject_kernel/db/engine.py
"""
Engine construction for the example server
────────────────────────────────────────────
The engine is built once at startup and handed to the registry;
handlers receive it by declaring an `Engine` parameter.
"""

from __future__ import annotations
import logging
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.pool import StaticPool

from inject_kernel.config.base_settings import AppSettings

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: AppSettings) -> Engine:
    """Create the application engine; in-memory SQLite shares one connection."""
    url = settings.database_url
    if url in ("sqlite://", "sqlite:///:memory:"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url, pool_pre_ping=True)
    logger.info("DB engine initialized for %s", engine.url.render_as_string(hide_password=True))
    return engine


def current_time(engine: Engine) -> str:
    """Ask the database for its clock."""
    with engine.connect() as conn:
        return str(conn.execute(text("select datetime('now')")).scalar_one())
