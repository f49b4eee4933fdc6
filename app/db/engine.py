# app/db/engine.py

import logging
import threading
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from app.config import get_settings

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
_engine_lock = threading.Lock()


def build_engine(url, pool_size: int) -> Engine:
    """
    Create an engine with a fixed-size pool.

    Checkouts beyond pool_size wait for a free connection instead of opening more.
    """
    if make_url(url).get_backend_name() == "sqlite":
        # SQLite picks its own pool class
        return create_engine(url, future=True)

    return create_engine(
        url,
        future=True,
        pool_size=pool_size,
        max_overflow=0,
        pool_pre_ping=True,
    )


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        with _engine_lock:
            # Another thread may have built it while we waited
            if _engine is None:
                settings = get_settings()
                _engine = build_engine(settings.store_url, settings.pool_size)
                logger.info("Database engine created (pool_size=%s)", settings.pool_size)
    return _engine


def dispose_engine() -> None:
    global _engine
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
            _engine = None
