# app/main.py

import logging
from contextlib import asynccontextmanager

from anyio import to_thread
from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.persons import router as persons_router
from app.config import get_settings
from app.db.engine import dispose_engine, get_engine
from app.models.persons import MessageOut
from app.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    # Sync handlers run in anyio's worker threads
    to_thread.current_default_thread_limiter().total_tokens = settings.threads
    # Build the pool before the first request reaches a worker thread
    get_engine()
    logger.info("Pessoas API starting on port %s", settings.port)
    yield
    dispose_engine()
    logger.info("Pessoas API shutting down")


app = FastAPI(
    title="Pessoas API",
    version="0.1.0",
    lifespan=lifespan,
)

@app.get("/health-check", response_model=MessageOut)
def health_check():
    return {"message": "ok"}

app.include_router(persons_router)
register_error_handlers(app)
