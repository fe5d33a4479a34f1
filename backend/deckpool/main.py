"""deckpool API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DeckPoolError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Pool loaded on startup via lifespan; a load failure aborts startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Single uvicorn process: the pool lives in this process's memory
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deckpool.api.error_handlers import register_error_handlers
from deckpool.api.routes import deck, health
from deckpool.config import get_settings
from deckpool.infrastructure.observability import setup_logging
from deckpool.services.pool_service import init_pool

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    pool = init_pool(settings)
    logger.info(
        "deckpool API started",
        extra={
            "data_file": str(settings.data_file),
            "entry_count": pool.stats().total,
        },
    )
    yield
    logger.info("deckpool API shutting down")


app = FastAPI(title="deckpool API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(health.router)
app.include_router(deck.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "deckpool.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        workers=1,
    )
