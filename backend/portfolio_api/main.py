"""Portfolio API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PortfolioError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Lifespan owns every long-lived object: DB engine, rate-limit store and its
      sweeper, mail sender. Nothing stateful is created at import time

Design Decisions:
    - Lifespan over @app.on_event: startup and shutdown live in one function
    - Store and sender parked on app.state and reached through dependencies,
      so tests swap them with dependency_overrides
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import portfolio_api.models  # noqa: F401  (populate Base.metadata)
from portfolio_api.api.error_handlers import register_error_handlers
from portfolio_api.api.routes import contact, health, projects, skills
from portfolio_api.config import get_settings
from portfolio_api.infrastructure.database import init_db
from portfolio_api.infrastructure.mail_sender import SmtpMailSender
from portfolio_api.infrastructure.observability import setup_logging
from portfolio_api.infrastructure.rate_limit_store import InMemoryRateLimitStore
from portfolio_api.infrastructure.rate_limit_sweeper import RateLimitSweeper

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_all()

    store = InMemoryRateLimitStore(
        window_ms=settings.contact_rate_limit_seconds * 1000,
    )
    sweeper = RateLimitSweeper(
        store,
        interval_seconds=settings.rate_limit_sweep_interval_seconds,
        max_age_seconds=settings.rate_limit_max_age_seconds,
    )
    app.state.rate_limit_store = store
    app.state.rate_limit_sweeper = sweeper
    app.state.mail_sender = SmtpMailSender.from_settings(settings)
    sweeper.start()
    logger.info("Portfolio API started")
    yield
    logger.info("Portfolio API shutting down")
    await sweeper.stop()
    await manager.dispose()


app = FastAPI(title="Portfolio API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(projects.router)
app.include_router(skills.router)
app.include_router(contact.router)

register_error_handlers(app)
