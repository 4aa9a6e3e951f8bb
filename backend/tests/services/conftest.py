"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db, the rate limiter and the mail sender are overridden per test,
      so no test sees another test's rate-limit entries or emails
    - db_manager patched for the readiness probe, which bypasses get_db
"""

import time

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import portfolio_api.infrastructure.database as db_module
from portfolio_api.api.dependencies import get_notification_sender, get_rate_limiter
from portfolio_api.db.base import Base
from portfolio_api.infrastructure.database import DatabaseSessionManager, get_db
from portfolio_api.infrastructure.rate_limit_store import InMemoryRateLimitStore
from portfolio_api.main import app
from tests.services.fake_mail import FakeMailSender


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def rate_limit_store():
    return InMemoryRateLimitStore(window_ms=30_000)


@pytest.fixture
def mail_sender():
    return FakeMailSender()


@pytest.fixture
async def client(test_engine, test_session_factory, rate_limit_store, mail_sender):
    """FastAPI test client with DB, limiter and sender overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limit_store
    app.dependency_overrides[get_notification_sender] = lambda: mail_sender

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def contact_payload():
    """Build a contact-form body that passes every gate check."""
    def _build(**overrides):
        payload = {
            "name": "Ada Lovelace",
            "subject": "Collaboration idea",
            "message": "I would like to discuss a project with you.",
            "captchaAnswer": "7",
            "captchaExpected": 7,
            "formStartTime": int(time.time() * 1000) - 10_000,
            "website": "",
        }
        payload.update(overrides)
        return payload
    return _build
