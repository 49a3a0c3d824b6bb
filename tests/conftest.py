"""Shared test fixtures."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from filmesapi.api.routes import cinemas, enderecos, filmes, health, sessoes
from filmesapi.database import get_db
from filmesapi.exceptions.handlers import register_exception_handlers
from filmesapi.models import Base


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh in-memory SQLite database per test, shared by every session."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    await engine.dispose()


@pytest.fixture
def test_app(session_factory: async_sessionmaker[AsyncSession]) -> FastAPI:
    """FastAPI app without the production lifespan, backed by the test database."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(filmes.router)
    app.include_router(cinemas.router)
    app.include_router(enderecos.router)
    app.include_router(sessoes.router)

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
async def client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test"
    ) as client:
        yield client
