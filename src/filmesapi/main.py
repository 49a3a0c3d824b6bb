"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filmesapi.api.routes import cinemas, enderecos, filmes, health, sessoes
from filmesapi.config import settings
from filmesapi.database import engine
from filmesapi.exceptions.handlers import register_exception_handlers

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("FilmesAPI starting")

    yield

    # Shutdown: release pooled database connections
    await engine.dispose()
    logger.info("Database engine disposed")


# Create FastAPI app
app = FastAPI(
    title="FilmesAPI",
    description="Filmes, cinemas, enderecos and sessoes records",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(filmes.router)
app.include_router(cinemas.router)
app.include_router(enderecos.router)
app.include_router(sessoes.router)
