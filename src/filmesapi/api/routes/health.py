"""Liveness endpoint for FilmesAPI."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Report that the FilmesAPI process is up; the database is not touched."""
    return {"status": "ok"}
