"""Cinema use cases."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.converters import cinema as cinema_converter
from filmesapi.crud import cinema as cinema_crud
from filmesapi.exceptions import NotFoundError
from filmesapi.models import Cinema
from filmesapi.patching import PatchOperation, patch_dto
from filmesapi.schemas.cinema import CreateCinemaDto, ReadCinemaDto, UpdateCinemaDto

logger = logging.getLogger(__name__)


async def _get_cinema_or_404(db: AsyncSession, cinema_id: int) -> Cinema:
    cinema = await cinema_crud.get_cinema_by_id(db=db, id=cinema_id)
    if cinema is None:
        raise NotFoundError("Cinema", cinema_id)
    return cinema


async def create_cinema(*, db: AsyncSession, cinema_dto: CreateCinemaDto) -> ReadCinemaDto:
    """Insert a new cinema and its address in one commit."""
    cinema = await cinema_crud.add_cinema(db=db, cinema=cinema_converter.to_entity(cinema_dto))
    await db.commit()
    logger.info(f"Created cinema {cinema.id} ({cinema.nome!r})")
    return cinema_converter.to_read(cinema)


async def list_cinemas(
    *,
    db: AsyncSession,
    skip: int,
    take: int,
    nome_filme: str | None = None,
) -> list[ReadCinemaDto]:
    cinemas = await cinema_crud.get_cinemas(db=db, skip=skip, take=take, nome_filme=nome_filme)
    return [cinema_converter.to_read(cinema) for cinema in cinemas]


async def get_cinema(*, db: AsyncSession, cinema_id: int) -> ReadCinemaDto:
    cinema = await _get_cinema_or_404(db, cinema_id)
    return cinema_converter.to_read(cinema)


async def update_cinema(*, db: AsyncSession, cinema_id: int, cinema_dto: UpdateCinemaDto) -> None:
    cinema = await _get_cinema_or_404(db, cinema_id)
    cinema_converter.apply_update(cinema_dto, cinema)
    await db.commit()
    logger.info(f"Updated cinema {cinema_id}")


async def patch_cinema(
    *,
    db: AsyncSession,
    cinema_id: int,
    operations: list[PatchOperation],
) -> None:
    """
    Apply a JSON Patch document to an existing cinema.

    The target shape nests the address, so paths like ``/endereco/numero``
    reach into it.
    """
    cinema = await _get_cinema_or_404(db, cinema_id)
    cinema_dto = patch_dto(cinema_converter.to_update(cinema), operations)
    cinema_converter.apply_update(cinema_dto, cinema)
    await db.commit()
    logger.info(f"Patched cinema {cinema_id} with {len(operations)} operation(s)")


async def delete_cinema(*, db: AsyncSession, cinema_id: int) -> None:
    cinema = await _get_cinema_or_404(db, cinema_id)
    await cinema_crud.delete_cinema(db=db, cinema=cinema)
    await db.commit()
    logger.info(f"Deleted cinema {cinema_id}")
