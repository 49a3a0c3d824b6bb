"""Filme use cases."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.converters import filme as filme_converter
from filmesapi.crud import filme as filme_crud
from filmesapi.exceptions import NotFoundError
from filmesapi.models import Filme
from filmesapi.patching import PatchOperation, patch_dto
from filmesapi.schemas.filme import CreateFilmeDto, ReadFilmeDto, UpdateFilmeDto

logger = logging.getLogger(__name__)


async def _get_filme_or_404(db: AsyncSession, filme_id: int) -> Filme:
    filme = await filme_crud.get_filme_by_id(db=db, id=filme_id)
    if filme is None:
        raise NotFoundError("Filme", filme_id)
    return filme


async def create_filme(*, db: AsyncSession, filme_dto: CreateFilmeDto) -> ReadFilmeDto:
    """
    Insert a new filme.

    Args:
        db: Database session
        filme_dto: Already validated creation payload

    Returns:
        The created filme, including its database-assigned ID
    """
    filme = await filme_crud.add_filme(db=db, filme=filme_converter.to_entity(filme_dto))
    await db.commit()
    logger.info(f"Created filme {filme.id} ({filme.titulo!r})")
    return filme_converter.to_read(filme)


async def list_filmes(
    *,
    db: AsyncSession,
    skip: int,
    take: int,
    nome_cinema: str | None = None,
) -> list[ReadFilmeDto]:
    filmes = await filme_crud.get_filmes(db=db, skip=skip, take=take, nome_cinema=nome_cinema)
    return [filme_converter.to_read(filme) for filme in filmes]


async def get_filme(*, db: AsyncSession, filme_id: int) -> ReadFilmeDto:
    filme = await _get_filme_or_404(db, filme_id)
    return filme_converter.to_read(filme)


async def update_filme(*, db: AsyncSession, filme_id: int, filme_dto: UpdateFilmeDto) -> None:
    """Replace every mutable field of an existing filme."""
    filme = await _get_filme_or_404(db, filme_id)
    filme_converter.apply_update(filme_dto, filme)
    await db.commit()
    logger.info(f"Updated filme {filme_id}")


async def patch_filme(
    *,
    db: AsyncSession,
    filme_id: int,
    operations: list[PatchOperation],
) -> None:
    """
    Apply a JSON Patch document to an existing filme.

    The patch targets the filme's update shape. Nothing is written unless the
    whole document applies and the result passes validation.

    Raises:
        NotFoundError: If the filme does not exist
        PatchApplicationError: If an operation cannot be applied
        ValidationError: If the patched filme violates a field constraint
    """
    filme = await _get_filme_or_404(db, filme_id)
    filme_dto = patch_dto(filme_converter.to_update(filme), operations)
    filme_converter.apply_update(filme_dto, filme)
    await db.commit()
    logger.info(f"Patched filme {filme_id} with {len(operations)} operation(s)")


async def delete_filme(*, db: AsyncSession, filme_id: int) -> None:
    filme = await _get_filme_or_404(db, filme_id)
    await filme_crud.delete_filme(db=db, filme=filme)
    await db.commit()
    logger.info(f"Deleted filme {filme_id}")
