"""Sessao use cases."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.converters import sessao as sessao_converter
from filmesapi.crud import cinema as cinema_crud
from filmesapi.crud import filme as filme_crud
from filmesapi.crud import sessao as sessao_crud
from filmesapi.exceptions import FieldViolation, NotFoundError, ValidationError
from filmesapi.models import Cinema, Filme, Sessao
from filmesapi.patching import PatchOperation, patch_dto
from filmesapi.schemas.sessao import (
    CreateSessaoDto,
    ReadSessaoDto,
    SessaoBase,
    UpdateSessaoDto,
)

logger = logging.getLogger(__name__)


async def _get_sessao_or_404(db: AsyncSession, sessao_id: int) -> Sessao:
    sessao = await sessao_crud.get_sessao_by_id(db=db, id=sessao_id)
    if sessao is None:
        raise NotFoundError("Sessao", sessao_id)
    return sessao


async def _get_references(db: AsyncSession, sessao_dto: SessaoBase) -> tuple[Filme, Cinema]:
    """
    Load the filme and cinema a sessao payload points at.

    Unknown references are field violations on the payload, reported
    together; 404 stays reserved for the sessao addressed by the URL.
    """
    filme = await filme_crud.get_filme_by_id(db=db, id=sessao_dto.filme_id)
    cinema = await cinema_crud.get_cinema_by_id(db=db, id=sessao_dto.cinema_id)

    violations = []
    if filme is None:
        violations.append(
            FieldViolation("filmeId", f"Filme com ID {sessao_dto.filme_id} não encontrado.")
        )
    if cinema is None:
        violations.append(
            FieldViolation("cinemaId", f"Cinema com ID {sessao_dto.cinema_id} não encontrado.")
        )
    if violations:
        raise ValidationError(violations)
    return filme, cinema


async def create_sessao(*, db: AsyncSession, sessao_dto: CreateSessaoDto) -> ReadSessaoDto:
    filme, cinema = await _get_references(db, sessao_dto)
    sessao = await sessao_crud.add_sessao(
        db=db,
        sessao=sessao_converter.to_entity(sessao_dto, filme=filme, cinema=cinema),
    )
    await db.commit()
    logger.info(f"Created sessao {sessao.id} (filme {filme.id} at cinema {cinema.id})")
    return sessao_converter.to_read(sessao)


async def list_sessoes(
    *,
    db: AsyncSession,
    skip: int,
    take: int,
    filme_id: int | None = None,
    cinema_id: int | None = None,
) -> list[ReadSessaoDto]:
    sessoes = await sessao_crud.get_sessoes(
        db=db, skip=skip, take=take, filme_id=filme_id, cinema_id=cinema_id
    )
    return [sessao_converter.to_read(sessao) for sessao in sessoes]


async def get_sessao(*, db: AsyncSession, sessao_id: int) -> ReadSessaoDto:
    sessao = await _get_sessao_or_404(db, sessao_id)
    return sessao_converter.to_read(sessao)


async def update_sessao(*, db: AsyncSession, sessao_id: int, sessao_dto: UpdateSessaoDto) -> None:
    sessao = await _get_sessao_or_404(db, sessao_id)
    filme, cinema = await _get_references(db, sessao_dto)
    sessao_converter.apply_update(sessao_dto, sessao, filme=filme, cinema=cinema)
    await db.commit()
    logger.info(f"Updated sessao {sessao_id}")


async def patch_sessao(
    *,
    db: AsyncSession,
    sessao_id: int,
    operations: list[PatchOperation],
) -> None:
    sessao = await _get_sessao_or_404(db, sessao_id)
    sessao_dto = patch_dto(sessao_converter.to_update(sessao), operations)
    filme, cinema = await _get_references(db, sessao_dto)
    sessao_converter.apply_update(sessao_dto, sessao, filme=filme, cinema=cinema)
    await db.commit()
    logger.info(f"Patched sessao {sessao_id} with {len(operations)} operation(s)")


async def delete_sessao(*, db: AsyncSession, sessao_id: int) -> None:
    sessao = await _get_sessao_or_404(db, sessao_id)
    await sessao_crud.delete_sessao(db=db, sessao=sessao)
    await db.commit()
    logger.info(f"Deleted sessao {sessao_id}")
