"""Endereco use cases.

Addresses are created and deleted through their cinema; only reads and
updates are exposed here.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.converters import endereco as endereco_converter
from filmesapi.crud import endereco as endereco_crud
from filmesapi.exceptions import NotFoundError
from filmesapi.models import Endereco
from filmesapi.patching import PatchOperation, patch_dto
from filmesapi.schemas.endereco import ReadEnderecoDto, UpdateEnderecoDto

logger = logging.getLogger(__name__)


async def _get_endereco_or_404(db: AsyncSession, endereco_id: int) -> Endereco:
    endereco = await endereco_crud.get_endereco_by_id(db=db, id=endereco_id)
    if endereco is None:
        raise NotFoundError("Endereco", endereco_id)
    return endereco


async def list_enderecos(*, db: AsyncSession, skip: int, take: int) -> list[ReadEnderecoDto]:
    enderecos = await endereco_crud.get_enderecos(db=db, skip=skip, take=take)
    return [endereco_converter.to_read(endereco) for endereco in enderecos]


async def get_endereco(*, db: AsyncSession, endereco_id: int) -> ReadEnderecoDto:
    endereco = await _get_endereco_or_404(db, endereco_id)
    return endereco_converter.to_read(endereco)


async def update_endereco(
    *,
    db: AsyncSession,
    endereco_id: int,
    endereco_dto: UpdateEnderecoDto,
) -> None:
    endereco = await _get_endereco_or_404(db, endereco_id)
    endereco_converter.apply_update(endereco_dto, endereco)
    await db.commit()
    logger.info(f"Updated endereco {endereco_id}")


async def patch_endereco(
    *,
    db: AsyncSession,
    endereco_id: int,
    operations: list[PatchOperation],
) -> None:
    endereco = await _get_endereco_or_404(db, endereco_id)
    endereco_dto = patch_dto(endereco_converter.to_update(endereco), operations)
    endereco_converter.apply_update(endereco_dto, endereco)
    await db.commit()
    logger.info(f"Patched endereco {endereco_id} with {len(operations)} operation(s)")
