"""Endereco API endpoints.

Addresses are created and removed with their cinema, so there is no POST or
DELETE here.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.database import get_db
from filmesapi.patching import PatchOperation
from filmesapi.schemas.endereco import ReadEnderecoDto, UpdateEnderecoDto
from filmesapi.services import enderecos as enderecos_service
from filmesapi.validation import body_of

router = APIRouter(prefix="/endereco", tags=["endereco"])


@router.get("", response_model=list[ReadEnderecoDto])
async def get_enderecos(
    skip: int = Query(default=0, ge=0),
    take: int = Query(default=50, ge=0),
    db: AsyncSession = Depends(get_db),
) -> list[ReadEnderecoDto]:
    return await enderecos_service.list_enderecos(db=db, skip=skip, take=take)


@router.get("/{id}", response_model=ReadEnderecoDto)
async def get_endereco(id: int, db: AsyncSession = Depends(get_db)) -> ReadEnderecoDto:
    return await enderecos_service.get_endereco(db=db, endereco_id=id)


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_endereco(
    id: int,
    endereco_dto: UpdateEnderecoDto = Depends(body_of(UpdateEnderecoDto)),
    db: AsyncSession = Depends(get_db),
) -> Response:
    await enderecos_service.update_endereco(db=db, endereco_id=id, endereco_dto=endereco_dto)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_endereco(
    id: int,
    operations: list[PatchOperation],
    db: AsyncSession = Depends(get_db),
) -> Response:
    await enderecos_service.patch_endereco(db=db, endereco_id=id, operations=operations)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
