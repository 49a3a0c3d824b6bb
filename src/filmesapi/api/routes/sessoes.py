"""Sessao API endpoints."""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.database import get_db
from filmesapi.patching import PatchOperation
from filmesapi.schemas.sessao import CreateSessaoDto, ReadSessaoDto, UpdateSessaoDto
from filmesapi.services import sessoes as sessoes_service
from filmesapi.validation import body_of

router = APIRouter(prefix="/sessao", tags=["sessao"])


@router.post("", response_model=ReadSessaoDto, status_code=status.HTTP_201_CREATED)
async def create_sessao(
    request: Request,
    response: Response,
    sessao_dto: CreateSessaoDto = Depends(body_of(CreateSessaoDto)),
    db: AsyncSession = Depends(get_db),
) -> ReadSessaoDto:
    """
    Add a sessao for an existing filme and cinema.

    Unknown ``filmeId``/``cinemaId`` values are reported as validation errors.
    """
    sessao = await sessoes_service.create_sessao(db=db, sessao_dto=sessao_dto)
    response.headers["Location"] = str(request.url_for("get_sessao", id=sessao.id))
    return sessao


@router.get("", response_model=list[ReadSessaoDto])
async def get_sessoes(
    skip: int = Query(default=0, ge=0),
    take: int = Query(default=50, ge=0),
    filme_id: int | None = Query(default=None, alias="filmeId"),
    cinema_id: int | None = Query(default=None, alias="cinemaId"),
    db: AsyncSession = Depends(get_db),
) -> list[ReadSessaoDto]:
    return await sessoes_service.list_sessoes(
        db=db, skip=skip, take=take, filme_id=filme_id, cinema_id=cinema_id
    )


@router.get("/{id}", response_model=ReadSessaoDto)
async def get_sessao(id: int, db: AsyncSession = Depends(get_db)) -> ReadSessaoDto:
    return await sessoes_service.get_sessao(db=db, sessao_id=id)


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_sessao(
    id: int,
    sessao_dto: UpdateSessaoDto = Depends(body_of(UpdateSessaoDto)),
    db: AsyncSession = Depends(get_db),
) -> Response:
    await sessoes_service.update_sessao(db=db, sessao_id=id, sessao_dto=sessao_dto)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_sessao(
    id: int,
    operations: list[PatchOperation],
    db: AsyncSession = Depends(get_db),
) -> Response:
    await sessoes_service.patch_sessao(db=db, sessao_id=id, operations=operations)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sessao(id: int, db: AsyncSession = Depends(get_db)) -> Response:
    await sessoes_service.delete_sessao(db=db, sessao_id=id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
