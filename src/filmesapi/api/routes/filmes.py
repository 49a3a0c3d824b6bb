"""Filme API endpoints."""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.database import get_db
from filmesapi.patching import PatchOperation
from filmesapi.schemas.filme import CreateFilmeDto, ReadFilmeDto, UpdateFilmeDto
from filmesapi.services import filmes as filmes_service
from filmesapi.validation import body_of

router = APIRouter(prefix="/filme", tags=["filme"])


@router.post("", response_model=ReadFilmeDto, status_code=status.HTTP_201_CREATED)
async def create_filme(
    request: Request,
    response: Response,
    filme_dto: CreateFilmeDto = Depends(body_of(CreateFilmeDto)),
    db: AsyncSession = Depends(get_db),
) -> ReadFilmeDto:
    """
    Add a filme.

    Returns 201 with the created filme and its address in the Location header.
    """
    filme = await filmes_service.create_filme(db=db, filme_dto=filme_dto)
    response.headers["Location"] = str(request.url_for("get_filme", id=filme.id))
    return filme


@router.get("", response_model=list[ReadFilmeDto])
async def get_filmes(
    skip: int = Query(default=0, ge=0, description="Number of filmes to skip"),
    take: int = Query(default=50, ge=0, description="Maximum number of filmes to return"),
    nome_cinema: str | None = Query(
        default=None,
        alias="nomeCinema",
        description="Only filmes with a session at the cinema with this exact name",
    ),
    db: AsyncSession = Depends(get_db),
) -> list[ReadFilmeDto]:
    """
    Get a page of filmes, ordered by ID.

    Args:
        skip: Number of filmes to skip (default: 0)
        take: Maximum number of filmes to return (default: 50)
        nome_cinema: Optional cinema name filter; empty means unfiltered
        db: Database session

    Returns:
        List of filmes, possibly empty
    """
    return await filmes_service.list_filmes(
        db=db, skip=skip, take=take, nome_cinema=nome_cinema or None
    )


@router.get("/{id}", response_model=ReadFilmeDto)
async def get_filme(id: int, db: AsyncSession = Depends(get_db)) -> ReadFilmeDto:
    return await filmes_service.get_filme(db=db, filme_id=id)


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_filme(
    id: int,
    filme_dto: UpdateFilmeDto = Depends(body_of(UpdateFilmeDto)),
    db: AsyncSession = Depends(get_db),
) -> Response:
    await filmes_service.update_filme(db=db, filme_id=id, filme_dto=filme_dto)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_filme(
    id: int,
    operations: list[PatchOperation],
    db: AsyncSession = Depends(get_db),
) -> Response:
    """
    Partially update a filme with a JSON Patch document.

    Paths address the update shape, e.g. ``[{"op": "replace", "path":
    "/duracao", "value": 120}]``.
    """
    await filmes_service.patch_filme(db=db, filme_id=id, operations=operations)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_filme(id: int, db: AsyncSession = Depends(get_db)) -> Response:
    await filmes_service.delete_filme(db=db, filme_id=id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
