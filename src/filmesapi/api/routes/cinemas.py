"""Cinema API endpoints."""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from filmesapi.database import get_db
from filmesapi.patching import PatchOperation
from filmesapi.schemas.cinema import CreateCinemaDto, ReadCinemaDto, UpdateCinemaDto
from filmesapi.services import cinemas as cinemas_service
from filmesapi.validation import body_of

router = APIRouter(prefix="/cinema", tags=["cinema"])


@router.post("", response_model=ReadCinemaDto, status_code=status.HTTP_201_CREATED)
async def create_cinema(
    request: Request,
    response: Response,
    cinema_dto: CreateCinemaDto = Depends(body_of(CreateCinemaDto)),
    db: AsyncSession = Depends(get_db),
) -> ReadCinemaDto:
    cinema = await cinemas_service.create_cinema(db=db, cinema_dto=cinema_dto)
    response.headers["Location"] = str(request.url_for("get_cinema", id=cinema.id))
    return cinema


@router.get("", response_model=list[ReadCinemaDto])
async def get_cinemas(
    skip: int = Query(default=0, ge=0),
    take: int = Query(default=50, ge=0),
    nome_filme: str | None = Query(
        default=None,
        alias="nomeFilme",
        description="Only cinemas with a session of the filme with this exact title",
    ),
    db: AsyncSession = Depends(get_db),
) -> list[ReadCinemaDto]:
    """
    Get a page of cinemas with their addresses and sessions, ordered by ID.
    """
    return await cinemas_service.list_cinemas(
        db=db, skip=skip, take=take, nome_filme=nome_filme or None
    )


@router.get("/{id}", response_model=ReadCinemaDto)
async def get_cinema(id: int, db: AsyncSession = Depends(get_db)) -> ReadCinemaDto:
    return await cinemas_service.get_cinema(db=db, cinema_id=id)


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_cinema(
    id: int,
    cinema_dto: UpdateCinemaDto = Depends(body_of(UpdateCinemaDto)),
    db: AsyncSession = Depends(get_db),
) -> Response:
    await cinemas_service.update_cinema(db=db, cinema_id=id, cinema_dto=cinema_dto)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_cinema(
    id: int,
    operations: list[PatchOperation],
    db: AsyncSession = Depends(get_db),
) -> Response:
    await cinemas_service.patch_cinema(db=db, cinema_id=id, operations=operations)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cinema(id: int, db: AsyncSession = Depends(get_db)) -> Response:
    """Delete a cinema together with its address and sessions."""
    await cinemas_service.delete_cinema(db=db, cinema_id=id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
